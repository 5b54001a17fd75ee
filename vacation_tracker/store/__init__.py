"""
Document stores holding settings, vacation requests and holidays per user.
"""

from vacation_tracker.data.schemas import Config
from vacation_tracker.store.base import (
    DocumentSnapshot,
    DocumentStore,
    StoreError,
    Subscription,
)
from vacation_tracker.store.json_store import JsonDocumentStore
from vacation_tracker.store.memory import InMemoryDocumentStore


def create_store(config: Config) -> DocumentStore:
    """Build the store backend selected in the configuration."""
    if config.store_backend == "memory":
        return InMemoryDocumentStore()
    return JsonDocumentStore(config.store_path)


__all__ = [
    "DocumentSnapshot",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonDocumentStore",
    "StoreError",
    "Subscription",
    "create_store",
]
