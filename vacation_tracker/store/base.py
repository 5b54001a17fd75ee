"""
Document store interface with live snapshot subscriptions.

Paths alternate collection and document segments, so a path with an odd
number of segments names a collection and an even number names a document:

    artifacts/{app_id}/users/{user_id}/vacation_requests           (collection)
    artifacts/{app_id}/users/{user_id}/vacation_requests/{doc_id}  (document)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple


class StoreError(Exception):
    """A store read or write failed."""


@dataclass(frozen=True)
class DocumentSnapshot:
    """One document as delivered to subscribers. `data` is None if it does not exist."""

    id: str
    data: Optional[Dict[str, Any]]

    @property
    def exists(self) -> bool:
        return self.data is not None


# Collection subscribers receive List[DocumentSnapshot], document subscribers a DocumentSnapshot.
SnapshotCallback = Callable[[Any], None]


def split_path(path: str) -> List[str]:
    segments = [s for s in path.strip("/").split("/") if s]
    if not segments:
        raise ValueError("Empty store path")
    return segments


def is_collection_path(path: str) -> bool:
    return len(split_path(path)) % 2 == 1


def split_document_path(path: str) -> Tuple[str, str]:
    """Split a document path into (collection path, document id)."""
    segments = split_path(path)
    if len(segments) % 2 != 0:
        raise ValueError(f"Not a document path: {path}")
    return "/".join(segments[:-1]), segments[-1]


class Subscription:
    """Handle for a live subscription. Cancel it to stop receiving snapshots."""

    def __init__(self, store: "DocumentStore", path: str, callback: SnapshotCallback):
        self.store = store
        self.path = path
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self.store._remove_subscription(self)


class DocumentStore(ABC):
    """Per-user document store used by the controller."""

    @abstractmethod
    async def add(self, collection_path: str, data: Dict[str, Any]) -> str:
        """Create a document with a store-assigned id and return the id."""

    @abstractmethod
    async def set(self, document_path: str, data: Dict[str, Any], merge: bool = False) -> None:
        """Write a document; with merge=True existing fields not in `data` are kept."""

    @abstractmethod
    async def delete(self, document_path: str) -> None:
        """Delete a document. Deleting a missing document is not an error."""

    @abstractmethod
    def subscribe(self, path: str, callback: SnapshotCallback) -> Subscription:
        """Deliver the full contents of `path` now and after every change."""

    @abstractmethod
    def _remove_subscription(self, subscription: Subscription) -> None:
        """Stop delivering to a cancelled subscription."""
