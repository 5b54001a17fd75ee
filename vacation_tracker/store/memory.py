"""
In-memory document store.
"""

import copy
import logging
import uuid
from typing import Any, Dict, List

from vacation_tracker.store.base import (
    DocumentSnapshot,
    DocumentStore,
    SnapshotCallback,
    Subscription,
    is_collection_path,
    split_document_path,
    split_path,
)

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """Keeps collections in dictionaries; documents keep insertion order."""

    def __init__(self):
        """Initialize an empty store."""
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._subscriptions: List[Subscription] = []

    async def add(self, collection_path: str, data: Dict[str, Any]) -> str:
        collection_path = self._collection_key(collection_path)
        doc_id = uuid.uuid4().hex[:20]
        self._collections.setdefault(collection_path, {})[doc_id] = copy.deepcopy(data)
        logger.debug(f"Added document {doc_id} to {collection_path}")
        self._committed(collection_path, doc_id)
        return doc_id

    async def set(self, document_path: str, data: Dict[str, Any], merge: bool = False) -> None:
        collection_path, doc_id = split_document_path(document_path)
        documents = self._collections.setdefault(collection_path, {})
        if merge and doc_id in documents:
            documents[doc_id] = {**documents[doc_id], **copy.deepcopy(data)}
        else:
            documents[doc_id] = copy.deepcopy(data)
        logger.debug(f"Set document {document_path} (merge={merge})")
        self._committed(collection_path, doc_id)

    async def delete(self, document_path: str) -> None:
        collection_path, doc_id = split_document_path(document_path)
        documents = self._collections.get(collection_path, {})
        if documents.pop(doc_id, None) is not None:
            logger.debug(f"Deleted document {document_path}")
        self._committed(collection_path, doc_id)

    def subscribe(self, path: str, callback: SnapshotCallback) -> Subscription:
        subscription = Subscription(self, path, callback)
        self._subscriptions.append(subscription)
        logger.debug(f"Subscribed to {path}")
        self._deliver(subscription)
        return subscription

    def _remove_subscription(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"Unsubscribed from {subscription.path}")

    def snapshot(self, path: str) -> Any:
        """Current contents of a collection (list) or a document."""
        if is_collection_path(path):
            documents = self._collections.get(self._collection_key(path), {})
            return [
                DocumentSnapshot(id=doc_id, data=copy.deepcopy(data))
                for doc_id, data in documents.items()
            ]
        collection_path, doc_id = split_document_path(path)
        data = self._collections.get(collection_path, {}).get(doc_id)
        return DocumentSnapshot(id=doc_id, data=copy.deepcopy(data))

    def _committed(self, collection_path: str, doc_id: str) -> None:
        """Persist hook for subclasses, then notify affected subscribers."""
        self._persist()
        document_path = f"{collection_path}/{doc_id}"
        for subscription in list(self._subscriptions):
            path = "/".join(split_path(subscription.path))
            if path in (collection_path, document_path):
                self._deliver(subscription)

    def _persist(self) -> None:
        pass

    def _deliver(self, subscription: Subscription) -> None:
        if subscription.active:
            subscription.callback(self.snapshot(subscription.path))

    def _collection_key(self, collection_path: str) -> str:
        if not is_collection_path(collection_path):
            raise ValueError(f"Not a collection path: {collection_path}")
        return "/".join(split_path(collection_path))
