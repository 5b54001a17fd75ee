"""
Document store persisted to a single JSON file.

File layout: {"collections": {"<collection path>": {"<doc id>": {...}}}}
Writes go to a temporary file that replaces the target, so readers never
observe a partial file.
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from vacation_tracker.store.base import StoreError
from vacation_tracker.store.memory import InMemoryDocumentStore

logger = logging.getLogger(__name__)


class JsonDocumentStore(InMemoryDocumentStore):
    """In-memory store that saves every committed write to a JSON file."""

    def __init__(self, file_path: str):
        """
        Initialize the store, loading existing data.

        Args:
            file_path: Path of the JSON file. Created on first write.

        Raises:
            StoreError: If the file exists but cannot be read or parsed.
        """
        super().__init__()
        self.file_path = Path(file_path)
        self._collections = self._load()

    def _load(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        if not self.file_path.exists():
            logger.debug(f"Store file not found: {self.file_path}, starting empty")
            return {}

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Error reading store file {self.file_path}: {e}") from e

        collections = raw.get("collections", {}) if isinstance(raw, dict) else {}
        logger.debug(f"Loaded {len(collections)} collections from: {self.file_path}")
        return collections

    async def add(self, collection_path: str, data: Dict[str, Any]) -> str:
        backup = copy.deepcopy(self._collections)
        try:
            return await super().add(collection_path, data)
        except StoreError:
            self._collections = backup
            raise

    async def set(self, document_path: str, data: Dict[str, Any], merge: bool = False) -> None:
        backup = copy.deepcopy(self._collections)
        try:
            await super().set(document_path, data, merge=merge)
        except StoreError:
            self._collections = backup
            raise

    async def delete(self, document_path: str) -> None:
        backup = copy.deepcopy(self._collections)
        try:
            await super().delete(document_path)
        except StoreError:
            self._collections = backup
            raise

    def _persist(self) -> None:
        """Atomically write all collections to disk."""
        payload = {"collections": self._collections}
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=self.file_path.name, suffix=".tmp", dir=str(self.file_path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StoreError(f"Error writing store file {self.file_path}: {e}") from e
        logger.debug(f"Saved store to: {self.file_path}")
