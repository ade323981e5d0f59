"""
JSON Document Store - whole-file persistence for one document

Each document (users.json, orders.json) is read and written as a whole.
Read-modify-write cycles go through update(), which holds a per-document
lock so two requests in this process cannot lose each other's writes.

Author: Fish Parque
Date: 2026-10-19
"""
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Type, TypeVar, Union

from storefront.core.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonDocumentStore:
    """
    One JSON document on disk.

    Reads fail open: a missing, empty, unreadable or wrongly-shaped file
    reads as an empty document of the expected type. Writes that fail
    raise StorageError.
    """

    def __init__(self, path: Union[str, Path], document_type: Type = dict):
        self.path = Path(path)
        self.document_type = document_type
        self.lock = threading.RLock()

    def _empty(self):
        return self.document_type()

    def read(self) -> Any:
        """Load the whole document, or an empty one if it can't be used"""
        if not self.path.exists():
            return self._empty()

        try:
            text = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {self.path}: {e}; treating as empty")
            return self._empty()

        if text == "":
            return self._empty()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt JSON in {self.path}: {e}; treating as empty")
            return self._empty()

        if not isinstance(data, self.document_type):
            logger.warning(
                f"Unexpected document type in {self.path}: {type(data).__name__}; treating as empty"
            )
            return self._empty()

        return data

    def write(self, data: Any) -> None:
        """Replace the whole document"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise StorageError() from e

    def update(self, mutate: Callable[[Any], T]) -> T:
        """
        Read, mutate in memory, write back - all under the document lock.

        mutate receives the current document and returns a result that is
        passed back to the caller. If it raises, nothing is written.
        """
        with self.lock:
            data = self.read()
            result = mutate(data)
            self.write(data)
            return result

    def snapshot(self) -> Any:
        """Read the document under the lock (no write)"""
        with self.lock:
            return self.read()
