"""
Record store backends and factory.

A record store holds named collections ("debates", "users") of
JSON-compatible dicts. Two backends are provided:

- MemoryRecordStore: process memory, empty on startup, lost on restart.
- JsonFileRecordStore: one flat JSON array file per collection, rewritten
  wholesale on every write.

Repositories perform read-modify-write cycles inside ``store.transaction()``
so callers on the event loop and on worker threads cannot interleave
and lose updates.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Protocol, runtime_checkable

from .config import get_settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)

COLLECTIONS = ("debates", "users")

Record = dict[str, Any]


@runtime_checkable
class RecordStore(Protocol):
    """Interface every record store backend implements."""

    def read(self, collection: str) -> list[Record]:
        """Return a copy of every record in the collection."""
        ...

    def write(self, collection: str, records: list[Record]) -> None:
        """Replace the whole collection."""
        ...

    def transaction(self) -> Any:
        """Context manager serializing a read-modify-write cycle."""
        ...


class _LockingStore:
    """Shared re-entrant lock handling for the concrete backends."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield


class MemoryRecordStore(_LockingStore):
    """Keeps collections in process memory."""

    def __init__(self) -> None:
        super().__init__()
        self._collections: dict[str, list[Record]] = {name: [] for name in COLLECTIONS}

    def read(self, collection: str) -> list[Record]:
        with self._lock:
            return copy.deepcopy(self._collections.get(collection, []))

    def write(self, collection: str, records: list[Record]) -> None:
        with self._lock:
            self._collections[collection] = copy.deepcopy(records)


class JsonFileRecordStore(_LockingStore):
    """
    Persists each collection to ``<data_dir>/<collection>.json``.

    Missing files are created as empty arrays on startup. Writes go to a
    temporary file in the same directory and are moved into place, so a
    crash mid-write never leaves a truncated collection behind.
    """

    def __init__(self, data_dir: str | Path) -> None:
        super().__init__()
        self._data_dir = Path(data_dir)
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            for name in COLLECTIONS:
                path = self._path(name)
                if not path.exists():
                    path.write_text("[]", encoding="utf-8")
        except OSError as e:
            raise StorageError(
                f"Could not initialize data directory: {self._data_dir}",
                collection="*",
                details={"reason": str(e)},
            ) from e

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def read(self, collection: str) -> list[Record]:
        path = self._path(collection)
        with self._lock:
            if not path.exists():
                return []
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Failed to read {collection} from {path}: {e}")
                raise StorageError(
                    f"Failed to read {collection}",
                    collection=collection,
                ) from e

        if not isinstance(data, list):
            raise StorageError(
                f"Corrupt {collection} file: expected a JSON array",
                collection=collection,
            )
        return data

    def write(self, collection: str, records: list[Record]) -> None:
        path = self._path(collection)
        with self._lock:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{collection}.", suffix=".tmp", dir=self._data_dir
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(records, fh, indent=2)
                os.replace(tmp_name, path)
            except OSError as e:
                logger.error(f"Failed to write {collection} to {path}: {e}")
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise StorageError(
                    f"Failed to write {collection}",
                    collection=collection,
                ) from e


# Module-level store cache
_store: Optional[RecordStore] = None


def get_record_store() -> RecordStore:
    """
    Get the process-wide record store.

    The backend is chosen by ``STORAGE_BACKEND`` ("memory" or "file");
    the file backend writes under ``DATA_DIR``.

    Returns:
        The cached record store instance
    """
    global _store

    if _store is None:
        settings = get_settings()
        if settings.storage_backend == "memory":
            _store = MemoryRecordStore()
        else:
            _store = JsonFileRecordStore(settings.data_dir)
        logger.info(f"Using {settings.storage_backend} record store")

    return _store


def reset_store_cache() -> None:
    """
    Reset the cached record store.

    Useful for testing or when configuration changes.
    """
    global _store
    _store = None
