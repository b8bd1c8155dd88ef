"""
Base repository class for record store access.

Provides a common abstraction layer for all repositories, encapsulating
record store access and the dict-to-model mapping for one collection.
"""

from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from .database import RecordStore


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for record store operations:
    - Record store access via self._store
    - Loading and saving the whole collection as Pydantic models
    - Locating a record by key

    Subclasses set ``collection`` and ``model`` and implement
    domain-specific operations on top of these helpers. Any
    read-modify-write sequence must run inside ``self._store.transaction()``.

    Example:
        class UserRepository(BaseRepository[User]):
            collection = "users"
            model = User

            def get_by_fid(self, fid: int) -> Optional[User]:
                return self._find(lambda u: u.fid == fid)
    """

    collection: str
    model: type[T]

    def __init__(self, store: RecordStore) -> None:
        """
        Initialize the repository with a record store.

        Args:
            store: Record store backend shared by all repositories.
        """
        self._store = store

    def _load_all(self) -> list[T]:
        return [self.model.model_validate(r) for r in self._store.read(self.collection)]

    def _save_all(self, items: list[T]) -> None:
        self._store.write(
            self.collection,
            [item.model_dump(mode="json", by_alias=True) for item in items],
        )

    def _find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self._load_all():
            if predicate(item):
                return item
        return None

    @staticmethod
    def _index_of(items: list[T], predicate: Callable[[T], bool]) -> int:
        """Linear scan; -1 when nothing matches."""
        for i, item in enumerate(items):
            if predicate(item):
                return i
        return -1
