"""
User repository for record store access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import User


class UserRepository(BaseRepository[User]):
    """Repository for the "users" collection, keyed by fid."""

    collection = "users"
    model = User

    def get_by_fid(self, fid: int) -> Optional[User]:
        return self._find(lambda u: u.fid == fid)

    def upsert(self, fid: int, updates: dict[str, Any]) -> Optional[User]:
        """
        Merge ``updates`` over the stored user, or insert a new one.

        Args:
            fid: User key.
            updates: Snake_case field values to set.

        Returns:
            The stored user, or None when the user is new and ``updates``
            lacks a username.
        """
        with self._store.transaction():
            users = self._load_all()
            index = self._index_of(users, lambda u: u.fid == fid)

            if index == -1:
                if not updates.get("username"):
                    return None
                user = User(fid=fid, **updates)
                users.append(user)
            else:
                merged = users[index].model_dump()
                merged.update(updates)
                user = User.model_validate(merged)
                users[index] = user

            self._save_all(users)
            return user
