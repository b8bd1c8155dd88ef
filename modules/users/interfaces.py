"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from .models import UpsertUserRequest, User


@runtime_checkable
class IUserService(Protocol):
    """Interface for user profile operations."""

    async def get_user(self, fid: int) -> User:
        """
        Get a user by fid.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def upsert_user(self, fid: int, request: UpsertUserRequest) -> User:
        """
        Create the user, or merge the provided fields over the stored one.

        Raises:
            UsernameRequiredError: If creating a user without a username
        """
        ...
