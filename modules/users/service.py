"""
Users service implementation.
"""

import logging

from .exceptions import UserNotFoundError, UsernameRequiredError
from .interfaces import IUserService
from .models import UpsertUserRequest, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User profiles backed by the record store."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, fid: int) -> User:
        user = self._repository.get_by_fid(fid)
        if user is None:
            raise UserNotFoundError(fid)
        return user

    async def upsert_user(self, fid: int, request: UpsertUserRequest) -> User:
        updates = request.model_dump(exclude_none=True)
        user = self._repository.upsert(fid, updates)
        if user is None:
            raise UsernameRequiredError(fid)

        logger.info(f"Upserted user {fid} ({user.username})")
        return user
