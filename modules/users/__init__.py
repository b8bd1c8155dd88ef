"""
Users module.

Stores participant profiles and their aggregate stats.

Public API:
- IUserService: Interface for user operations
- User: Stored profile
- UpsertUserRequest: Fields to create or update a profile
"""

from .interfaces import IUserService
from .models import User, UpsertUserRequest
from .exceptions import UserNotFoundError, UsernameRequiredError

__all__ = [
    "IUserService",
    "User",
    "UpsertUserRequest",
    "UserNotFoundError",
    "UsernameRequiredError",
]
