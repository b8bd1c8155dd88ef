"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, fid: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"fid": fid},
        )


class UsernameRequiredError(ValidationError):
    """Raised when creating a user without a username."""

    def __init__(self, fid: int):
        super().__init__(
            "Missing required fields: username",
            code="USERNAME_REQUIRED",
            details={"fid": fid},
        )
