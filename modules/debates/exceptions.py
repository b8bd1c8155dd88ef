"""
Debates module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    BusinessRuleError,
    AuthorizationError,
)


class DebateNotFoundError(NotFoundError):
    """Raised when a debate is not found."""

    def __init__(self, debate_id: str):
        super().__init__(
            "Debate not found",
            code="DEBATE_NOT_FOUND",
            details={"debate_id": debate_id},
        )


class MessageNotFoundError(NotFoundError):
    """Raised when a chat message is not found in a debate."""

    def __init__(self, debate_id: str, message_id: str):
        super().__init__(
            "Message not found",
            code="MESSAGE_NOT_FOUND",
            details={"debate_id": debate_id, "message_id": message_id},
        )


class InvalidDurationError(ValidationError):
    """Raised when the requested voting window is out of range."""

    def __init__(self, duration_hours: float, max_hours: float):
        super().__init__(
            f"durationHours must be greater than 0 and at most {max_hours:g}",
            code="INVALID_DURATION",
            details={"duration_hours": duration_hours, "max_hours": max_hours},
        )


class ActiveDebateExistsError(BusinessRuleError):
    """Raised when a creator already has an active debate."""

    def __init__(self, user_id: str):
        super().__init__(
            "User already has an active debate.",
            code="ACTIVE_DEBATE_EXISTS",
            details={"user_id": user_id},
        )


class DebateNotActiveError(BusinessRuleError):
    """Raised when voting on, or cancelling, a debate that is no longer active."""

    def __init__(self, debate_id: str):
        super().__init__(
            "Debate is not active",
            code="DEBATE_NOT_ACTIVE",
            details={"debate_id": debate_id},
        )


class AlreadyVotedError(BusinessRuleError):
    """Raised when a voter tries to vote twice on the same debate."""

    def __init__(self, debate_id: str, voter_id: str):
        super().__init__(
            "Voter has already voted on this debate",
            code="ALREADY_VOTED",
            details={"debate_id": debate_id, "voter_id": voter_id},
        )


class DebateAccessDeniedError(AuthorizationError):
    """Raised when a user tries to manage a debate they did not create."""

    def __init__(self, debate_id: str, user_id: str):
        super().__init__(
            "Only the creator can modify this debate",
            code="DEBATE_ACCESS_DENIED",
            details={"debate_id": debate_id, "user_id": user_id},
        )
