"""
Debates module.

Handles debate lifecycle, voting, chat and reactions.

Public API:
- IDebateService: Interface for debate operations
- Debate: Full debate with votes and chat
- ChatMessage: A message in a debate thread
- CreateDebateRequest: Request to create a debate
"""

from .interfaces import IDebateService
from .models import (
    Debate,
    DebateStatus,
    VotingOptions,
    VoteTally,
    ChatMessage,
    MessageReactions,
    ReactionType,
    CreateDebateRequest,
    CastVoteRequest,
    CancelDebateRequest,
    PostMessageRequest,
    ReactionRequest,
    ResultsFilter,
    DebateResult,
    ResultsStats,
    ResultsSummary,
)
from .exceptions import (
    DebateNotFoundError,
    MessageNotFoundError,
    InvalidDurationError,
    ActiveDebateExistsError,
    DebateNotActiveError,
    AlreadyVotedError,
    DebateAccessDeniedError,
)

__all__ = [
    # Interface
    "IDebateService",
    # Models
    "Debate",
    "DebateStatus",
    "VotingOptions",
    "VoteTally",
    "ChatMessage",
    "MessageReactions",
    "ReactionType",
    "CreateDebateRequest",
    "CastVoteRequest",
    "CancelDebateRequest",
    "PostMessageRequest",
    "ReactionRequest",
    "ResultsFilter",
    "DebateResult",
    "ResultsStats",
    "ResultsSummary",
    # Exceptions
    "DebateNotFoundError",
    "MessageNotFoundError",
    "InvalidDurationError",
    "ActiveDebateExistsError",
    "DebateNotActiveError",
    "AlreadyVotedError",
    "DebateAccessDeniedError",
]
