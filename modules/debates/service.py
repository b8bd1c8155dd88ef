"""
Debates service implementation.

Applies the debate lifecycle and voting/chat rules on top of
DebateRepository. Wall-clock time comes from an injectable clock so the
lazy active -> ended transition can be tested deterministically.
"""

import logging
import uuid
from typing import Callable, Optional

from shared.config import Settings, get_settings
from shared.exceptions import ValidationError
from shared.models import now_ms

from .exceptions import (
    ActiveDebateExistsError,
    AlreadyVotedError,
    DebateAccessDeniedError,
    DebateNotActiveError,
    DebateNotFoundError,
    InvalidDurationError,
    MessageNotFoundError,
)
from .interfaces import IDebateService
from .lifecycle import compute_ends_at, is_active
from .models import (
    ChatMessage,
    CreateDebateRequest,
    Debate,
    DebateStatus,
    ReactionType,
    ResultsFilter,
    ResultsSummary,
    VoteTally,
    VotingOptions,
)
from .repository import DebateRepository, ReactionOutcome, VoteOutcome
from .results import summarize

logger = logging.getLogger(__name__)


def generate_id(prefix: str, now: int) -> str:
    """Opaque record ID: creation timestamp plus a random suffix."""
    return f"{prefix}_{now}_{uuid.uuid4().hex[:9]}"


class DebateService(IDebateService):
    """
    Debate service backed by the record store.

    Implements IDebateService protocol.
    """

    def __init__(
        self,
        repository: DebateRepository,
        settings: Optional[Settings] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self._repository = repository
        self._settings = settings or get_settings()
        self._clock = clock

    async def create_debate(self, request: CreateDebateRequest) -> Debate:
        """Create a debate unless its creator already runs an active one."""
        duration = request.duration_hours
        if duration is None:
            duration = self._settings.default_duration_hours
        if duration <= 0 or duration > self._settings.max_duration_hours:
            raise InvalidDurationError(duration, self._settings.max_duration_hours)

        now = self._clock()
        debate = Debate(
            id=generate_id("debate", now),
            title=request.title,
            description=request.description,
            created_by=request.created_by,
            created_at=now,
            ends_at=compute_ends_at(now, duration),
            status=DebateStatus.ACTIVE,
            voting_options=VotingOptions(option1=request.option1, option2=request.option2),
            votes=VoteTally(tallies={request.option1: 0, request.option2: 0}),
            category=request.category,
        )

        with self._repository.transaction():
            if self._repository.has_active_debate_for_creator(request.created_by, now):
                logger.info(f"Rejected debate from {request.created_by}: already has an active debate")
                raise ActiveDebateExistsError(request.created_by)
            self._repository.create_debate(debate)

        logger.info(f"Created debate {debate.id} by {debate.created_by}, ends at {debate.ends_at}")
        return debate

    async def get_debate(self, debate_id: str) -> Debate:
        """Get a debate by ID after refreshing statuses."""
        self._repository.refresh_statuses(self._clock())
        debate = self._repository.get_debate_by_id(debate_id)
        if debate is None:
            raise DebateNotFoundError(debate_id)
        return debate

    async def list_debates(self, include_all: bool = False) -> list[Debate]:
        """List active debates, or all of them."""
        now = self._clock()
        self._repository.refresh_statuses(now)
        debates = self._repository.list_debates()
        if include_all:
            return debates
        return [d for d in debates if is_active(d, now)]

    async def cancel_debate(self, debate_id: str, requested_by: str) -> Debate:
        """Cancel an active debate on behalf of its creator."""
        now = self._clock()
        with self._repository.transaction():
            self._repository.refresh_statuses(now)
            debate = self._repository.get_debate_by_id(debate_id)
            if debate is None:
                raise DebateNotFoundError(debate_id)
            if debate.created_by != requested_by:
                raise DebateAccessDeniedError(debate_id, requested_by)
            if not is_active(debate, now):
                raise DebateNotActiveError(debate_id)
            updated = self._repository.update_status(debate_id, DebateStatus.CANCELLED)

        logger.info(f"Debate {debate_id} cancelled by {requested_by}")
        return updated  # type: ignore[return-value]

    async def vote(self, debate_id: str, voter_id: str, option: str) -> Debate:
        """Record a vote, translating rejected outcomes into errors."""
        outcome, debate = self._repository.record_vote(
            debate_id, voter_id, option, self._clock()
        )

        if outcome == VoteOutcome.DEBATE_NOT_FOUND:
            raise DebateNotFoundError(debate_id)
        if outcome == VoteOutcome.NOT_ACTIVE:
            logger.info(f"Rejected vote by {voter_id} on {debate_id}: debate not active")
            raise DebateNotActiveError(debate_id)
        if outcome == VoteOutcome.ALREADY_VOTED:
            logger.info(f"Rejected vote by {voter_id} on {debate_id}: already voted")
            raise AlreadyVotedError(debate_id, voter_id)

        logger.info(f"Recorded vote by {voter_id} on {debate_id} for {option!r}")
        return debate  # type: ignore[return-value]

    async def list_messages(self, debate_id: str) -> list[ChatMessage]:
        messages = self._repository.get_messages(debate_id)
        if messages is None:
            raise DebateNotFoundError(debate_id)
        return messages

    async def post_message(
        self,
        debate_id: str,
        author: str,
        message: str,
    ) -> list[ChatMessage]:
        """Append a message with zeroed reactions to the debate's thread."""
        author = author.strip()
        message = message.strip()
        if not author or not message:
            raise ValidationError(
                "Missing required fields: author, message",
                code="MISSING_FIELDS",
            )

        now = self._clock()
        chat_message = ChatMessage(
            id=generate_id("msg", now),
            debate_id=debate_id,
            author=author,
            message=message,
            timestamp=now,
        )
        messages = self._repository.append_message(debate_id, chat_message)
        if messages is None:
            raise DebateNotFoundError(debate_id)

        logger.debug(f"Message {chat_message.id} posted to {debate_id} by {author}")
        return messages

    async def react(
        self,
        debate_id: str,
        message_id: str,
        user_id: str,
        kind: ReactionType,
    ) -> list[ChatMessage]:
        """Toggle a user's reaction on a message."""
        outcome, messages = self._repository.toggle_reaction(
            debate_id, message_id, user_id, kind
        )

        if outcome == ReactionOutcome.DEBATE_NOT_FOUND:
            raise DebateNotFoundError(debate_id)
        if outcome == ReactionOutcome.MESSAGE_NOT_FOUND:
            raise MessageNotFoundError(debate_id, message_id)

        logger.debug(
            f"Reaction {kind.value} by {user_id} on {message_id}: {outcome.value}"
        )
        return messages  # type: ignore[return-value]

    async def get_results(
        self,
        results_filter: ResultsFilter = ResultsFilter.ENDED,
    ) -> ResultsSummary:
        now = self._clock()
        self._repository.refresh_statuses(now)
        return summarize(
            self._repository.list_debates(),
            now,
            results_filter=results_filter,
            top_n=self._settings.results_top_n,
        )
