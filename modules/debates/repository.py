"""
Debate repository for record store access.

Encapsulates every read-modify-write on the "debates" collection:
- debate records and lazy status refresh
- vote bookkeeping
- chat messages and reaction toggles

Bookkeeping methods report failures as outcome values rather than raising;
the service layer decides which error a caller sees.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from shared.repository import BaseRepository
from .lifecycle import is_active, needs_refresh
from .models import (
    ChatMessage,
    Debate,
    DebateStatus,
    MessageReactions,
    ReactionType,
)

logger = logging.getLogger(__name__)


class VoteOutcome(str, Enum):
    RECORDED = "recorded"
    DEBATE_NOT_FOUND = "debate_not_found"
    NOT_ACTIVE = "not_active"
    ALREADY_VOTED = "already_voted"


class ReactionOutcome(str, Enum):
    ADDED = "added"
    WITHDRAWN = "withdrawn"
    SWITCHED = "switched"
    DEBATE_NOT_FOUND = "debate_not_found"
    MESSAGE_NOT_FOUND = "message_not_found"


def _decrement(reactions: MessageReactions, kind: ReactionType) -> None:
    if kind == ReactionType.UPVOTE:
        reactions.upvotes = max(0, reactions.upvotes - 1)
    else:
        reactions.downvotes = max(0, reactions.downvotes - 1)


def _increment(reactions: MessageReactions, kind: ReactionType) -> None:
    if kind == ReactionType.UPVOTE:
        reactions.upvotes += 1
    else:
        reactions.downvotes += 1


def apply_reaction(
    reactions: MessageReactions,
    user_id: str,
    kind: ReactionType,
) -> ReactionOutcome:
    """
    Toggle ``user_id``'s reaction in place.

    Repeating the reaction the user already holds withdraws it; choosing
    the other kind moves the user's reaction to it. Counters never go
    below zero.
    """
    previous = reactions.reactors.get(user_id)

    if previous is None:
        reactions.reactors[user_id] = kind
        _increment(reactions, kind)
        return ReactionOutcome.ADDED

    if previous == kind:
        del reactions.reactors[user_id]
        _decrement(reactions, kind)
        return ReactionOutcome.WITHDRAWN

    _decrement(reactions, previous)
    reactions.reactors[user_id] = kind
    _increment(reactions, kind)
    return ReactionOutcome.SWITCHED


class DebateRepository(BaseRepository[Debate]):
    """
    Repository for debate data access.

    All methods return Pydantic models mapped from stored records.

    Note: This repository does NOT enforce product rules such as the
    one-active-debate-per-creator limit. The service layer does, using
    ``transaction()`` to keep the check and the insert together.
    """

    collection = "debates"
    model = Debate

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock across several repository calls."""
        with self._store.transaction():
            yield

    # -------------------------------------------------------------------------
    # Debate records
    # -------------------------------------------------------------------------

    def create_debate(self, debate: Debate) -> Debate:
        """
        Append a new debate record.

        Args:
            debate: Fully populated debate (ID and timestamps already set).

        Returns:
            The stored debate.
        """
        with self._store.transaction():
            debates = self._load_all()
            debates.append(debate)
            self._save_all(debates)
        return debate

    def get_debate_by_id(self, debate_id: str) -> Optional[Debate]:
        """
        Get a debate by ID.

        Returns:
            Debate, or None if not found.
        """
        return self._find(lambda d: d.id == debate_id)

    def list_debates(self) -> list[Debate]:
        """All debates, most recent first."""
        return sorted(self._load_all(), key=lambda d: d.created_at, reverse=True)

    def update_status(self, debate_id: str, status: DebateStatus) -> Optional[Debate]:
        """
        Set a debate's stored status.

        Returns:
            The updated debate, or None if not found.
        """
        with self._store.transaction():
            debates = self._load_all()
            index = self._index_of(debates, lambda d: d.id == debate_id)
            if index == -1:
                return None
            debates[index].status = status
            self._save_all(debates)
            return debates[index]

    def refresh_statuses(self, now: int) -> int:
        """
        Mark every expired active debate as ended.

        Idempotent; the collection is only rewritten when something changed.

        Returns:
            Number of debates transitioned.
        """
        with self._store.transaction():
            debates = self._load_all()
            changed = 0
            for debate in debates:
                if needs_refresh(debate, now):
                    debate.status = DebateStatus.ENDED
                    changed += 1
            if changed:
                self._save_all(debates)
                logger.info(f"Marked {changed} debate(s) as ended")
            return changed

    def has_active_debate_for_creator(self, user_id: str, now: int) -> bool:
        """True iff ``user_id`` created a debate that is still active."""
        with self._store.transaction():
            self.refresh_statuses(now)
            return any(
                d.created_by == user_id and is_active(d, now)
                for d in self._load_all()
            )

    # -------------------------------------------------------------------------
    # Votes
    # -------------------------------------------------------------------------

    def record_vote(
        self,
        debate_id: str,
        voter_id: str,
        option: str,
        now: int,
    ) -> tuple[VoteOutcome, Optional[Debate]]:
        """
        Record one vote for ``option``.

        Args:
            debate_id: Debate to vote on.
            voter_id: Voter identifier; each voter may vote once per debate.
            option: Option label to count the vote for.
            now: Current time in epoch ms.

        Returns:
            The outcome, and the updated debate when the vote was recorded.
        """
        with self._store.transaction():
            debates = self._load_all()
            index = self._index_of(debates, lambda d: d.id == debate_id)
            if index == -1:
                return VoteOutcome.DEBATE_NOT_FOUND, None

            debate = debates[index]
            if not is_active(debate, now):
                return VoteOutcome.NOT_ACTIVE, None
            if debate.votes.has_voted(voter_id):
                return VoteOutcome.ALREADY_VOTED, None

            if option not in debate.votes.tallies:
                logger.warning(
                    f"Vote for unknown option {option!r} on debate {debate_id}; "
                    "starting its tally at zero"
                )
            debate.votes.voters.append(voter_id)
            debate.votes.tallies[option] = debate.votes.tallies.get(option, 0) + 1
            self._save_all(debates)
            return VoteOutcome.RECORDED, debate

    # -------------------------------------------------------------------------
    # Chat
    # -------------------------------------------------------------------------

    def get_messages(self, debate_id: str) -> Optional[list[ChatMessage]]:
        """Chat thread of a debate, or None if the debate does not exist."""
        debate = self.get_debate_by_id(debate_id)
        if debate is None:
            return None
        return debate.chat

    def append_message(
        self,
        debate_id: str,
        message: ChatMessage,
    ) -> Optional[list[ChatMessage]]:
        """
        Append a message to a debate's thread.

        Returns:
            The full updated thread, or None if the debate does not exist.
        """
        with self._store.transaction():
            debates = self._load_all()
            index = self._index_of(debates, lambda d: d.id == debate_id)
            if index == -1:
                return None
            debates[index].chat.append(message)
            self._save_all(debates)
            return debates[index].chat

    def toggle_reaction(
        self,
        debate_id: str,
        message_id: str,
        user_id: str,
        kind: ReactionType,
    ) -> tuple[ReactionOutcome, Optional[list[ChatMessage]]]:
        """
        Toggle a user's reaction on a message.

        Returns:
            The outcome, and the full updated thread when a change was made.
        """
        with self._store.transaction():
            debates = self._load_all()
            index = self._index_of(debates, lambda d: d.id == debate_id)
            if index == -1:
                return ReactionOutcome.DEBATE_NOT_FOUND, None

            chat = debates[index].chat
            message = next((m for m in chat if m.id == message_id), None)
            if message is None:
                return ReactionOutcome.MESSAGE_NOT_FOUND, None

            outcome = apply_reaction(message.reactions, user_id, kind)
            self._save_all(debates)
            return outcome, chat
