"""
Debates module data models.

These models define the core data structures for the Standoff debate system.
Timestamps are epoch milliseconds, matching what the web client expects.
"""

from enum import Enum
from typing import Optional
from pydantic import Field, model_validator

from shared.models import CamelModel


HOUR_MS = 60 * 60 * 1000


class DebateStatus(str, Enum):
    """Debate lifecycle status."""

    ACTIVE = "active"        # Accepting votes until ends_at
    ENDED = "ended"          # Voting window closed
    CANCELLED = "cancelled"  # Withdrawn by its creator


class ReactionType(str, Enum):
    """Reactions a user can leave on a chat message."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class ResultsFilter(str, Enum):
    """Which debates a results query covers."""

    ALL = "all"
    ACTIVE = "active"
    ENDED = "ended"


class VotingOptions(CamelModel):
    """The two labeled choices of a debate."""

    option1: str = Field(..., min_length=1, description="First option label")
    option2: str = Field(..., min_length=1, description="Second option label")

    def labels(self) -> list[str]:
        return [self.option1, self.option2]


class VoteTally(CamelModel):
    """
    Vote bookkeeping for a debate.

    ``voters`` has set semantics (each id at most once) but is kept as a
    list so the stored JSON is stable. The sum of ``tallies`` always equals
    the number of voters.
    """

    tallies: dict[str, int] = Field(default_factory=dict, description="Count per option label")
    voters: list[str] = Field(default_factory=list, description="Ids of users who voted")

    @property
    def total(self) -> int:
        return sum(self.tallies.values())

    def has_voted(self, voter_id: str) -> bool:
        return voter_id in self.voters


class MessageReactions(CamelModel):
    """Reaction counters for a chat message plus who chose what."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    reactors: dict[str, ReactionType] = Field(
        default_factory=dict,
        description="User id mapped to the reaction that user currently holds",
    )


class ChatMessage(CamelModel):
    """A message in a debate's chat thread."""

    id: str = Field(..., description="Message ID")
    debate_id: str = Field(..., description="Owning debate ID")
    author: str = Field(..., description="Author identifier")
    message: str = Field(..., description="Message text")
    timestamp: int = Field(..., description="Posted at (epoch ms)")
    reactions: MessageReactions = Field(default_factory=MessageReactions)


class Debate(CamelModel):
    """
    Full debate record.

    Includes vote bookkeeping and the complete chat thread.
    """

    id: str = Field(..., description="Debate ID")
    title: str = Field(..., description="Debate title")
    description: str = Field(..., description="What is being debated")
    created_by: str = Field(..., description="Creator identifier")
    created_at: int = Field(..., description="Creation time (epoch ms)")
    ends_at: int = Field(..., description="Voting deadline (epoch ms)")
    status: DebateStatus = Field(..., description="Stored status (refreshed lazily)")
    voting_options: VotingOptions = Field(..., description="The two choices")
    votes: VoteTally = Field(default_factory=VoteTally)
    chat: list[ChatMessage] = Field(default_factory=list)
    category: Optional[str] = Field(None, description="Optional topic category")


class CreateDebateRequest(CamelModel):
    """Request to create a new debate."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    created_by: str = Field(..., min_length=1)
    option1: str = Field(..., min_length=1, max_length=100)
    option2: str = Field(..., min_length=1, max_length=100)
    duration_hours: Optional[float] = Field(
        None,
        gt=0,
        description="Voting window in hours (server default when omitted)",
    )
    category: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="after")
    def _options_differ(self) -> "CreateDebateRequest":
        if self.option1 == self.option2:
            raise ValueError("option1 and option2 must be different")
        return self


class CastVoteRequest(CamelModel):
    """Request to vote on a debate."""

    voter_id: str = Field(..., min_length=1)
    option: str = Field(..., min_length=1)


class CancelDebateRequest(CamelModel):
    """Request to cancel a debate; only its creator may do so."""

    requested_by: str = Field(..., min_length=1)


class PostMessageRequest(CamelModel):
    """Request to post a chat message."""

    author: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, max_length=2000)


class ReactionRequest(CamelModel):
    """Request to toggle a reaction on a chat message."""

    user_id: str = Field(..., min_length=1)
    reaction_type: ReactionType


class DebateResult(CamelModel):
    """A debate with its derived outcome."""

    debate: Debate
    total_votes: int
    percentages: dict[str, int] = Field(
        ...,
        description="Whole-number share of the vote per option label",
    )
    winner: Optional[str] = Field(None, description="Winning label, None on a tie")
    is_tie: bool
    ended: bool


class ResultsStats(CamelModel):
    """Aggregate numbers over ended debates."""

    total_debates: int
    total_votes: int
    total_participants: int


class ResultsSummary(CamelModel):
    """Response for the results view."""

    stats: ResultsStats
    most_popular: list[DebateResult]
    debates: list[DebateResult]
