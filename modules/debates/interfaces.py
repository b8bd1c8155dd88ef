"""
Debates module interface.

This is the core business logic interface for Standoff.
The API layer depends on IDebateService for all debate operations.
"""

from typing import Protocol, runtime_checkable

from .models import (
    ChatMessage,
    CreateDebateRequest,
    Debate,
    ReactionType,
    ResultsFilter,
    ResultsSummary,
)


@runtime_checkable
class IDebateService(Protocol):
    """
    Interface for debate operations.

    This protocol defines the contract that the debates module exposes
    to the API layer and other modules.
    """

    async def create_debate(self, request: CreateDebateRequest) -> Debate:
        """
        Create a new debate in ACTIVE status.

        Args:
            request: Debate title, description, creator and options

        Returns:
            The created debate

        Raises:
            InvalidDurationError: If the duration is out of range
            ActiveDebateExistsError: If the creator already has an active debate
        """
        ...

    async def get_debate(self, debate_id: str) -> Debate:
        """
        Get a debate by ID, with its status refreshed.

        Raises:
            DebateNotFoundError: If the debate doesn't exist
        """
        ...

    async def list_debates(self, include_all: bool = False) -> list[Debate]:
        """
        List debates, most recent first.

        Args:
            include_all: Include ended and cancelled debates

        Returns:
            Active debates, or every debate when include_all is set
        """
        ...

    async def cancel_debate(self, debate_id: str, requested_by: str) -> Debate:
        """
        Cancel an active debate.

        Raises:
            DebateNotFoundError: If the debate doesn't exist
            DebateAccessDeniedError: If requested_by is not the creator
            DebateNotActiveError: If the debate is no longer active
        """
        ...

    async def vote(self, debate_id: str, voter_id: str, option: str) -> Debate:
        """
        Cast one vote.

        Returns:
            The updated debate

        Raises:
            DebateNotFoundError: If the debate doesn't exist
            DebateNotActiveError: If voting has closed
            AlreadyVotedError: If voter_id has already voted
        """
        ...

    async def list_messages(self, debate_id: str) -> list[ChatMessage]:
        """
        Get a debate's chat thread in posting order.

        Raises:
            DebateNotFoundError: If the debate doesn't exist
        """
        ...

    async def post_message(
        self,
        debate_id: str,
        author: str,
        message: str,
    ) -> list[ChatMessage]:
        """
        Append a chat message.

        Returns:
            The full updated thread

        Raises:
            DebateNotFoundError: If the debate doesn't exist
            ValidationError: If author or message is empty
        """
        ...

    async def react(
        self,
        debate_id: str,
        message_id: str,
        user_id: str,
        kind: ReactionType,
    ) -> list[ChatMessage]:
        """
        Toggle a reaction on a chat message.

        Returns:
            The full updated thread

        Raises:
            DebateNotFoundError: If the debate doesn't exist
            MessageNotFoundError: If the message doesn't exist
        """
        ...

    async def get_results(self, results_filter: ResultsFilter) -> ResultsSummary:
        """Winners and aggregate statistics for the results view."""
        ...
