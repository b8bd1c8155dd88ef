"""
Debate API endpoints.

Provides REST endpoints for debates, voting, chat and reactions.
Domain errors raised by the service propagate to the handlers registered
in api.errors, which turn them into ``{"error": ...}`` responses.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_debate_service

from .interfaces import IDebateService
from .models import (
    CancelDebateRequest,
    CastVoteRequest,
    ChatMessage,
    CreateDebateRequest,
    Debate,
    PostMessageRequest,
    ReactionRequest,
    ResultsFilter,
    ResultsSummary,
)

router = APIRouter()


@router.get("", response_model=list[Debate])
async def list_debates(
    all: bool = Query(default=False, description="Include ended and cancelled debates"),
    service: IDebateService = Depends(get_debate_service),
) -> list[Debate]:
    """
    List debates, most recent first.

    Only active debates are returned unless ``all=true``.
    """
    return await service.list_debates(include_all=all)


@router.post("", response_model=Debate, status_code=201)
async def create_debate(
    request: CreateDebateRequest,
    service: IDebateService = Depends(get_debate_service),
) -> Debate:
    """
    Create a new debate.

    A creator may only have one active debate at a time.
    """
    return await service.create_debate(request)


@router.get("/results", response_model=ResultsSummary)
async def get_results(
    filter: ResultsFilter = Query(default=ResultsFilter.ENDED, description="Debates to list"),
    service: IDebateService = Depends(get_debate_service),
) -> ResultsSummary:
    """
    Winners, vote shares and overall statistics.
    """
    return await service.get_results(filter)


@router.get("/{debate_id}", response_model=Debate)
async def get_debate(
    debate_id: str,
    service: IDebateService = Depends(get_debate_service),
) -> Debate:
    """
    Get a specific debate with votes and chat.
    """
    return await service.get_debate(debate_id)


@router.post("/{debate_id}", response_model=Debate)
async def vote(
    debate_id: str,
    request: CastVoteRequest,
    service: IDebateService = Depends(get_debate_service),
) -> Debate:
    """
    Vote for one of the debate's options.

    Fails with 400 if the voter already voted or the debate has closed.
    """
    return await service.vote(debate_id, request.voter_id, request.option)


@router.post("/{debate_id}/cancel", response_model=Debate)
async def cancel_debate(
    debate_id: str,
    request: CancelDebateRequest,
    service: IDebateService = Depends(get_debate_service),
) -> Debate:
    """
    Cancel an active debate. Only its creator may do this.
    """
    return await service.cancel_debate(debate_id, request.requested_by)


@router.get("/{debate_id}/chat", response_model=list[ChatMessage])
async def list_messages(
    debate_id: str,
    service: IDebateService = Depends(get_debate_service),
) -> list[ChatMessage]:
    """
    Get the debate's chat thread in posting order.
    """
    return await service.list_messages(debate_id)


@router.post("/{debate_id}/chat", response_model=list[ChatMessage])
async def post_message(
    debate_id: str,
    request: PostMessageRequest,
    service: IDebateService = Depends(get_debate_service),
) -> list[ChatMessage]:
    """
    Post a chat message and return the updated thread.
    """
    return await service.post_message(debate_id, request.author, request.message)


@router.post(
    "/{debate_id}/messages/{message_id}/reactions",
    response_model=list[ChatMessage],
)
async def react(
    debate_id: str,
    message_id: str,
    request: ReactionRequest,
    service: IDebateService = Depends(get_debate_service),
) -> list[ChatMessage]:
    """
    Toggle an upvote or downvote on a message.

    Repeating the same reaction withdraws it; picking the other one
    switches to it.
    """
    return await service.react(
        debate_id, message_id, request.user_id, request.reaction_type
    )
