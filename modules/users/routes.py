"""
User profile endpoints.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_user_service

from .interfaces import IUserService
from .models import UpsertUserRequest, User

router = APIRouter()


@router.get("/{fid}", response_model=User)
async def get_user(
    fid: int = Path(..., ge=0, description="Numeric user identifier"),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Get a user's profile and stats.
    """
    return await service.get_user(fid)


@router.put("/{fid}", response_model=User)
async def upsert_user(
    *,
    fid: int = Path(..., ge=0, description="Numeric user identifier"),
    request: UpsertUserRequest,
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Create or update a user profile.

    Omitted fields keep their stored values.
    """
    return await service.upsert_user(fid, request)
