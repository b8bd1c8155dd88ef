"""
Users module data models.
"""

from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class User(CamelModel):
    """A participant profile with aggregate activity stats."""

    fid: int = Field(..., ge=0, description="Numeric user identifier")
    username: str = Field(..., min_length=1, description="Handle")
    display_name: Optional[str] = Field(None, description="Display name")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    total_debates: int = Field(default=0, ge=0, description="Debates created")
    total_votes: int = Field(default=0, ge=0, description="Votes cast")
    win_rate: Optional[float] = Field(None, ge=0, le=100, description="Percent of winning votes")


class UpsertUserRequest(CamelModel):
    """
    Fields to create or update a user.

    Omitted fields keep their stored value. ``username`` is required
    when the user does not exist yet.
    """

    username: Optional[str] = Field(None, min_length=1)
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    total_debates: Optional[int] = Field(None, ge=0)
    total_votes: Optional[int] = Field(None, ge=0)
    win_rate: Optional[float] = Field(None, ge=0, le=100)
