from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    bio: str = ""
    profile_picture_url: Optional[str] = None
    created_at: datetime


class ProfileUpdateRequest(CamelModel):
    """DTO for profile update; omitted fields keep their current value"""
    name: Optional[str] = Field(default=None, max_length=200)
    bio: Optional[str] = Field(default=None, max_length=500)
    profile_picture_url: Optional[str] = Field(default=None, max_length=2048)


class ProfileUpdateResponse(CamelModel):
    message: str = "Profile updated successfully"
    user: UserResponse
