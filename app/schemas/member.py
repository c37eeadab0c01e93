from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.enums import AuthorizationStatusType


class Writer(BaseModel):
    """피드/포스트/댓글 작성자 정보"""
    id: int
    nickname: str
    generation: Optional[int] = None
    profile_image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class MemberSummary(Writer):
    email: Optional[str] = None
    is_admin: bool = False
    authorization_status: AuthorizationStatusType
    created_at: Optional[datetime] = None


class MyProfileResponse(BaseModel):
    member_id: int
    nickname: str
    generation: Optional[int] = None
    profile_image_url: Optional[str] = None
    introduce: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0
    authorization_status: AuthorizationStatusType


class OthersProfileResponse(BaseModel):
    member_id: int
    nickname: str
    generation: Optional[int] = None
    profile_image_url: Optional[str] = None
    introduce: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0
    authorization_status: AuthorizationStatusType
    is_followed: bool = False


class ProfileUpdateRequest(BaseModel):
    nickname: str = Field(min_length=1, max_length=50)
    profile_image_url: Optional[str] = None
    introduce: Optional[str] = Field(default=None, max_length=500)


class AuthorizationRequest(BaseModel):
    generation: int = Field(ge=1)


class AuthorizationStatusUpdateRequest(BaseModel):
    status: AuthorizationStatusType


class FollowMember(BaseModel):
    member_id: int
    nickname: str
    generation: Optional[int] = None
    profile_image_url: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
