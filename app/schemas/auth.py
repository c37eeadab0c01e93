from pydantic import BaseModel
from typing import Optional


class LoginResponse(BaseModel):
    message: str
    member_id: int
    nickname: str
    is_new_member: bool
    access_token: str
    token_type: str


class GithubUser(BaseModel):
    """GitHub /user 응답 중 사용하는 필드"""
    id: int
    login: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
