from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.schemas.member import Writer


class CommentRequest(BaseModel):
    content: str = Field(min_length=1, max_length=1000)


class CommentResponse(BaseModel):
    id: int
    content: str
    heart_count: int
    is_hearted: bool = False
    is_mine: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
    writer: Writer


class CommentCreateResponse(BaseModel):
    comment_id: int
