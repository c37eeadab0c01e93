from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from app.schemas.emoji import EmojiSummary
from app.schemas.member import Writer


# 사용자 입력용 기본 스키마
class FeedRequest(BaseModel):
    content: str = Field(min_length=1)
    image_urls: List[str] = []


class FeedCreateResponse(BaseModel):
    feed_id: int


# 피드 응답 스키마
class FeedResponse(BaseModel):
    id: int
    content: str
    view_count: int
    comment_count: int
    emoji_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    image_urls: List[str] = []
    emojis: List[EmojiSummary] = []
    writer: Writer


class FeedDetailResponse(FeedResponse):
    is_mine: bool = False
