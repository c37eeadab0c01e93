from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from app.models.enums import CategoryType, ListSortBy
from app.schemas.emoji import EmojiSummary
from app.schemas.member import Writer


class HashTagRequest(BaseModel):
    tag_name: str = Field(min_length=1, max_length=50)
    color: Optional[str] = Field(default=None, max_length=20)


class HashTagResponse(BaseModel):
    id: int
    tag_name: str
    color: Optional[str] = None


class HashTagSearchResponse(HashTagResponse):
    post_count: int


class PostRequest(BaseModel):
    category: CategoryType
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    hash_tags: List[HashTagRequest] = []


class PostCreateResponse(BaseModel):
    post_id: int


class PostListFilter(BaseModel):
    sort_by: ListSortBy = ListSortBy.ALL
    category: CategoryType = CategoryType.ALL


class PostResponse(BaseModel):
    id: int
    category: CategoryType
    title: str
    content: str
    view_count: int
    comment_count: int
    emoji_count: int
    created_at: datetime
    is_scraped: bool = False
    hash_tags: List[HashTagResponse] = []
    emojis: List[EmojiSummary] = []
    writer: Writer


class PostDetailResponse(PostResponse):
    is_mine: bool = False


class TodayQuestionResponse(BaseModel):
    post_id: int
    title: str
