from pydantic import BaseModel, Field


class EmojiRequest(BaseModel):
    emoji: str = Field(min_length=1, max_length=20)


class EmojiSummary(BaseModel):
    emoji: str
    count: int
    is_clicked: bool = False
