from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional

from app.models.enums import NotificationType
from app.schemas.pagination import PaginationMeta


class NotificationResponse(BaseModel):
    id: int
    type: NotificationType
    send_member_id: int
    feed_id: Optional[int] = None
    post_id: Optional[int] = None
    comment_id: Optional[int] = None
    content: str
    is_read: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class NotificationListResponse(BaseModel):
    data: List[NotificationResponse]
    meta: PaginationMeta
    unread_count: int
