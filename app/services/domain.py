"""
여러 서비스에서 공유하는 도메인 검증 로직.

각 함수는 조건을 만족하는 엔티티를 반환하거나 HTTPException을 발생시킵니다.
"""
import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import case
from sqlalchemy.orm import Session

from app.crud import comment as comment_crud
from app.crud import feed as feed_crud
from app.crud import member as member_crud
from app.crud import post as post_crud
from app.models.enums import NotificationType
from app.models.feed import Feed
from app.models.member import Member
from app.models.notification import Notification
from app.models.post import Post

logger = logging.getLogger(__name__)


def get_post_is_not_deleted(db: Session, post_id: int) -> Post:
    post = post_crud.get_post(db, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="해당 포스트를 찾을 수 없습니다.")
    if post.deleted_at is not None:
        raise HTTPException(status_code=410, detail="삭제된 포스트입니다.")
    return post


def get_feed_is_not_deleted(db: Session, feed_id: int) -> Feed:
    feed = feed_crud.get_feed(db, feed_id)
    if not feed:
        raise HTTPException(status_code=404, detail="해당 피드를 찾을 수 없습니다.")
    if feed.deleted_at is not None:
        raise HTTPException(status_code=410, detail="삭제된 피드입니다.")
    return feed


def get_member_is_not_deleted_by_id(db: Session, member_id: int) -> Member:
    member = member_crud.get_member(db, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="해당 사용자를 찾을 수 없습니다.")
    if member.deleted_at is not None:
        raise HTTPException(status_code=410, detail="탈퇴한 유저입니다.")
    return member


def get_comment_is_not_deleted(db: Session, comment_model, parent_column, parent_id: int, comment_id: int):
    comment = comment_crud.get_comment(db, comment_model, parent_column, parent_id, comment_id)
    if not comment:
        raise HTTPException(status_code=404, detail="해당 댓글을 찾을 수 없습니다.")
    if comment.deleted_at is not None:
        raise HTTPException(status_code=410, detail="해당 댓글은 삭제되었습니다.")
    return comment


def check_owner(owner_id: int, member_id: int, detail: str = "권한이 없습니다."):
    if owner_id != member_id:
        raise HTTPException(status_code=403, detail=detail)


def save_notification(
    db: Session,
    received_member_id: int,
    send_member: Member,
    notification_type: NotificationType,
    content: str,
    feed_id: Optional[int] = None,
    post_id: Optional[int] = None,
    comment_id: Optional[int] = None,
) -> Optional[Notification]:
    """
    알림을 세션에 추가합니다. 커밋은 호출한 서비스에서 수행합니다.
    자기 자신에게는 알림을 보내지 않습니다.
    """
    if received_member_id == send_member.id:
        return None

    notification = Notification(
        received_member_id=received_member_id,
        send_member_id=send_member.id,
        type=notification_type.value,
        feed_id=feed_id,
        post_id=post_id,
        comment_id=comment_id,
        content=content,
    )
    db.add(notification)
    logger.info(f"알림 생성: {notification_type.value} {send_member.id} -> {received_member_id}")
    return notification


def increase_counter(entity, field: str):
    """UPDATE ... SET field = field + 1 형태로 카운터를 증가시킵니다."""
    column = getattr(type(entity), field)
    setattr(entity, field, column + 1)


def decrease_counter(entity, field: str):
    """카운터를 1 감소시키되 0 아래로 내려가지 않게 합니다."""
    column = getattr(type(entity), field)
    setattr(entity, field, case((column > 0, column - 1), else_=0))
