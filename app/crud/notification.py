from typing import Optional

from sqlalchemy.orm import Session

from app.models.notification import Notification
from app.schemas.pagination import PaginationRequest


def get_notification_list(db: Session, member_id: int, pagination: PaginationRequest):
    return (
        db.query(Notification)
        .filter(Notification.received_member_id == member_id)
        .order_by(*pagination.ordering(Notification.created_at, Notification.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_notification_list(db: Session, member_id: int) -> int:
    return db.query(Notification).filter(Notification.received_member_id == member_id).count()


def count_unread_notifications(db: Session, member_id: int) -> int:
    return db.query(Notification).filter(
        Notification.received_member_id == member_id,
        Notification.is_read == False
    ).count()


def get_notification(db: Session, notification_id: int) -> Optional[Notification]:
    return db.query(Notification).filter(Notification.id == notification_id).first()


def mark_all_as_read(db: Session, member_id: int) -> int:
    return (
        db.query(Notification)
        .filter(
            Notification.received_member_id == member_id,
            Notification.is_read == False
        )
        .update({Notification.is_read: True}, synchronize_session=False)
    )
