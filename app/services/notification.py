import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.crud import notification as notification_crud
from app.models.notification import Notification
from app.schemas.notification import NotificationListResponse, NotificationResponse
from app.schemas.pagination import PaginationMeta, PaginationRequest

logger = logging.getLogger(__name__)


def get_notification_list(db: Session, member_id: int, pagination: PaginationRequest) -> NotificationListResponse:
    notifications = notification_crud.get_notification_list(db, member_id, pagination)
    total_count = notification_crud.count_notification_list(db, member_id)
    return NotificationListResponse(
        data=[NotificationResponse.model_validate(n) for n in notifications],
        meta=PaginationMeta.of(pagination, total_count),
        unread_count=notification_crud.count_unread_notifications(db, member_id),
    )


def _get_my_notification(db: Session, notification_id: int, member_id: int) -> Notification:
    notification = notification_crud.get_notification(db, notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail="알림을 찾을 수 없습니다.")
    if notification.received_member_id != member_id:
        raise HTTPException(status_code=403, detail="알림에 대한 권한이 없습니다.")
    return notification


def read_notification(db: Session, notification_id: int, member_id: int):
    notification = _get_my_notification(db, notification_id, member_id)
    notification.is_read = True
    db.commit()


def read_all_notifications(db: Session, member_id: int) -> int:
    updated = notification_crud.mark_all_as_read(db, member_id)
    db.commit()
    logger.info(f"알림 전체 읽음 처리: member_id={member_id}, count={updated}")
    return updated


def delete_notification(db: Session, notification_id: int, member_id: int):
    notification = _get_my_notification(db, notification_id, member_id)
    db.delete(notification)
    db.commit()
