from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.member import MessageResponse
from app.schemas.notification import NotificationListResponse
from app.schemas.pagination import PaginationRequest, get_pagination
from app.services import notification as notification_service
from app.services.auth import get_current_member_id

router = APIRouter()


@router.get("/", response_model=NotificationListResponse, summary="알림 목록 조회")
def get_notification_list(
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    받은 알림 목록을 조회합니다. 읽지 않은 알림 수(unread_count)가 함께 반환됩니다.
    """
    return notification_service.get_notification_list(db, current_member_id, pagination)


@router.patch("/read-all", response_model=MessageResponse, summary="알림 전체 읽음 처리")
def read_all_notifications(
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    count = notification_service.read_all_notifications(db, current_member_id)
    return MessageResponse(message=f"{count}개의 알림을 읽음 처리했습니다.")


@router.patch("/{notification_id}/read", response_model=MessageResponse, summary="알림 읽음 처리")
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    notification_service.read_notification(db, notification_id, current_member_id)
    return MessageResponse(message="알림을 읽음 처리했습니다.")


@router.delete("/{notification_id}", response_model=MessageResponse, summary="알림 삭제")
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    notification_service.delete_notification(db, notification_id, current_member_id)
    return MessageResponse(message="알림이 삭제되었습니다.")
