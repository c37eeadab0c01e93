from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.db.base import get_db
from app.models.enums import AuthorizationStatusType
from app.schemas.member import AuthorizationStatusUpdateRequest, MemberSummary, MessageResponse
from app.schemas.pagination import PaginationRequest, PaginationResponse, get_pagination
from app.services import admin as admin_service
from app.services.auth import get_admin_member_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/members", response_model=PaginationResponse[MemberSummary], summary="인증 상태별 회원 목록")
def get_members(
    status: AuthorizationStatusType = AuthorizationStatusType.PENDING,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    admin_member_id: int = Depends(get_admin_member_id)
):
    """
    관리자 전용. 기본값으로 기수 인증을 요청한(PENDING) 회원 목록을 반환합니다.
    """
    return admin_service.get_members_by_authorization_status(db, status, pagination)


@router.patch("/members/{member_id}/authorization", response_model=MessageResponse, summary="기수 인증 승인/거절")
def set_authorization_status(
    member_id: int,
    request: AuthorizationStatusUpdateRequest,
    db: Session = Depends(get_db),
    admin_member_id: int = Depends(get_admin_member_id)
):
    admin_service.set_authorization_status(db, member_id, request.status)
    logger.info(f"관리자 {admin_member_id}가 회원 {member_id}의 인증 상태를 변경했습니다.")
    return MessageResponse(message="인증 상태가 변경되었습니다.")
