import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.crud import member as member_crud
from app.models.enums import AuthorizationStatusType
from app.schemas.member import MemberSummary
from app.schemas.pagination import PaginationRequest, PaginationResponse
from app.services import domain

logger = logging.getLogger(__name__)


def get_members_by_authorization_status(
    db: Session,
    status: AuthorizationStatusType,
    pagination: PaginationRequest,
) -> PaginationResponse[MemberSummary]:
    members = member_crud.get_members_by_authorization_status(db, status.value, pagination)
    total_count = member_crud.count_members_by_authorization_status(db, status.value)
    return PaginationResponse[MemberSummary].of(
        [MemberSummary.model_validate(member) for member in members], pagination, total_count
    )


def set_authorization_status(db: Session, member_id: int, status: AuthorizationStatusType):
    if status not in (AuthorizationStatusType.AUTHORIZED, AuthorizationStatusType.REJECTED):
        raise HTTPException(status_code=400, detail="승인 또는 거절만 할 수 있습니다.")

    member = domain.get_member_is_not_deleted_by_id(db, member_id)
    member.authorization_status = status.value
    db.commit()
    logger.info(f"기수 인증 상태 변경: member_id={member_id}, status={status.value}")
