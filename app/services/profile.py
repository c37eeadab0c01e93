from typing import Optional
import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.crud import follow as follow_crud
from app.crud import member as member_crud
from app.crud import profile as profile_crud
from app.models.enums import AuthorizationStatusType
from app.schemas.member import (
    AuthorizationRequest,
    MyProfileResponse,
    OthersProfileResponse,
    ProfileUpdateRequest,
)
from app.services import domain

logger = logging.getLogger(__name__)


def get_my_profile(db: Session, member_id: int) -> MyProfileResponse:
    member = domain.get_member_is_not_deleted_by_id(db, member_id)
    return MyProfileResponse(
        member_id=member.id,
        nickname=member.nickname,
        generation=member.generation,
        profile_image_url=member.profile_image_url,
        introduce=member.introduce,
        follower_count=follow_crud.get_follower_count(db, member_id),
        following_count=follow_crud.get_following_count(db, member_id),
        authorization_status=member.authorization_status,
    )


def get_others_profile(db: Session, member_id: int, my_member_id: Optional[int]) -> OthersProfileResponse:
    domain.get_member_is_not_deleted_by_id(db, member_id)
    member, is_followed = profile_crud.get_others_profile(db, member_id, my_member_id)

    return OthersProfileResponse(
        member_id=member.id,
        nickname=member.nickname,
        generation=member.generation,
        profile_image_url=member.profile_image_url,
        introduce=member.introduce,
        follower_count=follow_crud.get_follower_count(db, member_id),
        following_count=follow_crud.get_following_count(db, member_id),
        authorization_status=member.authorization_status,
        is_followed=bool(is_followed),
    )


def modify_my_profile(db: Session, member_id: int, request: ProfileUpdateRequest):
    member = member_crud.get_member(db, member_id)
    if not member or member.deleted_at is not None:
        raise HTTPException(status_code=404, detail="해당 사용자를 찾을 수 없습니다.")

    member.set_profile_info(request.nickname, request.profile_image_url, request.introduce)
    db.commit()
    logger.info(f"프로필 수정 완료: member_id={member_id}")


def request_authorization(db: Session, member_id: int, request: AuthorizationRequest):
    """기수 인증 요청. 관리자가 승인하기 전까지 PENDING 상태가 됩니다."""
    member = domain.get_member_is_not_deleted_by_id(db, member_id)
    if member.authorization_status == AuthorizationStatusType.AUTHORIZED.value:
        raise HTTPException(status_code=400, detail="이미 인증된 회원입니다.")

    member.generation = request.generation
    member.authorization_status = AuthorizationStatusType.PENDING.value
    db.commit()
    logger.info(f"기수 인증 요청: member_id={member_id}, generation={request.generation}")
