from typing import List
import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import follow as follow_crud
from app.models.enums import NotificationType
from app.models.follow import Follow
from app.schemas.member import FollowMember
from app.services import domain

logger = logging.getLogger(__name__)


def follow(db: Session, member_id: int, target_member_id: int):
    """
    member_id가 target_member_id를 팔로우합니다.

    - 자기 자신은 팔로우할 수 없습니다.
    - 같은 회원을 두 번 팔로우할 수 없습니다.
    """
    if member_id == target_member_id:
        raise HTTPException(status_code=400, detail="자기 자신은 팔로우할 수 없습니다.")

    sender = domain.get_member_is_not_deleted_by_id(db, member_id)
    domain.get_member_is_not_deleted_by_id(db, target_member_id)

    if follow_crud.get_follow(db, member_id, target_member_id):
        raise HTTPException(status_code=400, detail="이미 팔로우 중입니다.")

    db.add(Follow(follower_id=member_id, following_id=target_member_id))
    domain.save_notification(
        db,
        received_member_id=target_member_id,
        send_member=sender,
        notification_type=NotificationType.FOLLOW,
        content=f"{sender.nickname}님이 회원님을 팔로우하기 시작했습니다.",
    )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="이미 팔로우 중입니다.")
    logger.info(f"팔로우: {member_id} -> {target_member_id}")


def unfollow(db: Session, member_id: int, target_member_id: int):
    existing = follow_crud.get_follow(db, member_id, target_member_id)
    if not existing:
        raise HTTPException(status_code=404, detail="팔로우 중인 회원이 아닙니다.")

    db.delete(existing)
    db.commit()
    logger.info(f"언팔로우: {member_id} -> {target_member_id}")


def get_follower_list(db: Session, member_id: int) -> List[FollowMember]:
    domain.get_member_is_not_deleted_by_id(db, member_id)
    return [FollowMember(**row._asdict()) for row in follow_crud.get_follower_list(db, member_id)]


def get_following_list(db: Session, member_id: int) -> List[FollowMember]:
    domain.get_member_is_not_deleted_by_id(db, member_id)
    return [FollowMember(**row._asdict()) for row in follow_crud.get_following_list(db, member_id)]
