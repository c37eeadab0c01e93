from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.db.base import get_db
from app.schemas.member import FollowMember, MessageResponse
from app.services import follow as follow_service
from app.services.auth import get_current_member_id

router = APIRouter()


@router.post("/{member_id}", response_model=MessageResponse, status_code=201, summary="팔로우")
def follow(
    member_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    member_id 회원을 팔로우합니다. 팔로우된 회원에게 알림이 전송됩니다.
    """
    follow_service.follow(db, current_member_id, member_id)
    return MessageResponse(message="팔로우했습니다.")


@router.delete("/{member_id}", response_model=MessageResponse, summary="언팔로우")
def unfollow(
    member_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    follow_service.unfollow(db, current_member_id, member_id)
    return MessageResponse(message="팔로우를 취소했습니다.")


@router.get("/{member_id}/followers", response_model=List[FollowMember], summary="팔로워 목록")
def get_follower_list(member_id: int, db: Session = Depends(get_db)):
    return follow_service.get_follower_list(db, member_id)


@router.get("/{member_id}/followings", response_model=List[FollowMember], summary="팔로잉 목록")
def get_following_list(member_id: int, db: Session = Depends(get_db)):
    return follow_service.get_following_list(db, member_id)
