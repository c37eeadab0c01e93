from typing import Optional

from sqlalchemy.orm import Session

from app.models.follow import Follow
from app.models.member import Member


def get_follow(db: Session, follower_id: int, following_id: int) -> Optional[Follow]:
    return db.query(Follow).filter(
        Follow.follower_id == follower_id,
        Follow.following_id == following_id
    ).first()


def _follow_member_columns(db: Session):
    return db.query(
        Member.id.label("member_id"),
        Member.nickname,
        Member.generation,
        Member.profile_image_url,
    )


def get_follower_list(db: Session, member_id: int):
    """member_id를 팔로우하는 회원 목록"""
    return (
        _follow_member_columns(db)
        .select_from(Follow)
        .join(Member, Follow.follower_id == Member.id)
        .filter(Follow.following_id == member_id, Member.deleted_at.is_(None))
        .order_by(Follow.created_at.desc(), Follow.id.desc())
        .all()
    )


def get_following_list(db: Session, member_id: int):
    """member_id가 팔로우하는 회원 목록"""
    return (
        _follow_member_columns(db)
        .select_from(Follow)
        .join(Member, Follow.following_id == Member.id)
        .filter(Follow.follower_id == member_id, Member.deleted_at.is_(None))
        .order_by(Follow.created_at.desc(), Follow.id.desc())
        .all()
    )


def get_follower_count(db: Session, member_id: int) -> int:
    return (
        db.query(Follow)
        .join(Member, Follow.follower_id == Member.id)
        .filter(Follow.following_id == member_id, Member.deleted_at.is_(None))
        .count()
    )


def get_following_count(db: Session, member_id: int) -> int:
    return (
        db.query(Follow)
        .join(Member, Follow.following_id == Member.id)
        .filter(Follow.follower_id == member_id, Member.deleted_at.is_(None))
        .count()
    )
