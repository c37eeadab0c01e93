from typing import Optional

from sqlalchemy.orm import Session

from app.models.member import Member
from app.schemas.pagination import PaginationRequest


def get_member(db: Session, member_id: int) -> Optional[Member]:
    return db.query(Member).filter(Member.id == member_id).first()


def get_member_by_github_id(db: Session, github_id: str) -> Optional[Member]:
    return db.query(Member).filter(Member.github_id == github_id).first()


def create_member(db: Session, github_id: str, nickname: str, email: Optional[str], profile_image_url: Optional[str]) -> Member:
    member = Member(
        github_id=github_id,
        nickname=nickname,
        email=email,
        profile_image_url=profile_image_url,
    )
    db.add(member)
    db.flush()
    return member


def _members_by_status_query(db: Session, status: str):
    return db.query(Member).filter(
        Member.authorization_status == status,
        Member.deleted_at.is_(None)
    )


def get_members_by_authorization_status(db: Session, status: str, pagination: PaginationRequest):
    return (
        _members_by_status_query(db, status)
        .order_by(*pagination.ordering(Member.created_at, Member.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_members_by_authorization_status(db: Session, status: str) -> int:
    return _members_by_status_query(db, status).count()
