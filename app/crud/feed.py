from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from app.models.feed import Feed, FeedImage
from app.models.member import Member
from app.schemas.pagination import PaginationRequest


def _feed_list_base_query(db: Session, writer_id: Optional[int] = None):
    query = (
        db.query(Feed)
        .join(Member, Feed.member_id == Member.id)
        .filter(Feed.deleted_at.is_(None), Member.deleted_at.is_(None))
    )
    if writer_id is not None:
        query = query.filter(Feed.member_id == writer_id)
    return query


def get_feed_list(db: Session, pagination: PaginationRequest, writer_id: Optional[int] = None):
    """
    삭제되지 않은 피드를 (피드, 작성자) 튜플 목록으로 반환합니다.
    이미지는 selectinload로 한 번에 로드합니다.
    """
    return (
        _feed_list_base_query(db, writer_id)
        .add_columns(Member)
        .options(selectinload(Feed.images))
        .order_by(*pagination.ordering(Feed.created_at, Feed.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_feed_list(db: Session, writer_id: Optional[int] = None) -> int:
    return _feed_list_base_query(db, writer_id).count()


def get_feed(db: Session, feed_id: int) -> Optional[Feed]:
    return db.query(Feed).filter(Feed.id == feed_id).first()


def get_feed_detail(db: Session, feed_id: int):
    """피드와 작성자를 함께 조회 (작성자 탈퇴 여부 확인용)"""
    return (
        db.query(Feed, Member)
        .join(Member, Feed.member_id == Member.id)
        .options(selectinload(Feed.images))
        .filter(Feed.id == feed_id)
        .first()
    )


def replace_feed_images(feed: Feed, image_urls: List[str]):
    """기존 이미지는 delete-orphan으로 삭제됩니다."""
    feed.images = [FeedImage(image_url=url) for url in image_urls]
