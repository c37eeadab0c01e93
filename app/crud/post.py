from typing import Optional

from sqlalchemy import literal
from sqlalchemy.orm import Session, aliased
from sqlalchemy.sql import func

from app.models.enums import CategoryType, ListSortBy
from app.models.follow import Follow
from app.models.member import Member
from app.models.post import Post
from app.models.post_scrap import PostScrap
from app.schemas.pagination import PaginationRequest


def _post_list_base_query(
    db: Session,
    member_id: Optional[int],
    sort_by: ListSortBy = ListSortBy.ALL,
    category: CategoryType = CategoryType.ALL,
    generation: Optional[int] = None,
    writer_id: Optional[int] = None,
):
    """
    포스트 목록 공통 쿼리.

    - 삭제된 포스트와 탈퇴한 작성자의 포스트는 제외합니다.
    - category가 ALL이 아니면 해당 카테고리만 조회합니다.
    - BY_FOLLOW는 member_id가 팔로우하는 작성자의 글만,
      BY_GENERATION은 같은 기수 작성자의 글만 조회합니다.
    """
    query = (
        db.query(Post)
        .join(Member, Post.member_id == Member.id)
        .filter(Post.deleted_at.is_(None), Member.deleted_at.is_(None))
    )

    if category != CategoryType.ALL:
        query = query.filter(Post.category == category.value)

    if sort_by == ListSortBy.BY_FOLLOW:
        query = query.join(
            Follow,
            (Follow.following_id == Member.id) & (Follow.follower_id == member_id)
        )
    elif sort_by == ListSortBy.BY_GENERATION:
        query = query.filter(Member.generation == generation)

    if writer_id is not None:
        query = query.filter(Post.member_id == writer_id)

    return query


def _with_scrap_flag(query, member_id: Optional[int]):
    if member_id is None:
        return query.add_columns(Member, literal(False).label("is_scraped"))

    Scrap = aliased(PostScrap)
    return (
        query
        .outerjoin(Scrap, (Scrap.post_id == Post.id) & (Scrap.member_id == member_id))
        .add_columns(Member, Scrap.id.isnot(None).label("is_scraped"))
    )


def get_post_list(
    db: Session,
    member_id: Optional[int],
    pagination: PaginationRequest,
    sort_by: ListSortBy = ListSortBy.ALL,
    category: CategoryType = CategoryType.ALL,
    generation: Optional[int] = None,
    writer_id: Optional[int] = None,
):
    """(포스트, 작성자, 스크랩 여부) 튜플 목록"""
    query = _post_list_base_query(db, member_id, sort_by, category, generation, writer_id)
    return (
        _with_scrap_flag(query, member_id)
        .order_by(*pagination.ordering(Post.created_at, Post.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_post_list(
    db: Session,
    member_id: Optional[int],
    sort_by: ListSortBy = ListSortBy.ALL,
    category: CategoryType = CategoryType.ALL,
    generation: Optional[int] = None,
    writer_id: Optional[int] = None,
) -> int:
    return _post_list_base_query(db, member_id, sort_by, category, generation, writer_id).count()


def get_post_detail(db: Session, post_id: int, member_id: Optional[int]):
    query = (
        db.query(Post)
        .join(Member, Post.member_id == Member.id)
        .filter(Post.id == post_id)
    )
    return _with_scrap_flag(query, member_id).first()


def get_post(db: Session, post_id: int) -> Optional[Post]:
    return db.query(Post).filter(Post.id == post_id).first()


def _scraped_post_list_base_query(db: Session, member_id: int):
    return (
        db.query(Post)
        .join(PostScrap, (PostScrap.post_id == Post.id) & (PostScrap.member_id == member_id))
        .join(Member, Post.member_id == Member.id)
        .filter(Post.deleted_at.is_(None), Member.deleted_at.is_(None))
    )


def get_scraped_post_list(db: Session, member_id: int, pagination: PaginationRequest):
    """스크랩한 포스트 목록 (스크랩한 순서 기준 정렬)"""
    return (
        _scraped_post_list_base_query(db, member_id)
        .add_columns(Member, literal(True).label("is_scraped"))
        .order_by(*pagination.ordering(PostScrap.created_at, PostScrap.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_scraped_post_list(db: Session, member_id: int) -> int:
    return _scraped_post_list_base_query(db, member_id).count()


def get_random_question(db: Session):
    # MySQL은 RAND(), SQLite/PostgreSQL은 RANDOM()
    random_func = func.rand() if db.get_bind().dialect.name == "mysql" else func.random()
    return (
        db.query(Post.id.label("post_id"), Post.title)
        .filter(
            Post.category == CategoryType.TODAYS_QUESTION.value,
            Post.deleted_at.is_(None)
        )
        .order_by(random_func)
        .limit(1)
        .first()
    )


def get_scrap(db: Session, post_id: int, member_id: int) -> Optional[PostScrap]:
    return db.query(PostScrap).filter(
        PostScrap.post_id == post_id,
        PostScrap.member_id == member_id
    ).first()
