from typing import Optional

from sqlalchemy import literal
from sqlalchemy.orm import Session, aliased

from app.models.member import Member
from app.schemas.pagination import PaginationRequest


def _comment_list_base_query(db: Session, comment_model, parent_column, parent_id: int):
    return (
        db.query(comment_model)
        .join(Member, comment_model.member_id == Member.id)
        .filter(
            parent_column == parent_id,
            comment_model.deleted_at.is_(None),
            Member.deleted_at.is_(None)
        )
    )


def get_comment_list(
    db: Session,
    comment_model,
    heart_model,
    parent_column,
    parent_id: int,
    member_id: Optional[int],
    pagination: PaginationRequest,
):
    """
    살아있는 댓글 목록을 (댓글, 작성자, 하트 여부) 튜플로 반환합니다.
    """
    query = _comment_list_base_query(db, comment_model, parent_column, parent_id)

    if member_id is not None:
        Heart = aliased(heart_model)
        query = (
            query
            .outerjoin(
                Heart,
                (Heart.comment_id == comment_model.id) & (Heart.member_id == member_id)
            )
            .add_columns(Member, Heart.id.isnot(None).label("is_hearted"))
        )
    else:
        query = query.add_columns(Member, literal(False).label("is_hearted"))

    return (
        query
        .order_by(*pagination.ordering(comment_model.created_at, comment_model.id))
        .offset(pagination.skip)
        .limit(pagination.take)
        .all()
    )


def count_comment_list(db: Session, comment_model, parent_column, parent_id: int) -> int:
    return _comment_list_base_query(db, comment_model, parent_column, parent_id).count()


def get_comment(db: Session, comment_model, parent_column, parent_id: int, comment_id: int):
    return db.query(comment_model).filter(
        comment_model.id == comment_id,
        parent_column == parent_id
    ).first()


def get_heart(db: Session, heart_model, comment_id: int, member_id: int):
    return db.query(heart_model).filter(
        heart_model.comment_id == comment_id,
        heart_model.member_id == member_id
    ).first()
