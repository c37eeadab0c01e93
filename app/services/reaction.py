"""
피드와 포스트가 공유하는 반응 로직 (조회수, 이모지, 댓글, 댓글 하트).

카운터(view_count, emoji_count, comment_count, heart_count)는
자식 행을 추가/삭제하는 같은 트랜잭션 안에서 함께 갱신됩니다.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import comment as comment_crud
from app.crud import emoji as emoji_crud
from app.schemas.comment import CommentResponse
from app.schemas.member import Writer
from app.schemas.pagination import PaginationRequest, PaginationResponse
from app.services import domain
from app.services.target import ReactionTarget

logger = logging.getLogger(__name__)


def _commit(db: Session, action: str, duplicate_detail: Optional[str] = None):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if duplicate_detail:
            logger.warning(f"{action} 중복 요청: {str(e.orig)}")
            raise HTTPException(status_code=400, detail=duplicate_detail)
        logger.error(f"{action} 중 무결성 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"{action} 중 오류 발생: {str(e)}")
    except Exception as e:
        db.rollback()
        logger.error(f"{action} 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"{action} 중 오류 발생: {str(e)}")


def increase_view_count(db: Session, target: ReactionTarget, target_id: int, member_id: int):
    """작성자 본인의 조회는 집계하지 않습니다."""
    entity = target.get_is_not_deleted(db, target_id)
    if entity.member_id == member_id:
        return

    db.add(target.view_model(**{target.foreign_key: target_id, "member_id": member_id}))
    domain.increase_counter(entity, "view_count")
    _commit(db, f"{target.label} 조회수 증가")


def add_emoji(db: Session, target: ReactionTarget, target_id: int, member_id: int, emoji: str):
    entity = target.get_is_not_deleted(db, target_id)
    sender = domain.get_member_is_not_deleted_by_id(db, member_id)

    existing = emoji_crud.get_member_emoji(
        db, target.emoji_model, target.column(target.emoji_model), target_id, member_id, emoji
    )
    if existing:
        raise HTTPException(status_code=400, detail="이미 등록한 이모지입니다.")

    db.add(target.emoji_model(**{target.foreign_key: target_id, "member_id": member_id, "emoji": emoji}))
    domain.increase_counter(entity, "emoji_count")
    domain.save_notification(
        db,
        received_member_id=entity.member_id,
        send_member=sender,
        notification_type=target.emoji_notification,
        content=f"{sender.nickname}님이 회원님의 {target.label}에 이모지를 남겼습니다.",
        **{target.foreign_key: target_id},
    )
    _commit(db, "이모지 등록", duplicate_detail="이미 등록한 이모지입니다.")
    logger.info(f"{target.label} 이모지 등록: {target.foreign_key}={target_id}, member_id={member_id}, emoji={emoji}")


def remove_emoji(db: Session, target: ReactionTarget, target_id: int, member_id: int, emoji: str):
    entity = target.get_is_not_deleted(db, target_id)

    emoji_info = emoji_crud.get_member_emoji(
        db, target.emoji_model, target.column(target.emoji_model), target_id, member_id, emoji
    )
    if not emoji_info:
        raise HTTPException(status_code=404, detail="해당 이모지를 찾을 수 없습니다.")

    db.delete(emoji_info)
    domain.decrease_counter(entity, "emoji_count")
    _commit(db, "이모지 삭제")


def get_comment_list(
    db: Session,
    target: ReactionTarget,
    target_id: int,
    member_id: Optional[int],
    pagination: PaginationRequest,
) -> PaginationResponse[CommentResponse]:
    target.get_is_not_deleted(db, target_id)

    parent_column = target.column(target.comment_model)
    rows = comment_crud.get_comment_list(
        db, target.comment_model, target.heart_model, parent_column, target_id, member_id, pagination
    )
    total_count = comment_crud.count_comment_list(db, target.comment_model, parent_column, target_id)

    comments = [
        CommentResponse(
            id=comment.id,
            content=comment.content,
            heart_count=comment.heart_count,
            is_hearted=bool(is_hearted),
            is_mine=member_id is not None and comment.member_id == member_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            writer=Writer.model_validate(writer),
        )
        for comment, writer, is_hearted in rows
    ]
    return PaginationResponse[CommentResponse].of(comments, pagination, total_count)


def write_comment(db: Session, target: ReactionTarget, target_id: int, member_id: int, content: str) -> int:
    entity = target.get_is_not_deleted(db, target_id)
    sender = domain.get_member_is_not_deleted_by_id(db, member_id)

    comment = target.comment_model(**{target.foreign_key: target_id, "member_id": member_id, "content": content})
    db.add(comment)
    domain.increase_counter(entity, "comment_count")
    db.flush()

    domain.save_notification(
        db,
        received_member_id=entity.member_id,
        send_member=sender,
        notification_type=target.comment_notification,
        content=f"{sender.nickname}님이 회원님의 {target.label}에 댓글을 남겼습니다.",
        comment_id=comment.id,
        **{target.foreign_key: target_id},
    )
    comment_id = comment.id
    _commit(db, "댓글 작성")
    logger.info(f"{target.label} 댓글 작성: {target.foreign_key}={target_id}, comment_id={comment_id}")
    return comment_id


def modify_comment(db: Session, target: ReactionTarget, target_id: int, comment_id: int, member_id: int, content: str):
    target.get_is_not_deleted(db, target_id)
    comment = domain.get_comment_is_not_deleted(
        db, target.comment_model, target.column(target.comment_model), target_id, comment_id
    )
    domain.check_owner(comment.member_id, member_id, "접근 권한이 없습니다.")

    comment.content = content
    _commit(db, "댓글 수정")


def delete_comment(db: Session, target: ReactionTarget, target_id: int, comment_id: int, member_id: int):
    entity = target.get_is_not_deleted(db, target_id)
    comment = domain.get_comment_is_not_deleted(
        db, target.comment_model, target.column(target.comment_model), target_id, comment_id
    )
    domain.check_owner(comment.member_id, member_id, "접근 권한이 없습니다.")

    comment.deleted_at = datetime.now(timezone.utc)
    domain.decrease_counter(entity, "comment_count")
    _commit(db, "댓글 삭제")
    logger.info(f"{target.label} 댓글 삭제: comment_id={comment_id}")


def heart_comment(db: Session, target: ReactionTarget, target_id: int, comment_id: int, member_id: int):
    target.get_is_not_deleted(db, target_id)
    comment = domain.get_comment_is_not_deleted(
        db, target.comment_model, target.column(target.comment_model), target_id, comment_id
    )

    if comment_crud.get_heart(db, target.heart_model, comment_id, member_id):
        raise HTTPException(status_code=400, detail="이미 좋아요한 댓글입니다.")

    db.add(target.heart_model(comment_id=comment_id, member_id=member_id))
    domain.increase_counter(comment, "heart_count")
    _commit(db, "댓글 좋아요", duplicate_detail="이미 좋아요한 댓글입니다.")


def remove_comment_heart(db: Session, target: ReactionTarget, target_id: int, comment_id: int, member_id: int):
    target.get_is_not_deleted(db, target_id)
    comment = domain.get_comment_is_not_deleted(
        db, target.comment_model, target.column(target.comment_model), target_id, comment_id
    )

    heart = comment_crud.get_heart(db, target.heart_model, comment_id, member_id)
    if not heart:
        raise HTTPException(status_code=404, detail="해당 댓글 좋아요를 찾을 수 없습니다.")

    db.delete(heart)
    domain.decrease_counter(comment, "heart_count")
    _commit(db, "댓글 좋아요 취소")
