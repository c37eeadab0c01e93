from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.crud import emoji as emoji_crud
from app.crud import feed as feed_crud
from app.models.feed import Feed
from app.models.feed_emoji import FeedEmoji
from app.schemas.feed import FeedRequest, FeedResponse, FeedDetailResponse
from app.schemas.member import Writer
from app.schemas.pagination import PaginationRequest, PaginationResponse
from app.services import domain

logger = logging.getLogger(__name__)


def create_feed(db: Session, member_id: int, request: FeedRequest) -> int:
    domain.get_member_is_not_deleted_by_id(db, member_id)

    feed = Feed(member_id=member_id, content=request.content)
    feed_crud.replace_feed_images(feed, request.image_urls)
    try:
        db.add(feed)
        db.commit()
        db.refresh(feed)
    except Exception as e:
        db.rollback()
        logger.error(f"피드 생성 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"피드 생성 중 오류 발생: {str(e)}")

    logger.info(f"피드 생성 완료: feed_id={feed.id}, member_id={member_id}, images={len(request.image_urls)}")
    return feed.id


def get_feed_list(
    db: Session,
    member_id: Optional[int],
    pagination: PaginationRequest,
    writer_id: Optional[int] = None,
) -> PaginationResponse[FeedResponse]:
    """
    피드 목록 조회.

    - writer_id가 주어지면 해당 회원의 피드만 조회합니다 (프로필 화면).
    - 이모지 집계와 내가 누른 이모지 여부는 한 번의 쿼리로 가져옵니다.
    """
    rows = feed_crud.get_feed_list(db, pagination, writer_id)
    total_count = feed_crud.count_feed_list(db, writer_id)

    feed_ids = [feed.id for feed, _ in rows]
    emojis_by_feed = emoji_crud.get_emoji_summaries(db, FeedEmoji, FeedEmoji.feed_id, feed_ids, member_id)

    feeds = [
        FeedResponse(**_feed_fields(feed, writer), emojis=emojis_by_feed.get(feed.id, []))
        for feed, writer in rows
    ]
    return PaginationResponse[FeedResponse].of(feeds, pagination, total_count)


def get_feed_detail(db: Session, feed_id: int, member_id: Optional[int]) -> FeedDetailResponse:
    domain.get_feed_is_not_deleted(db, feed_id)
    feed, writer = feed_crud.get_feed_detail(db, feed_id)

    if writer.deleted_at is not None:
        raise HTTPException(status_code=410, detail="해당 피드 작성자가 존재하지 않습니다.")

    emojis = emoji_crud.get_emoji_summaries(db, FeedEmoji, FeedEmoji.feed_id, [feed_id], member_id)
    return FeedDetailResponse(
        **_feed_fields(feed, writer),
        emojis=emojis.get(feed_id, []),
        is_mine=member_id is not None and feed.member_id == member_id,
    )


def modify_feed(db: Session, feed_id: int, member_id: int, request: FeedRequest):
    feed = domain.get_feed_is_not_deleted(db, feed_id)
    domain.check_owner(feed.member_id, member_id)

    feed.content = request.content
    feed_crud.replace_feed_images(feed, request.image_urls)
    db.commit()
    logger.info(f"피드 수정 완료: feed_id={feed_id}")


def delete_feed(db: Session, feed_id: int, member_id: int):
    feed = domain.get_feed_is_not_deleted(db, feed_id)
    domain.check_owner(feed.member_id, member_id)

    feed.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"피드 삭제 완료: feed_id={feed_id}")


def _feed_fields(feed: Feed, writer) -> dict:
    return {
        "id": feed.id,
        "content": feed.content,
        "view_count": feed.view_count,
        "comment_count": feed.comment_count,
        "emoji_count": feed.emoji_count,
        "created_at": feed.created_at,
        "updated_at": feed.updated_at,
        "image_urls": [image.image_url for image in feed.images],
        "writer": Writer.model_validate(writer),
    }
