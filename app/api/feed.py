from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from app.db.base import get_db
from app.schemas.comment import CommentRequest, CommentResponse, CommentCreateResponse
from app.schemas.emoji import EmojiRequest
from app.schemas.feed import FeedRequest, FeedCreateResponse, FeedResponse, FeedDetailResponse
from app.schemas.member import MessageResponse
from app.schemas.pagination import PaginationRequest, PaginationResponse, get_pagination
from app.services import feed as feed_service
from app.services import reaction as reaction_service
from app.services.auth import get_current_member_id, get_optional_current_member_id
from app.services.target import FEED

router = APIRouter()


@router.post("/", response_model=FeedCreateResponse, status_code=201, summary="피드 작성")
def create_feed(
    request: FeedRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    feed_id = feed_service.create_feed(db, current_member_id, request)
    return FeedCreateResponse(feed_id=feed_id)


@router.get("/", response_model=PaginationResponse[FeedResponse], summary="피드 목록 조회")
def get_feed_list(
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    """
    피드 목록을 가져옵니다.

    - 삭제된 피드와 탈퇴한 회원의 피드는 제외됩니다.
    - 로그인한 경우 내가 누른 이모지 여부(is_clicked)가 포함됩니다.
    """
    return feed_service.get_feed_list(db, current_member_id, pagination)


@router.get("/{feed_id}", response_model=FeedDetailResponse, summary="피드 상세 조회")
def get_feed_detail(
    feed_id: int,
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    return feed_service.get_feed_detail(db, feed_id, current_member_id)


@router.patch("/{feed_id}", response_model=MessageResponse, summary="피드 수정")
def modify_feed(
    feed_id: int,
    request: FeedRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    피드 내용과 이미지를 수정합니다. 작성자만 수정할 수 있습니다.
    """
    feed_service.modify_feed(db, feed_id, current_member_id, request)
    return MessageResponse(message="피드가 수정되었습니다.")


@router.delete("/{feed_id}", response_model=MessageResponse, summary="피드 삭제")
def delete_feed(
    feed_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    feed_service.delete_feed(db, feed_id, current_member_id)
    return MessageResponse(message="피드가 삭제되었습니다.")


@router.post("/{feed_id}/view", response_model=MessageResponse, summary="피드 조회수 증가")
def increase_feed_view_count(
    feed_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    작성자 본인이 조회한 경우 조회수가 증가하지 않습니다.
    """
    reaction_service.increase_view_count(db, FEED, feed_id, current_member_id)
    return MessageResponse(message="조회수가 반영되었습니다.")


@router.post("/{feed_id}/emojis", response_model=MessageResponse, status_code=201, summary="피드 이모지 등록")
def add_feed_emoji(
    feed_id: int,
    request: EmojiRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.add_emoji(db, FEED, feed_id, current_member_id, request.emoji)
    return MessageResponse(message="이모지가 등록되었습니다.")


@router.delete("/{feed_id}/emojis/{emoji}", response_model=MessageResponse, summary="피드 이모지 삭제")
def remove_feed_emoji(
    feed_id: int,
    emoji: str,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.remove_emoji(db, FEED, feed_id, current_member_id, emoji)
    return MessageResponse(message="이모지가 삭제되었습니다.")


@router.get("/{feed_id}/comments", response_model=PaginationResponse[CommentResponse], summary="피드 댓글 목록 조회")
def get_feed_comments(
    feed_id: int,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    """
    특정 피드의 댓글 목록을 조회합니다.

    - 페이지네이션을 지원합니다.
    - 로그인 시 내가 하트를 눌렀는지(is_hearted), 내 댓글인지(is_mine)가 포함됩니다.
    """
    return reaction_service.get_comment_list(db, FEED, feed_id, current_member_id, pagination)


@router.post("/{feed_id}/comments", response_model=CommentCreateResponse, status_code=201, summary="피드 댓글 작성")
def write_feed_comment(
    feed_id: int,
    request: CommentRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    comment_id = reaction_service.write_comment(db, FEED, feed_id, current_member_id, request.content)
    return CommentCreateResponse(comment_id=comment_id)


@router.patch("/{feed_id}/comments/{comment_id}", response_model=MessageResponse, summary="피드 댓글 수정")
def modify_feed_comment(
    feed_id: int,
    comment_id: int,
    request: CommentRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.modify_comment(db, FEED, feed_id, comment_id, current_member_id, request.content)
    return MessageResponse(message="댓글이 수정되었습니다.")


@router.delete("/{feed_id}/comments/{comment_id}", response_model=MessageResponse, summary="피드 댓글 삭제")
def delete_feed_comment(
    feed_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.delete_comment(db, FEED, feed_id, comment_id, current_member_id)
    return MessageResponse(message="댓글이 삭제되었습니다.")


@router.post("/{feed_id}/comments/{comment_id}/hearts", response_model=MessageResponse, status_code=201, summary="피드 댓글 좋아요")
def heart_feed_comment(
    feed_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.heart_comment(db, FEED, feed_id, comment_id, current_member_id)
    return MessageResponse(message="댓글에 좋아요를 등록했습니다.")


@router.delete("/{feed_id}/comments/{comment_id}/hearts", response_model=MessageResponse, summary="피드 댓글 좋아요 취소")
def remove_feed_comment_heart(
    feed_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.remove_comment_heart(db, FEED, feed_id, comment_id, current_member_id)
    return MessageResponse(message="댓글 좋아요를 취소했습니다.")
