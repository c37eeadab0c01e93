from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.db.base import get_db
from app.models.enums import CategoryType, ListSortBy
from app.schemas.comment import CommentRequest, CommentResponse, CommentCreateResponse
from app.schemas.emoji import EmojiRequest
from app.schemas.member import MessageResponse
from app.schemas.pagination import PaginationRequest, PaginationResponse, get_pagination
from app.schemas.post import (
    HashTagSearchResponse,
    PostCreateResponse,
    PostDetailResponse,
    PostListFilter,
    PostRequest,
    PostResponse,
    TodayQuestionResponse,
)
from app.services import post as post_service
from app.services import reaction as reaction_service
from app.services.auth import get_current_member_id, get_optional_current_member_id
from app.services.target import POST

router = APIRouter()


@router.post("/", response_model=PostCreateResponse, status_code=201, summary="포스트 작성")
def create_post(
    request: PostRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    포스트를 작성합니다.

    - 해시태그는 입력 순서대로 저장되며, 이미 있는 태그 이름이면 재사용합니다.
    - 공지사항 카테고리는 관리자만 작성할 수 있습니다.
    """
    post_id = post_service.create_post(db, current_member_id, request)
    return PostCreateResponse(post_id=post_id)


@router.get("/", response_model=PaginationResponse[PostResponse], summary="포스트 목록 조회")
def get_post_list(
    sort_by: ListSortBy = ListSortBy.ALL,
    category: CategoryType = CategoryType.ALL,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    """
    포스트 목록을 조회합니다.

    - sort_by: ALL(전체), BY_FOLLOW(팔로우한 회원), BY_GENERATION(같은 기수)
    - BY_FOLLOW, BY_GENERATION은 로그인이 필요합니다.
    """
    list_filter = PostListFilter(sort_by=sort_by, category=category)
    return post_service.get_post_list(db, current_member_id, list_filter, pagination)


@router.get("/today-question", response_model=TodayQuestionResponse, summary="오늘의 질문")
def get_today_question(db: Session = Depends(get_db)):
    """
    '오늘의 질문' 카테고리 포스트 하나를 무작위로 반환합니다.
    없으면 post_id 0과 빈 제목을 반환합니다.
    """
    return post_service.get_today_question(db)


@router.get("/hash-tags/search", response_model=List[HashTagSearchResponse], summary="해시태그 검색")
def search_hash_tags(
    tag_name: str = Query(..., min_length=1, max_length=50),
    db: Session = Depends(get_db)
):
    return post_service.search_hash_tags(db, tag_name)


@router.get("/{post_id}", response_model=PostDetailResponse, summary="포스트 상세 조회")
def get_post_detail(
    post_id: int,
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    return post_service.get_post_detail(db, post_id, current_member_id)


@router.put("/{post_id}", response_model=MessageResponse, summary="포스트 수정")
def modify_post(
    post_id: int,
    request: PostRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    post_service.modify_post(db, post_id, current_member_id, request)
    return MessageResponse(message="포스트가 수정되었습니다.")


@router.delete("/{post_id}", response_model=MessageResponse, summary="포스트 삭제")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    post_service.delete_post(db, post_id, current_member_id)
    return MessageResponse(message="포스트가 삭제되었습니다.")


@router.post("/{post_id}/view", response_model=MessageResponse, summary="포스트 조회수 증가")
def increase_post_view_count(
    post_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.increase_view_count(db, POST, post_id, current_member_id)
    return MessageResponse(message="조회수가 반영되었습니다.")


@router.post("/{post_id}/emojis", response_model=MessageResponse, status_code=201, summary="포스트 이모지 등록")
def add_post_emoji(
    post_id: int,
    request: EmojiRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.add_emoji(db, POST, post_id, current_member_id, request.emoji)
    return MessageResponse(message="이모지가 등록되었습니다.")


@router.delete("/{post_id}/emojis/{emoji}", response_model=MessageResponse, summary="포스트 이모지 삭제")
def remove_post_emoji(
    post_id: int,
    emoji: str,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.remove_emoji(db, POST, post_id, current_member_id, emoji)
    return MessageResponse(message="이모지가 삭제되었습니다.")


@router.get("/{post_id}/comments", response_model=PaginationResponse[CommentResponse], summary="포스트 댓글 목록 조회")
def get_post_comments(
    post_id: int,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    return reaction_service.get_comment_list(db, POST, post_id, current_member_id, pagination)


@router.post("/{post_id}/comments", response_model=CommentCreateResponse, status_code=201, summary="포스트 댓글 작성")
def write_post_comment(
    post_id: int,
    request: CommentRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    comment_id = reaction_service.write_comment(db, POST, post_id, current_member_id, request.content)
    return CommentCreateResponse(comment_id=comment_id)


@router.patch("/{post_id}/comments/{comment_id}", response_model=MessageResponse, summary="포스트 댓글 수정")
def modify_post_comment(
    post_id: int,
    comment_id: int,
    request: CommentRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.modify_comment(db, POST, post_id, comment_id, current_member_id, request.content)
    return MessageResponse(message="댓글이 수정되었습니다.")


@router.delete("/{post_id}/comments/{comment_id}", response_model=MessageResponse, summary="포스트 댓글 삭제")
def delete_post_comment(
    post_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.delete_comment(db, POST, post_id, comment_id, current_member_id)
    return MessageResponse(message="댓글이 삭제되었습니다.")


@router.post("/{post_id}/comments/{comment_id}/hearts", response_model=MessageResponse, status_code=201, summary="포스트 댓글 좋아요")
def heart_post_comment(
    post_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.heart_comment(db, POST, post_id, comment_id, current_member_id)
    return MessageResponse(message="댓글에 좋아요를 등록했습니다.")


@router.delete("/{post_id}/comments/{comment_id}/hearts", response_model=MessageResponse, summary="포스트 댓글 좋아요 취소")
def remove_post_comment_heart(
    post_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    reaction_service.remove_comment_heart(db, POST, post_id, comment_id, current_member_id)
    return MessageResponse(message="댓글 좋아요를 취소했습니다.")


@router.post("/{post_id}/scrap", response_model=MessageResponse, status_code=201, summary="포스트 스크랩")
def scrap_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    post_service.scrap_post(db, post_id, current_member_id)
    return MessageResponse(message="포스트를 스크랩했습니다.")


@router.delete("/{post_id}/scrap", response_model=MessageResponse, summary="포스트 스크랩 취소")
def delete_scrap(
    post_id: int,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    post_service.delete_scrap(db, post_id, current_member_id)
    return MessageResponse(message="스크랩을 취소했습니다.")
