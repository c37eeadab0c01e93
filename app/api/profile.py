from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from app.db.base import get_db
from app.schemas.feed import FeedResponse
from app.schemas.member import (
    AuthorizationRequest,
    MessageResponse,
    MyProfileResponse,
    OthersProfileResponse,
    ProfileUpdateRequest,
)
from app.schemas.pagination import PaginationRequest, PaginationResponse, get_pagination
from app.schemas.post import PostResponse
from app.services import feed as feed_service
from app.services import post as post_service
from app.services import profile as profile_service
from app.services import domain
from app.services.auth import get_current_member_id, get_optional_current_member_id

router = APIRouter()


@router.get("/me", response_model=MyProfileResponse, summary="내 프로필 조회")
def get_my_profile(
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    return profile_service.get_my_profile(db, current_member_id)


@router.patch("/me", response_model=MessageResponse, summary="내 프로필 수정")
def modify_my_profile(
    request: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    profile_service.modify_my_profile(db, current_member_id, request)
    return MessageResponse(message="프로필이 수정되었습니다.")


@router.post("/me/authorization", response_model=MessageResponse, summary="기수 인증 요청")
def request_authorization(
    request: AuthorizationRequest,
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    기수 인증을 요청합니다. 관리자가 승인하면 AUTHORIZED 상태가 됩니다.
    """
    profile_service.request_authorization(db, current_member_id, request)
    return MessageResponse(message="기수 인증 요청이 접수되었습니다.")


@router.get("/me/posts", response_model=PaginationResponse[PostResponse], summary="내가 작성한 포스트 목록")
def get_my_posts(
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    return post_service.get_member_post_list(db, current_member_id, current_member_id, pagination)


@router.get("/me/feeds", response_model=PaginationResponse[FeedResponse], summary="내가 작성한 피드 목록")
def get_my_feeds(
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    return feed_service.get_feed_list(db, current_member_id, pagination, writer_id=current_member_id)


@router.get("/me/scraps", response_model=PaginationResponse[PostResponse], summary="내가 스크랩한 포스트 목록")
def get_my_scraps(
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    return post_service.get_scraped_post_list(db, current_member_id, pagination)


@router.get("/{member_id}", response_model=OthersProfileResponse, summary="다른 회원 프로필 조회")
def get_others_profile(
    member_id: int,
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    """
    다른 회원의 프로필을 조회합니다.

    - 로그인한 경우 내가 팔로우 중인지(is_followed)가 포함됩니다.
    - 탈퇴한 회원은 410 오류를 반환합니다.
    """
    return profile_service.get_others_profile(db, member_id, current_member_id)


@router.get("/{member_id}/posts", response_model=PaginationResponse[PostResponse], summary="회원이 작성한 포스트 목록")
def get_member_posts(
    member_id: int,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    domain.get_member_is_not_deleted_by_id(db, member_id)
    return post_service.get_member_post_list(db, member_id, current_member_id, pagination)


@router.get("/{member_id}/feeds", response_model=PaginationResponse[FeedResponse], summary="회원이 작성한 피드 목록")
def get_member_feeds(
    member_id: int,
    pagination: PaginationRequest = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_member_id: Optional[int] = Depends(get_optional_current_member_id)
):
    domain.get_member_is_not_deleted_by_id(db, member_id)
    return feed_service.get_feed_list(db, current_member_id, pagination, writer_id=member_id)
