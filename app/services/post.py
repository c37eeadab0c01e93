from datetime import datetime, timezone
from typing import List, Optional
import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.crud import emoji as emoji_crud
from app.crud import hash_tag as hash_tag_crud
from app.crud import post as post_crud
from app.models.enums import CategoryType, ListSortBy
from app.models.hash_tag import HashTag, PostHashTag
from app.models.post import Post
from app.models.post_emoji import PostEmoji
from app.models.post_scrap import PostScrap
from app.schemas.member import Writer
from app.schemas.pagination import PaginationRequest, PaginationResponse
from app.schemas.post import (
    HashTagRequest,
    HashTagSearchResponse,
    PostDetailResponse,
    PostListFilter,
    PostRequest,
    PostResponse,
    TodayQuestionResponse,
)
from app.services import domain

logger = logging.getLogger(__name__)


def create_post(db: Session, member_id: int, request: PostRequest) -> int:
    member = domain.get_member_is_not_deleted_by_id(db, member_id)
    _check_category_permission(member, request.category)

    post = Post(
        member_id=member_id,
        category=request.category.value,
        title=request.title,
        content=request.content,
    )
    try:
        db.add(post)
        db.flush()
        _save_hash_tags(db, post.id, request.hash_tags)
        db.commit()
        db.refresh(post)
    except Exception as e:
        db.rollback()
        logger.error(f"포스트 생성 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"포스트 생성 중 오류 발생: {str(e)}")

    logger.info(f"포스트 생성 완료: post_id={post.id}, category={post.category}")
    return post.id


def get_post_list(
    db: Session,
    member_id: Optional[int],
    list_filter: PostListFilter,
    pagination: PaginationRequest,
) -> PaginationResponse[PostResponse]:
    """
    포스트 목록 조회.

    - BY_FOLLOW, BY_GENERATION 정렬은 로그인이 필요합니다.
    - BY_GENERATION은 조회하는 회원의 기수를 기준으로 합니다.
    """
    sort_by = list_filter.sort_by
    generation = None
    if sort_by in (ListSortBy.BY_FOLLOW, ListSortBy.BY_GENERATION):
        if member_id is None:
            raise HTTPException(status_code=401, detail="로그인이 필요합니다.")
        if sort_by == ListSortBy.BY_GENERATION:
            member = domain.get_member_is_not_deleted_by_id(db, member_id)
            if member.generation is None:
                raise HTTPException(status_code=400, detail="기수 정보가 등록되지 않았습니다.")
            generation = member.generation

    rows = post_crud.get_post_list(
        db, member_id, pagination, sort_by, list_filter.category, generation
    )
    total_count = post_crud.count_post_list(db, member_id, sort_by, list_filter.category, generation)
    return PaginationResponse[PostResponse].of(_to_post_responses(db, rows, member_id), pagination, total_count)


def get_member_post_list(
    db: Session,
    writer_id: int,
    member_id: Optional[int],
    pagination: PaginationRequest,
) -> PaginationResponse[PostResponse]:
    """특정 회원이 작성한 포스트 목록 (프로필 화면)"""
    rows = post_crud.get_post_list(db, member_id, pagination, writer_id=writer_id)
    total_count = post_crud.count_post_list(db, member_id, writer_id=writer_id)
    return PaginationResponse[PostResponse].of(_to_post_responses(db, rows, member_id), pagination, total_count)


def get_scraped_post_list(db: Session, member_id: int, pagination: PaginationRequest) -> PaginationResponse[PostResponse]:
    rows = post_crud.get_scraped_post_list(db, member_id, pagination)
    total_count = post_crud.count_scraped_post_list(db, member_id)
    return PaginationResponse[PostResponse].of(_to_post_responses(db, rows, member_id), pagination, total_count)


def get_post_detail(db: Session, post_id: int, member_id: Optional[int]) -> PostDetailResponse:
    domain.get_post_is_not_deleted(db, post_id)
    post, writer, is_scraped = post_crud.get_post_detail(db, post_id, member_id)

    if writer.deleted_at is not None:
        raise HTTPException(status_code=410, detail="해당 글 작성자가 존재하지 않습니다.")

    hash_tags = hash_tag_crud.get_hash_tags_by_post_ids(db, [post_id])
    emojis = emoji_crud.get_emoji_summaries(db, PostEmoji, PostEmoji.post_id, [post_id], member_id)
    return PostDetailResponse(
        **_post_fields(post, writer),
        is_scraped=bool(is_scraped),
        hash_tags=hash_tags.get(post_id, []),
        emojis=emojis.get(post_id, []),
        is_mine=member_id is not None and post.member_id == member_id,
    )


def modify_post(db: Session, post_id: int, member_id: int, request: PostRequest):
    post = domain.get_post_is_not_deleted(db, post_id)
    domain.check_owner(post.member_id, member_id)
    member = domain.get_member_is_not_deleted_by_id(db, member_id)
    _check_category_permission(member, request.category)

    try:
        post.set_post_info(request.category.value, request.title, request.content)
        hash_tag_crud.delete_post_hash_tags(db, post_id)
        _save_hash_tags(db, post_id, request.hash_tags)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"포스트 수정 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"포스트 수정 중 오류 발생: {str(e)}")
    logger.info(f"포스트 수정 완료: post_id={post_id}")


def delete_post(db: Session, post_id: int, member_id: int):
    post = domain.get_post_is_not_deleted(db, post_id)
    domain.check_owner(post.member_id, member_id)

    post.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"포스트 삭제 완료: post_id={post_id}")


def search_hash_tags(db: Session, tag_name: str) -> List[HashTagSearchResponse]:
    rows = hash_tag_crud.search_hash_tags(db, tag_name)
    return [
        HashTagSearchResponse(id=row.id, tag_name=row.tag_name, color=row.color, post_count=row.post_count)
        for row in rows
    ]


def get_today_question(db: Session) -> TodayQuestionResponse:
    question = post_crud.get_random_question(db)
    if not question:
        return TodayQuestionResponse(post_id=0, title="")
    return TodayQuestionResponse(post_id=question.post_id, title=question.title)


def scrap_post(db: Session, post_id: int, member_id: int):
    domain.get_post_is_not_deleted(db, post_id)
    domain.get_member_is_not_deleted_by_id(db, member_id)

    if post_crud.get_scrap(db, post_id, member_id):
        raise HTTPException(status_code=400, detail="이미 스크랩 중입니다.")

    db.add(PostScrap(post_id=post_id, member_id=member_id))
    db.commit()
    logger.info(f"포스트 스크랩: post_id={post_id}, member_id={member_id}")


def delete_scrap(db: Session, post_id: int, member_id: int):
    domain.get_post_is_not_deleted(db, post_id)
    domain.get_member_is_not_deleted_by_id(db, member_id)

    scrap = post_crud.get_scrap(db, post_id, member_id)
    if not scrap:
        raise HTTPException(status_code=404, detail="해당 스크랩이 존재하지 않습니다.")

    db.delete(scrap)
    db.commit()


def _check_category_permission(member, category: CategoryType):
    if category == CategoryType.ALL:
        raise HTTPException(status_code=400, detail="포스트 카테고리를 선택해주세요.")
    if category == CategoryType.NOTICE and not member.is_admin:
        raise HTTPException(status_code=403, detail="공지사항은 관리자만 작성할 수 있습니다.")


def _save_hash_tags(db: Session, post_id: int, hash_tags: List[HashTagRequest]):
    """해시태그 이름으로 기존 태그를 재사용하고, 없으면 새로 만듭니다."""
    seen = set()
    order = 0
    for hash_tag_request in hash_tags:
        if hash_tag_request.tag_name in seen:
            continue
        seen.add(hash_tag_request.tag_name)
        order += 1

        hash_tag = hash_tag_crud.get_hash_tag_by_name(db, hash_tag_request.tag_name)
        if not hash_tag:
            hash_tag = HashTag(tag_name=hash_tag_request.tag_name, color=hash_tag_request.color)
            db.add(hash_tag)
            db.flush()
        db.add(PostHashTag(post_id=post_id, hash_tag_id=hash_tag.id, order=order))


def _to_post_responses(db: Session, rows, member_id: Optional[int]) -> List[PostResponse]:
    post_ids = [post.id for post, _, _ in rows]
    hash_tags_by_post = hash_tag_crud.get_hash_tags_by_post_ids(db, post_ids)
    emojis_by_post = emoji_crud.get_emoji_summaries(db, PostEmoji, PostEmoji.post_id, post_ids, member_id)

    return [
        PostResponse(
            **_post_fields(post, writer),
            is_scraped=bool(is_scraped),
            hash_tags=hash_tags_by_post.get(post.id, []),
            emojis=emojis_by_post.get(post.id, []),
        )
        for post, writer, is_scraped in rows
    ]


def _post_fields(post: Post, writer) -> dict:
    return {
        "id": post.id,
        "category": post.category,
        "title": post.title,
        "content": post.content,
        "view_count": post.view_count,
        "comment_count": post.comment_count,
        "emoji_count": post.emoji_count,
        "created_at": post.created_at,
        "writer": Writer.model_validate(writer),
    }
