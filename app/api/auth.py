import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.auth import LoginResponse
from app.schemas.member import MemberSummary, MessageResponse
from app.services import auth as auth_service
from app.services import domain
from app.services.auth import get_current_member_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/github/login", summary="GitHub 로그인 페이지로 이동")
def github_login(state: Optional[str] = None):
    """
    GitHub OAuth 인증 페이지로 리다이렉트합니다.
    """
    return RedirectResponse(auth_service.build_github_authorize_url(state))


@router.get("/github/callback", response_model=LoginResponse, summary="GitHub 로그인 콜백")
def github_callback(
    code: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    """
    GitHub에서 전달한 code로 로그인합니다.

    - 처음 로그인하는 경우 회원이 생성되고 is_new_member가 true입니다.
    - 탈퇴한 회원은 410 오류를 반환합니다.
    """
    member, is_new_member = auth_service.login_with_github(db, code)

    access_token = auth_service.create_access_token(data={"sub": member.github_id, "member_id": member.id})
    logger.info(f"로그인 성공: member_id={member.id}")
    return LoginResponse(
        message="로그인이 완료되었습니다.",
        member_id=member.id,
        nickname=member.nickname,
        is_new_member=is_new_member,
        access_token=access_token,
        token_type="bearer"
    )


@router.get("/me", response_model=MemberSummary, summary="로그인한 회원 정보")
def get_me(
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    member = domain.get_member_is_not_deleted_by_id(db, current_member_id)
    return MemberSummary.model_validate(member)


@router.delete("/withdraw", response_model=MessageResponse, summary="회원 탈퇴")
def withdraw(
    db: Session = Depends(get_db),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    회원 정보를 소프트 삭제합니다. 탈퇴한 회원의 글은 목록에서 제외됩니다.
    """
    member = domain.get_member_is_not_deleted_by_id(db, current_member_id)
    try:
        auth_service.withdraw_member(db, member)
    except Exception as e:
        db.rollback()
        logger.error(f"회원 탈퇴 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"회원 탈퇴 중 오류가 발생했습니다: {str(e)}")
    return MessageResponse(message="회원 탈퇴가 완료되었습니다.")
