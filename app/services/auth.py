from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from urllib.parse import urlencode
import logging

import httpx
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer # fast api 에서 제공하는 인증 라이브러리
from jwt import ExpiredSignatureError, InvalidTokenError  # PyJWT 전용 예외
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.crud import member as member_crud
from app.db.base import get_db
from app.models.member import Member
from app.schemas.auth import GithubUser

# 인증 필수 API 용
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/github/login")

# 선택적 인증 API 용
oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl="/api/auth/github/login", auto_error=False)

logger = logging.getLogger(__name__)

GITHUB_SCOPE = "read:user user:email"
GITHUB_TIMEOUT_SECONDS = 10.0


def create_access_token(data: dict) -> str:
    """
    JWT 액세스 토큰 생성
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> int:
    """ 토큰 디코딩 및 member_id 반환, 실패 시 HTTPException 발생 """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except ExpiredSignatureError:
        logger.info("Token has expired")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidTokenError as e:
        logger.warning(f"Invalid token: {e}")
        raise credentials_exception

    member_id = payload.get("member_id")
    if member_id is None:
        logger.warning("Token payload does not contain member_id")
        raise credentials_exception
    try:
        return int(member_id)
    except (TypeError, ValueError):
        logger.warning(f"member_id in token is not an integer: {member_id}")
        raise credentials_exception


def get_current_member_id(token: str = Depends(oauth2_scheme)) -> int:
    """ 현재 회원 ID 반환 (인증 필수) """
    return decode_access_token(token)


def get_optional_current_member_id(token: Optional[str] = Depends(oauth2_scheme_optional)) -> Optional[int]:
    """ 현재 회원 ID 반환 (선택적 인증), 실패 시 None 반환 """
    if token is None:
        return None
    try:
        return decode_access_token(token)
    except HTTPException:
        return None


def get_admin_member_id(
    member_id: int = Depends(get_current_member_id),
    db: Session = Depends(get_db)
) -> int:
    """ 관리자 회원 ID 반환, 관리자가 아니면 401 """
    member = member_crud.get_member(db, member_id)
    if not member or member.deleted_at is not None or not member.is_admin:
        logger.warning(f"관리자 권한 없음: member_id={member_id}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="인증되지 않은 사용자 입니다.")
    return member_id


def build_github_authorize_url(state: Optional[str] = None) -> str:
    params = {
        "client_id": settings.GITHUB_CLIENT_ID,
        "redirect_uri": settings.GITHUB_REDIRECT_URI,
        "scope": GITHUB_SCOPE,
    }
    if state:
        params["state"] = state
    return f"{settings.GITHUB_AUTHORIZE_URL}?{urlencode(params)}"


def _github_client() -> httpx.Client:
    return httpx.Client(timeout=GITHUB_TIMEOUT_SECONDS)


def exchange_code_for_token(code: str) -> str:
    """GitHub authorization code를 access token으로 교환"""
    try:
        with _github_client() as client:
            response = client.post(
                settings.GITHUB_TOKEN_URL,
                data={
                    "client_id": settings.GITHUB_CLIENT_ID,
                    "client_secret": settings.GITHUB_CLIENT_SECRET,
                    "code": code,
                    "redirect_uri": settings.GITHUB_REDIRECT_URI,
                },
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
    except httpx.HTTPError as e:
        logger.error(f"GitHub 토큰 교환 실패: {str(e)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="GitHub 서버와 통신할 수 없습니다.")
    except ValueError as e:
        logger.error(f"GitHub 토큰 교환 응답 파싱 실패: {str(e)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="GitHub 응답을 해석할 수 없습니다.")

    access_token = payload.get("access_token") if isinstance(payload, dict) else None
    if not access_token:
        error = payload.get("error") if isinstance(payload, dict) else payload
        logger.warning(f"GitHub 토큰 교환 응답에 access_token 없음: {error}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="유효하지 않은 GitHub 인증 코드입니다.")
    return access_token


def _fetch_primary_email(client: httpx.Client, headers: dict) -> Optional[str]:
    """
    /user 응답에 이메일이 없을 때(비공개 설정) 인증된 대표 이메일을 조회합니다.
    조회에 실패해도 로그인은 계속 진행하므로 None을 반환합니다.
    """
    try:
        response = client.get(f"{settings.GITHUB_API_URL}/user/emails", headers=headers)
        response.raise_for_status()
        emails = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"GitHub 이메일 조회 실패: {str(e)}")
        return None

    if not isinstance(emails, list):
        logger.warning(f"GitHub 이메일 응답 형식 오류: {emails}")
        return None
    for entry in emails:
        if isinstance(entry, dict) and entry.get("primary") and entry.get("verified"):
            return entry.get("email")
    return None


def fetch_github_user(access_token: str) -> GithubUser:
    """GitHub 사용자 정보 조회"""
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/vnd.github+json",
    }
    try:
        with _github_client() as client:
            response = client.get(f"{settings.GITHUB_API_URL}/user", headers=headers)
            response.raise_for_status()
            github_user = GithubUser.model_validate(response.json())
            if github_user.email is None:
                github_user.email = _fetch_primary_email(client, headers)
    except httpx.HTTPError as e:
        logger.error(f"GitHub 사용자 조회 실패: {str(e)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="GitHub 사용자 정보를 가져올 수 없습니다.")
    except ValidationError as e:
        logger.warning(f"GitHub 사용자 정보 형식 오류: {e.errors()}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="유효하지 않은 GitHub 사용자 정보입니다.")
    except ValueError as e:
        logger.error(f"GitHub 사용자 응답 파싱 실패: {str(e)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="GitHub 응답을 해석할 수 없습니다.")
    return github_user


def login_with_github(db: Session, code: str) -> Tuple[Member, bool]:
    """
    GitHub 로그인 처리.

    - 처음 로그인한 사용자는 GitHub 정보로 회원을 생성합니다.
    - 탈퇴한 회원은 410 오류를 반환합니다.
    """
    github_access_token = exchange_code_for_token(code)
    github_user = fetch_github_user(github_access_token)

    member = member_crud.get_member_by_github_id(db, str(github_user.id))
    if member is not None:
        if member.deleted_at is not None:
            logger.warning(f"탈퇴한 회원의 로그인 시도: github_id={github_user.id}")
            raise HTTPException(status_code=status.HTTP_410_GONE, detail="탈퇴한 유저입니다.")
        return member, False

    try:
        member = member_crud.create_member(
            db,
            github_id=str(github_user.id),
            nickname=github_user.login,
            email=github_user.email,
            profile_image_url=github_user.avatar_url,
        )
        db.commit()
        db.refresh(member)
    except Exception as e:
        db.rollback()
        logger.error(f"회원 생성 중 오류 발생: {str(e)}")
        raise HTTPException(status_code=500, detail=f"회원가입 중 오류가 발생했습니다: {str(e)}")

    logger.info(f"신규 회원 생성: member_id={member.id}, github_id={github_user.id}")
    return member, True


def withdraw_member(db: Session, member: Member):
    member.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"회원 탈퇴 처리: member_id={member.id}")
