import os

# app 모듈을 import하기 전에 테스트용 설정을 주입
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["AWS_BUCKET_NAME"] = "test-bucket"
os.environ["IMAGE_BASE_URL"] = "https://cdn.example.com"

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base, SessionLocal, engine
from app.models import registry  # noqa: F401
from app.models.enums import AuthorizationStatusType
from app.models.member import Member
from app.services.auth import create_access_token
from main import app


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_member(db):
    """회원을 만들고 member_id를 반환하는 팩토리"""
    sequence = {"value": 0}

    def _create(nickname=None, generation=None, is_admin=False,
                authorization_status=AuthorizationStatusType.UNAUTHORIZED):
        sequence["value"] += 1
        member = Member(
            github_id=f"github-{sequence['value']}",
            nickname=nickname or f"member{sequence['value']}",
            generation=generation,
            is_admin=is_admin,
            authorization_status=authorization_status.value,
        )
        db.add(member)
        db.commit()
        return member.id

    return _create


def auth_headers(member_id: int) -> dict:
    token = create_access_token({"sub": f"github-{member_id}", "member_id": member_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers():
    return auth_headers
