from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base
from app.models.enums import AuthorizationStatusType

class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    github_id = Column(String(50), unique=True, nullable=False)
    email = Column(String(100), nullable=True)
    nickname = Column(String(50), nullable=False)
    generation = Column(Integer, nullable=True)  # 기수
    profile_image_url = Column(String(500), nullable=True)
    introduce = Column(String(500), nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False)
    authorization_status = Column(String(20), nullable=False, default=AuthorizationStatusType.UNAUTHORIZED.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # 관계 설정
    feeds = relationship("Feed", back_populates="member")
    posts = relationship("Post", back_populates="member")

    def set_profile_info(self, nickname: str, profile_image_url, introduce):
        self.nickname = nickname
        self.profile_image_url = profile_image_url
        self.introduce = introduce
