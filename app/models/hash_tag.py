from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base

class HashTag(Base):
    __tablename__ = "hash_tags"

    id = Column(Integer, primary_key=True, index=True)
    tag_name = Column(String(50), unique=True, nullable=False)
    color = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class PostHashTag(Base):
    __tablename__ = "post_hash_tags"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True)
    hash_tag_id = Column(Integer, ForeignKey('hash_tags.id', ondelete='CASCADE'), nullable=False)
    order = Column(Integer, nullable=False)  # 1부터 시작하는 노출 순서

    hash_tag = relationship("HashTag")
