from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base

class Feed(Base):
    __tablename__ = "feeds"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True)
    content = Column(Text, nullable=False)
    view_count = Column(Integer, nullable=False, default=0, server_default='0')
    comment_count = Column(Integer, nullable=False, default=0, server_default='0')
    emoji_count = Column(Integer, nullable=False, default=0, server_default='0')
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # 관계 설정
    member = relationship("Member", back_populates="feeds")
    images = relationship("FeedImage", back_populates="feed", cascade="all, delete-orphan", order_by="FeedImage.id")


class FeedImage(Base):
    __tablename__ = "feed_images"

    id = Column(Integer, primary_key=True, index=True)
    feed_id = Column(Integer, ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True)
    image_url = Column(String(500), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    feed = relationship("Feed", back_populates="images")


class FeedView(Base):
    __tablename__ = "feed_views"

    id = Column(Integer, primary_key=True, index=True)
    feed_id = Column(Integer, ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True)
    member_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
