from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from app.db.base import Base

class FeedEmoji(Base):
    __tablename__ = "feed_emojis"

    id = Column(Integer, primary_key=True, index=True)
    feed_id = Column(Integer, ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True)
    member_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False)
    emoji = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # 같은 사용자가 같은 이모지를 중복으로 남길 수 없음
    __table_args__ = (UniqueConstraint('feed_id', 'member_id', 'emoji', name='uq_feed_emoji'),)
