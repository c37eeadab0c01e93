from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.sql import func
from app.db.base import Base

class Follow(Base):
    __tablename__ = "follows"

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True)  # 팔로우 하는 사람
    following_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True)  # 팔로우 당하는 사람
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint('follower_id', 'following_id', name='uq_follow_pair'),
        CheckConstraint('follower_id != following_id', name='ck_follow_not_self'),
    )
