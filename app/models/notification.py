from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean
from sqlalchemy.sql import func
from app.db.base import Base

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    received_member_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True)
    send_member_id = Column(Integer, ForeignKey('members.id', ondelete='CASCADE'), nullable=False)
    type = Column(String(30), nullable=False)
    feed_id = Column(Integer, nullable=True)
    post_id = Column(Integer, nullable=True)
    comment_id = Column(Integer, nullable=True)
    content = Column(String(255), nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
