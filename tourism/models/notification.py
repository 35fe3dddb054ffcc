"""Notification model."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text, func

from tourism.db.base import Base

NOTIFICATION_TYPES = ("info", "success", "warning", "error")


class Notification(Base):
    """Message for one user, or for every user when ``user_id`` is NULL."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True)  # NULL = broadcast
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(Enum(*NOTIFICATION_TYPES, name="notification_type"), nullable=False, default="info")
    is_read = Column(Boolean, nullable=False, default=False)
    link = Column(String(500))
    created_at = Column(DateTime, nullable=False, server_default=func.now())
