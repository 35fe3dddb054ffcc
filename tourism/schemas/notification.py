"""Pydantic schemas for notifications."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from tourism.schemas.base import ApiModel

NotificationType = Literal["info", "success", "warning", "error"]


class NotificationCreate(ApiModel):
    user_id: Optional[int] = Field(None, description="Recipient; omit to broadcast")
    title: str = Field(..., min_length=1, max_length=255)
    message: str
    type: NotificationType = "info"
    link: Optional[str] = Field(None, max_length=500)


class NotificationRef(ApiModel):
    notification_id: int


class NotificationOut(ApiModel):
    id: int
    user_id: Optional[int] = None
    title: str
    message: str
    type: NotificationType
    is_read: bool
    link: Optional[str] = None
    created_at: datetime
