"""Schemas for signed-in users."""

from datetime import datetime
from typing import Literal, Optional

from tourism.schemas.base import ApiModel


class UserOut(ApiModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Literal["user", "admin"]
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime
