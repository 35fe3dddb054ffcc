"""Pydantic schemas for reviews."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tourism.schemas.base import ApiModel


class ReviewCreate(ApiModel):
    place_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewOut(ApiModel):
    id: int
    place_id: int
    user_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    user_name: Optional[str] = None


class AdminReviewOut(ReviewOut):
    place_name: Optional[str] = None
