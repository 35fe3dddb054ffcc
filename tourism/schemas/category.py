"""Pydantic schemas for categories."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tourism.schemas.base import ApiModel


class CategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None


class CategoryUpdate(ApiModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = None


class CategoryOut(ApiModel):
    id: int
    name: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
