"""Pydantic schemas for favorites and shared favorite lists."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tourism.schemas.base import ApiModel
from tourism.schemas.place import PlaceRecord


class FavoriteOut(ApiModel):
    id: int
    place_id: int
    place: Optional[PlaceRecord] = None
    created_at: datetime


class SharedFavoriteCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    place_ids: list[int] = Field(..., min_length=1)


class SharedFavoriteCreated(ApiModel):
    id: int
    share_id: str


class ShareRef(ApiModel):
    share_id: str = Field(..., min_length=1)


class CreatorOut(ApiModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None


class SharedFavoriteSummary(ApiModel):
    id: int
    share_id: str
    user_id: int
    title: str
    description: Optional[str] = None
    view_count: int
    created_at: datetime
    updated_at: datetime


class SharedFavoriteListOut(SharedFavoriteSummary):
    place_count: int


class SharedFavoriteOut(SharedFavoriteSummary):
    places: list[PlaceRecord]
    creator: Optional[CreatorOut] = None
