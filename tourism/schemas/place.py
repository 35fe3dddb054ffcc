"""Pydantic schemas for places."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from tourism.schemas.base import ApiModel


class PlaceCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    category: str = Field(..., min_length=1, max_length=100)
    latitude: str = Field(..., max_length=50)
    longitude: str = Field(..., max_length=50)
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None


class PlaceUpdate(ApiModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    latitude: Optional[str] = Field(None, max_length=50)
    longitude: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None

    @field_validator("name", "description", "category", "latitude", "longitude")
    @classmethod
    def _reject_null(cls, value: Optional[str]) -> str:
        # omitted fields keep their value; only media urls may be cleared
        if value is None:
            raise ValueError("field cannot be null")
        return value


class PlaceRecord(ApiModel):
    """A place row as stored."""

    id: int
    name: str
    description: str
    category: str
    latitude: str
    longitude: str
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None
    view_count: int
    created_at: datetime
    updated_at: datetime


class PlaceOut(PlaceRecord):
    """A place plus its live rating aggregate."""

    avg_rating: float = Field(..., description="Mean review rating, 0 without reviews")
    review_count: int
