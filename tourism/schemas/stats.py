"""Schemas for admin view statistics."""

from typing import Optional

from tourism.schemas.base import ApiModel


class CategoryViews(ApiModel):
    category: str
    count: int


class TopPlace(ApiModel):
    id: int
    name: str
    category: str
    image_url: Optional[str] = None
    view_count: int


class ViewStats(ApiModel):
    total_views: int
    views_by_category: list[CategoryViews]
    top_places: list[TopPlace]
