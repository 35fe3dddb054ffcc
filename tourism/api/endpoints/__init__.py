"""Expose API endpoint routers."""

from tourism.api.endpoints import (
    auth,
    categories,
    favorites,
    notifications,
    places,
    reviews,
    shared_favorites,
    stats,
    upload,
)

__all__ = [
    "auth",
    "categories",
    "favorites",
    "notifications",
    "places",
    "reviews",
    "shared_favorites",
    "stats",
    "upload",
]
