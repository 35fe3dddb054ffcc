"""Admin view statistics."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tourism.models.place import Place

logger = logging.getLogger(__name__)

TOP_PLACES_LIMIT = 3


def empty_view_stats() -> dict[str, Any]:
    return {"total_views": 0, "views_by_category": [], "top_places": []}


def get_view_stats(db: Session | None) -> dict[str, Any]:
    """Total views, views summed per category, and the most viewed places."""
    if db is None:
        logger.warning("[Database] Cannot compute view stats: database not available")
        return empty_view_stats()

    total = db.execute(select(func.coalesce(func.sum(Place.view_count), 0))).scalar_one()

    by_category = db.execute(
        select(Place.category, func.coalesce(func.sum(Place.view_count), 0))
        .group_by(Place.category)
        .order_by(Place.category)
    ).all()

    top = db.execute(
        select(Place.id, Place.name, Place.category, Place.image_url, Place.view_count)
        .order_by(Place.view_count.desc(), Place.id)
        .limit(TOP_PLACES_LIMIT)
    ).all()

    return {
        "total_views": int(total or 0),
        "views_by_category": [
            {"category": category, "count": int(count or 0)} for category, count in by_category
        ],
        "top_places": [
            {
                "id": row.id,
                "name": row.name,
                "category": row.category,
                "image_url": row.image_url,
                "view_count": int(row.view_count or 0),
            }
            for row in top
        ],
    }
