"""Place queries: listing with live rating aggregates, admin CRUD and view counting."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, delete, distinct, func, select, update
from sqlalchemy.orm import Session

from tourism.db.session import require_db
from tourism.models.place import Place
from tourism.models.review import Review

logger = logging.getLogger(__name__)

PLACE_FIELDS = ("name", "description", "category", "latitude", "longitude", "image_url", "video_url", "audio_url")


def place_as_dict(place: Place) -> dict[str, Any]:
    """Plain column mapping of a place row."""
    return {column.key: getattr(place, column.key) for column in Place.__table__.columns}


def _places_with_ratings() -> Select:
    # AVG/COUNT come back as Decimal or string depending on the driver;
    # _with_ratings coerces them.
    return (
        select(
            Place,
            func.coalesce(func.avg(Review.rating), 0).label("avg_rating"),
            func.coalesce(func.count(distinct(Review.id)), 0).label("review_count"),
        )
        .outerjoin(Review, Review.place_id == Place.id)
        .group_by(Place.id)
    )


def _with_ratings(place: Place, avg_rating: Any, review_count: Any) -> dict[str, Any]:
    data = place_as_dict(place)
    data["avg_rating"] = float(avg_rating or 0)
    data["review_count"] = int(review_count or 0)
    return data


def get_all_places(db: Session | None) -> list[dict[str, Any]]:
    """Return all places, newest first, with ``avg_rating`` and ``review_count``."""
    if db is None:
        logger.warning("[Database] Cannot list places: database not available")
        return []
    stmt = _places_with_ratings().order_by(Place.created_at.desc(), Place.id.desc())
    return [_with_ratings(*row) for row in db.execute(stmt).all()]


def get_place_by_id(db: Session | None, place_id: int) -> dict[str, Any] | None:
    """Return one place with its rating aggregate, or None."""
    if db is None:
        logger.warning("[Database] Cannot get place: database not available")
        return None
    row = db.execute(_places_with_ratings().where(Place.id == place_id)).first()
    if row is None:
        return None
    return _with_ratings(*row)


def create_place(db: Session | None, data: dict[str, Any]) -> Place:
    """Insert a place and return it."""
    db = require_db(db)
    values = {key: data[key] for key in PLACE_FIELDS if key in data}
    try:
        place = Place(**values)
        db.add(place)
        db.commit()
        db.refresh(place)
        return place
    except Exception:
        db.rollback()
        raise


def update_place(db: Session | None, place_id: int, data: dict[str, Any]) -> None:
    """Apply the given fields to a place; unknown ids are a no-op."""
    db = require_db(db)
    values = {key: value for key, value in data.items() if key in PLACE_FIELDS}
    if not values:
        return
    db.execute(update(Place).where(Place.id == place_id).values(**values))
    db.commit()


def delete_place(db: Session | None, place_id: int) -> None:
    db = require_db(db)
    db.execute(delete(Place).where(Place.id == place_id))
    db.commit()


def increment_view_count(db: Session | None, place_id: int) -> None:
    """Add one view, evaluated by the database so concurrent visits are not lost."""
    db = require_db(db)
    db.execute(
        update(Place)
        .where(Place.id == place_id)
        .values(view_count=Place.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
