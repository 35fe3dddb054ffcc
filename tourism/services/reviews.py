"""Review queries."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tourism.db.session import require_db
from tourism.models.place import Place
from tourism.models.review import Review
from tourism.models.user import User

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def _review_as_dict(review: Review, **extra: Any) -> dict[str, Any]:
    data = {column.key: getattr(review, column.key) for column in Review.__table__.columns}
    data.update(extra)
    return data


def get_reviews_by_place_id(db: Session | None, place_id: int) -> list[dict[str, Any]]:
    """Reviews of one place with the author's display name, newest first."""
    if db is None:
        logger.warning("[Database] Cannot list reviews: database not available")
        return []
    stmt = (
        select(Review, User.name)
        .outerjoin(User, User.id == Review.user_id)
        .where(Review.place_id == place_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
    )
    return [_review_as_dict(review, user_name=user_name) for review, user_name in db.execute(stmt).all()]


def get_all_reviews(db: Session | None) -> list[dict[str, Any]]:
    """Every review with author and place names, newest first (admin listing)."""
    if db is None:
        logger.warning("[Database] Cannot list reviews: database not available")
        return []
    stmt = (
        select(Review, User.name, Place.name)
        .outerjoin(User, User.id == Review.user_id)
        .outerjoin(Place, Place.id == Review.place_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
    )
    return [
        _review_as_dict(review, user_name=user_name, place_name=place_name)
        for review, user_name, place_name in db.execute(stmt).all()
    ]


def create_review(
    db: Session | None,
    place_id: int,
    user_id: int,
    rating: int,
    comment: str | None = None,
) -> Review:
    db = require_db(db)
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    try:
        review = Review(place_id=place_id, user_id=user_id, rating=rating, comment=comment)
        db.add(review)
        db.commit()
        db.refresh(review)
        return review
    except Exception:
        db.rollback()
        raise


def delete_review(db: Session | None, review_id: int) -> None:
    db = require_db(db)
    db.execute(delete(Review).where(Review.id == review_id))
    db.commit()
