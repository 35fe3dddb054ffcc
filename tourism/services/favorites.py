"""Favorite queries.

A (user, place) pair is stored at most once; adding it again is a no-op.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tourism.db.session import require_db
from tourism.models.favorite import Favorite
from tourism.models.place import Place
from tourism.services.places import place_as_dict

logger = logging.getLogger(__name__)


def is_favorite(db: Session | None, user_id: int, place_id: int) -> bool:
    if db is None:
        logger.warning("[Database] Cannot check favorite: database not available")
        return False
    stmt = select(Favorite.id).where(Favorite.user_id == user_id, Favorite.place_id == place_id).limit(1)
    return db.execute(stmt).first() is not None


def add_favorite(db: Session | None, user_id: int, place_id: int) -> bool:
    """Bookmark a place. Returns False when it was already bookmarked."""
    db = require_db(db)
    if is_favorite(db, user_id, place_id):
        return False
    db.add(Favorite(user_id=user_id, place_id=place_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # only a concurrent identical insert counts as already bookmarked
        if is_favorite(db, user_id, place_id):
            return False
        raise
    return True


def remove_favorite(db: Session | None, user_id: int, place_id: int) -> None:
    db = require_db(db)
    db.execute(delete(Favorite).where(Favorite.user_id == user_id, Favorite.place_id == place_id))
    db.commit()


def get_user_favorites(db: Session | None, user_id: int) -> list[dict[str, Any]]:
    """The user's favorites joined with their places, newest first."""
    if db is None:
        logger.warning("[Database] Cannot list favorites: database not available")
        return []
    stmt = (
        select(Favorite, Place)
        .outerjoin(Place, Place.id == Favorite.place_id)
        .where(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
    )
    return [
        {
            "id": favorite.id,
            "place_id": favorite.place_id,
            "place": place_as_dict(place) if place is not None else None,
            "created_at": favorite.created_at,
        }
        for favorite, place in db.execute(stmt).all()
    ]
