"""Shared favorite lists: public, read-only snapshots of a user's places."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from tourism.db.session import require_db
from tourism.models.place import Place
from tourism.models.shared_favorite import SharedFavoriteList, SharedFavoriteListPlace
from tourism.models.user import User
from tourism.services.places import place_as_dict

logger = logging.getLogger(__name__)

SHARE_ID_BYTES = 12  # 16 url-safe characters


def generate_share_id() -> str:
    return secrets.token_urlsafe(SHARE_ID_BYTES)


def _summary(shared: SharedFavoriteList) -> dict[str, Any]:
    return {column.key: getattr(shared, column.key) for column in SharedFavoriteList.__table__.columns}


def create_shared_list(
    db: Session | None,
    user_id: int,
    title: str,
    place_ids: Sequence[int],
    description: str | None = None,
) -> SharedFavoriteList:
    """Store a new shared list, keeping ``place_ids`` in the given order."""
    db = require_db(db)
    try:
        shared = SharedFavoriteList(
            share_id=generate_share_id(),
            user_id=user_id,
            title=title,
            description=description,
        )
        shared.entries = [
            SharedFavoriteListPlace(position=position, place_id=place_id)
            for position, place_id in enumerate(place_ids)
        ]
        db.add(shared)
        db.commit()
        db.refresh(shared)
        return shared
    except Exception:
        db.rollback()
        raise


def get_by_share_id(db: Session | None, share_id: str) -> dict[str, Any] | None:
    """Return the list with its places and creator, or None for an unknown id."""
    if db is None:
        logger.warning("[Database] Cannot get shared list: database not available")
        return None
    shared = db.execute(
        select(SharedFavoriteList).where(SharedFavoriteList.share_id == share_id)
    ).scalar_one_or_none()
    if shared is None:
        return None

    place_ids = db.execute(
        select(SharedFavoriteListPlace.place_id)
        .where(SharedFavoriteListPlace.list_id == shared.id)
        .order_by(SharedFavoriteListPlace.position)
    ).scalars().all()
    places_by_id = {}
    if place_ids:
        rows = db.execute(select(Place).where(Place.id.in_(set(place_ids)))).scalars().all()
        places_by_id = {place.id: place for place in rows}

    creator = db.get(User, shared.user_id)
    data = _summary(shared)
    # places deleted since the list was shared are left out
    data["places"] = [place_as_dict(places_by_id[pid]) for pid in place_ids if pid in places_by_id]
    data["creator"] = (
        {"id": creator.id, "name": creator.name, "email": creator.email} if creator is not None else None
    )
    return data


def increment_view_count(db: Session | None, share_id: str) -> None:
    db = require_db(db)
    db.execute(
        update(SharedFavoriteList)
        .where(SharedFavoriteList.share_id == share_id)
        .values(view_count=SharedFavoriteList.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()


def get_user_shared_lists(db: Session | None, user_id: int) -> list[dict[str, Any]]:
    """Lists created by ``user_id`` with their place counts, newest first."""
    if db is None:
        logger.warning("[Database] Cannot list shared lists: database not available")
        return []
    stmt = (
        select(SharedFavoriteList, func.count(SharedFavoriteListPlace.place_id))
        .outerjoin(SharedFavoriteListPlace, SharedFavoriteListPlace.list_id == SharedFavoriteList.id)
        .where(SharedFavoriteList.user_id == user_id)
        .group_by(SharedFavoriteList.id)
        .order_by(SharedFavoriteList.created_at.desc(), SharedFavoriteList.id.desc())
    )
    return [{**_summary(shared), "place_count": int(count)} for shared, count in db.execute(stmt).all()]
