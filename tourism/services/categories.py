"""Category queries.

Places reference categories by name (``Place.category``), not by key, so a
category is only removable once no place carries its name.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tourism.core.errors import CategoryInUseError
from tourism.db.session import require_db
from tourism.models.category import Category
from tourism.models.place import Place

logger = logging.getLogger(__name__)


def get_all_categories(db: Session | None) -> list[Category]:
    if db is None:
        logger.warning("[Database] Cannot list categories: database not available")
        return []
    return list(db.execute(select(Category).order_by(Category.name)).scalars().all())


def count_places_in_category(db: Session, name: str) -> int:
    return db.execute(select(func.count(Place.id)).where(Place.category == name)).scalar_one()


def create_category(db: Session | None, name: str, image_url: str | None = None) -> Category:
    db = require_db(db)
    try:
        category = Category(name=name, image_url=image_url)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category
    except Exception:
        db.rollback()
        raise


def update_category(db: Session | None, category_id: int, data: dict[str, Any]) -> None:
    db = require_db(db)
    category = db.get(Category, category_id)
    if category is None:
        return
    for field in ("name", "image_url"):
        if field in data and data[field] is not None:
            setattr(category, field, data[field])
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def delete_category(db: Session | None, category_id: int) -> None:
    """Delete a category; raises CategoryInUseError while places still use it."""
    db = require_db(db)
    category = db.get(Category, category_id)
    if category is None:
        return
    in_use = count_places_in_category(db, category.name)
    if in_use:
        raise CategoryInUseError(category.name, in_use)
    db.delete(category)
    db.commit()
