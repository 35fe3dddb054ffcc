"""User persistence for the sign-in flow."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tourism.models.user import User

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "email", "login_method")


def get_user_by_open_id(db: Session | None, open_id: str) -> User | None:
    if db is None:
        logger.warning("[Database] Cannot get user: database not available")
        return None
    return db.execute(select(User).where(User.open_id == open_id)).scalar_one_or_none()


def upsert_user(
    db: Session | None,
    open_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    login_method: str | None = None,
    role: str | None = None,
    last_signed_in: datetime | None = None,
    owner_open_id: str | None = None,
) -> User | None:
    """Insert the user, or merge the non-null fields into the existing row.

    ``last_signed_in`` is always refreshed, from the database clock unless
    given. The ``owner_open_id`` identity is stored as ``admin`` unless an
    explicit role is given. Without a database this logs a warning and
    returns None so sign-in still proceeds.
    """
    if not open_id:
        raise ValueError("User openId is required for upsert")
    if db is None:
        logger.warning("[Database] Cannot upsert user: database not available")
        return None

    values = {
        field: value
        for field, value in zip(PROFILE_FIELDS, (name, email, login_method))
        if value is not None
    }
    if role is not None:
        values["role"] = role
    elif owner_open_id and open_id == owner_open_id:
        values["role"] = "admin"
    values["last_signed_in"] = last_signed_in if last_signed_in is not None else func.now()

    try:
        user = get_user_by_open_id(db, open_id)
        if user is None:
            user = User(open_id=open_id, **values)
            db.add(user)
        else:
            for field, value in values.items():
                setattr(user, field, value)
        db.commit()
        db.refresh(user)
        return user
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("[Database] Failed to upsert user: %s", exc)
        raise
