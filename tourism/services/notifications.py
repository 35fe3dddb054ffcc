"""Notification queries.

A notification with ``user_id`` NULL is a broadcast: every signed-in user sees
it, and its read flag is shared.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from tourism.db.session import require_db
from tourism.models.notification import NOTIFICATION_TYPES, Notification

logger = logging.getLogger(__name__)


def _visible_to(user_id: int):
    return or_(Notification.user_id == user_id, Notification.user_id.is_(None))


def create_notification(
    db: Session | None,
    title: str,
    message: str,
    type: str = "info",
    user_id: int | None = None,
    link: str | None = None,
) -> Notification:
    """Create a notification for ``user_id``, or a broadcast when it is None."""
    db = require_db(db)
    if type not in NOTIFICATION_TYPES:
        raise ValueError(f"Unknown notification type: {type}")
    try:
        notification = Notification(user_id=user_id, title=title, message=message, type=type, link=link)
        db.add(notification)
        db.commit()
        db.refresh(notification)
        return notification
    except Exception:
        db.rollback()
        raise


def get_user_notifications(db: Session | None, user_id: int) -> list[Notification]:
    if db is None:
        logger.warning("[Database] Cannot list notifications: database not available")
        return []
    stmt = (
        select(Notification)
        .where(_visible_to(user_id))
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def get_unread_count(db: Session | None, user_id: int) -> int:
    if db is None:
        logger.warning("[Database] Cannot count notifications: database not available")
        return 0
    stmt = select(func.count(Notification.id)).where(_visible_to(user_id), Notification.is_read.is_(False))
    return int(db.execute(stmt).scalar_one())


def mark_as_read(db: Session | None, notification_id: int, user_id: int) -> None:
    db = require_db(db)
    db.execute(
        update(Notification)
        .where(Notification.id == notification_id, _visible_to(user_id))
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    db.commit()


def mark_all_as_read(db: Session | None, user_id: int) -> None:
    db = require_db(db)
    db.execute(
        update(Notification)
        .where(_visible_to(user_id), Notification.is_read.is_(False))
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    db.commit()


def delete_notification(db: Session | None, notification_id: int, user_id: int, is_admin: bool = False) -> None:
    """Delete one of the caller's notifications; broadcasts only go away for admins."""
    db = require_db(db)
    owned = Notification.user_id == user_id
    if is_admin:
        owned = _visible_to(user_id)
    db.execute(
        delete(Notification)
        .where(Notification.id == notification_id, owned)
        .execution_options(synchronize_session=False)
    )
    db.commit()
