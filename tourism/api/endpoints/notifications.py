"""Notification endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourism.api.deps import require_admin, require_user
from tourism.db.session import get_db
from tourism.models.user import User
from tourism.schemas import NotificationCreate, NotificationOut, NotificationRef, SuccessResponse
from tourism.services import notifications as notifications_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/list", response_model=list[NotificationOut])
def list_notifications(
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
):
    """Notifications addressed to the caller plus broadcasts, newest first."""
    return notifications_service.get_user_notifications(db, user.id)


@router.get("/unreadCount", response_model=int)
def unread_count(
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> int:
    return notifications_service.get_unread_count(db, user.id)


@router.post("/create", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def create_notification(payload: NotificationCreate, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    """Send to ``userId``, or to everyone when it is omitted."""
    notifications_service.create_notification(
        db,
        title=payload.title,
        message=payload.message,
        type=payload.type,
        user_id=payload.user_id,
        link=payload.link,
    )
    return SuccessResponse()


@router.post("/markAsRead", response_model=SuccessResponse)
def mark_as_read(
    payload: NotificationRef,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    notifications_service.mark_as_read(db, payload.notification_id, user.id)
    return SuccessResponse()


@router.post("/markAllAsRead", response_model=SuccessResponse)
def mark_all_as_read(
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    notifications_service.mark_all_as_read(db, user.id)
    return SuccessResponse()


@router.post("/delete", response_model=SuccessResponse)
def delete_notification(
    payload: NotificationRef,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    notifications_service.delete_notification(
        db, payload.notification_id, user.id, is_admin=user.role == "admin"
    )
    return SuccessResponse()
