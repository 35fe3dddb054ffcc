"""Shared favorite list endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourism.api.deps import require_user
from tourism.db.session import get_db
from tourism.models.user import User
from tourism.schemas import (
    SharedFavoriteCreate,
    SharedFavoriteCreated,
    SharedFavoriteListOut,
    SharedFavoriteOut,
    ShareRef,
    SuccessResponse,
)
from tourism.services import shared_favorites as shared_service

router = APIRouter(prefix="/sharedFavorites", tags=["sharedFavorites"])


@router.post("/create", response_model=SharedFavoriteCreated)
def create_shared_list(
    payload: SharedFavoriteCreate,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SharedFavoriteCreated:
    """Publish a list of places under a new share id."""
    shared = shared_service.create_shared_list(
        db,
        user_id=user.id,
        title=payload.title,
        description=payload.description,
        place_ids=payload.place_ids,
    )
    return SharedFavoriteCreated(id=shared.id, share_id=shared.share_id)


@router.get("/getByShareId", response_model=Optional[SharedFavoriteOut])
def get_shared_list(
    share_id: str = Query(..., alias="shareId", min_length=1),
    db: Optional[Session] = Depends(get_db),
) -> Optional[dict]:
    """Public read of a shared list; null for an unknown share id."""
    return shared_service.get_by_share_id(db, share_id)


@router.post("/incrementView", response_model=SuccessResponse)
def increment_view(payload: ShareRef, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    shared_service.increment_view_count(db, payload.share_id)
    return SuccessResponse()


@router.get("/listMine", response_model=list[SharedFavoriteListOut])
def list_my_shared_lists(
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> list[dict]:
    return shared_service.get_user_shared_lists(db, user.id)
