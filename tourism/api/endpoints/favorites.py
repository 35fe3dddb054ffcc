"""Favorite endpoints (signed-in users only)."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourism.api.deps import require_user
from tourism.db.session import get_db
from tourism.models.user import User
from tourism.schemas import FavoriteOut, PlaceRef, SuccessResponse
from tourism.services import favorites as favorites_service

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("/list", response_model=list[FavoriteOut])
def list_favorites(
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> list[dict]:
    return favorites_service.get_user_favorites(db, user.id)


@router.post("/add", response_model=SuccessResponse)
def add_favorite(
    payload: PlaceRef,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    """Bookmark a place; bookmarking it again also succeeds."""
    favorites_service.add_favorite(db, user.id, payload.place_id)
    return SuccessResponse()


@router.post("/remove", response_model=SuccessResponse)
def remove_favorite(
    payload: PlaceRef,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    favorites_service.remove_favorite(db, user.id, payload.place_id)
    return SuccessResponse()


@router.get("/isFavorite", response_model=bool)
def is_favorite(
    place_id: int = Query(..., alias="placeId"),
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> bool:
    return favorites_service.is_favorite(db, user.id, place_id)
