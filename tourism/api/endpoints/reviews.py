"""Review endpoints.

``list``, ``listAll`` and ``getAllForAdmin`` return the same admin listing;
all three names are kept for existing clients.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourism.api.deps import require_admin, require_user
from tourism.db.session import get_db
from tourism.models.user import User
from tourism.schemas import AdminReviewOut, IdRef, ReviewCreate, ReviewOut, SuccessResponse
from tourism.services import reviews as reviews_service

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/getByPlaceId", response_model=list[ReviewOut])
def list_place_reviews(
    place_id: int = Query(..., alias="placeId"),
    db: Optional[Session] = Depends(get_db),
) -> list[dict]:
    return reviews_service.get_reviews_by_place_id(db, place_id)


@router.get("/list", response_model=list[AdminReviewOut], dependencies=[Depends(require_admin)])
def list_reviews(db: Optional[Session] = Depends(get_db)) -> list[dict]:
    return reviews_service.get_all_reviews(db)


@router.get("/listAll", response_model=list[AdminReviewOut], dependencies=[Depends(require_admin)])
def list_all_reviews(db: Optional[Session] = Depends(get_db)) -> list[dict]:
    return reviews_service.get_all_reviews(db)


@router.get("/getAllForAdmin", response_model=list[AdminReviewOut], dependencies=[Depends(require_admin)])
def list_reviews_for_admin(db: Optional[Session] = Depends(get_db)) -> list[dict]:
    return reviews_service.get_all_reviews(db)


@router.post("/create", response_model=SuccessResponse)
def create_review(
    payload: ReviewCreate,
    user: User = Depends(require_user),
    db: Optional[Session] = Depends(get_db),
) -> SuccessResponse:
    """Rate a place as the signed-in user."""
    reviews_service.create_review(
        db,
        place_id=payload.place_id,
        user_id=user.id,
        rating=payload.rating,
        comment=payload.comment,
    )
    return SuccessResponse()


@router.post("/delete", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def delete_review(payload: IdRef, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    reviews_service.delete_review(db, payload.id)
    return SuccessResponse()
