"""Place endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourism.api.deps import require_admin
from tourism.db.session import get_db
from tourism.schemas import IdRef, PlaceCreate, PlaceOut, PlaceRef, PlaceUpdate, SuccessResponse
from tourism.services import places as places_service

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/list", response_model=list[PlaceOut])
def list_places(db: Optional[Session] = Depends(get_db)) -> list[dict]:
    """Return every place with its rating aggregate, newest first."""
    return places_service.get_all_places(db)


@router.get("/getById", response_model=Optional[PlaceOut])
def get_place(id: int = Query(...), db: Optional[Session] = Depends(get_db)) -> Optional[dict]:
    """Return one place, or null when it does not exist."""
    return places_service.get_place_by_id(db, id)


@router.post("/incrementView", response_model=SuccessResponse)
def increment_view(payload: PlaceRef, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    places_service.increment_view_count(db, payload.place_id)
    return SuccessResponse()


@router.post("/create", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def create_place(payload: PlaceCreate, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    places_service.create_place(db, payload.model_dump())
    return SuccessResponse()


@router.post("/update", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def update_place(payload: PlaceUpdate, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    """Apply only the fields present in the request."""
    data = payload.model_dump(exclude_unset=True, exclude={"id"})
    places_service.update_place(db, payload.id, data)
    return SuccessResponse()


@router.post("/delete", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def delete_place(payload: IdRef, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    places_service.delete_place(db, payload.id)
    return SuccessResponse()
