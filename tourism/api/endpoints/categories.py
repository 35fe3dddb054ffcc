"""Category endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourism.api.deps import require_admin
from tourism.db.session import get_db
from tourism.schemas import CategoryCreate, CategoryOut, CategoryUpdate, IdRef, SuccessResponse
from tourism.services import categories as categories_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/list", response_model=list[CategoryOut])
def list_categories(db: Optional[Session] = Depends(get_db)):
    return categories_service.get_all_categories(db)


@router.post("/create", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def create_category(payload: CategoryCreate, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    categories_service.create_category(db, payload.name, payload.image_url)
    return SuccessResponse()


@router.post("/update", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def update_category(payload: CategoryUpdate, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    categories_service.update_category(db, payload.id, payload.model_dump(exclude_unset=True, exclude={"id"}))
    return SuccessResponse()


@router.post("/delete", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def delete_category(payload: IdRef, db: Optional[Session] = Depends(get_db)) -> SuccessResponse:
    """Delete a category; 409 while any place still uses its name."""
    categories_service.delete_category(db, payload.id)
    return SuccessResponse()
