"""Admin analytics endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourism.api.deps import require_admin
from tourism.db.session import get_db
from tourism.schemas import ViewStats
from tourism.services import stats as stats_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/getViewStats", response_model=ViewStats, dependencies=[Depends(require_admin)])
def get_view_stats(db: Optional[Session] = Depends(get_db)) -> dict:
    """Total views, views per category and the three most viewed places."""
    return stats_service.get_view_stats(db)
