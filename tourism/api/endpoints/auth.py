"""Session endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from tourism.api.deps import get_current_user, get_settings
from tourism.core.config import Settings
from tourism.models.user import User
from tourism.schemas import SuccessResponse, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Optional[UserOut])
def me(user: Optional[User] = Depends(get_current_user)) -> Optional[User]:
    """The signed-in user, or null."""
    return user


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response, settings: Settings = Depends(get_settings)) -> SuccessResponse:
    response.delete_cookie(settings.session_cookie_name, path="/")
    return SuccessResponse()
