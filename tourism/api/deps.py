"""Request dependencies: store, storage and the access guards.

Guards chain: ``get_current_user`` (public, may be None) -> ``require_user``
(401 without identity) -> ``require_admin`` (403 unless role is admin).
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tourism.core.config import Settings
from tourism.core.security import decode_session_token
from tourism.db.session import get_db
from tourism.models.user import User
from tourism.services.users import upsert_user
from tourism.utils.s3_storage import S3StorageManager


bearer = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Optional[S3StorageManager]:
    return request.app.state.storage


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Optional[Session] = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Optional[User]:
    """Resolve the caller from the session cookie or bearer token; None if anonymous."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token and credentials:
        token = credentials.credentials
    if not token:
        return None

    claims = decode_session_token(settings, token)
    if claims is None:
        return None

    return upsert_user(
        db,
        claims["sub"],
        name=claims.get("name"),
        email=claims.get("email"),
        login_method=claims.get("loginMethod"),
        owner_open_id=settings.owner_open_id,
    )


def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_admin(user: User = Depends(require_user)) -> User:
    if user.role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
