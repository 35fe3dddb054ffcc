"""Session tokens issued by the sign-in service.

Only decoding matters to the API; ``create_session_token`` exists for the
sign-in callback and for tooling.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt

from tourism.core.config import Settings

SESSION_LIFETIME = timedelta(days=365)


def create_session_token(
    settings: Settings,
    open_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    login_method: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    claims: dict[str, Any] = {"sub": open_id}
    if name is not None:
        claims["name"] = name
    if email is not None:
        claims["email"] = email
    if login_method is not None:
        claims["loginMethod"] = login_method
    claims["exp"] = datetime.now(timezone.utc) + (expires_delta or SESSION_LIFETIME)
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(settings: Settings, token: str) -> Optional[dict[str, Any]]:
    """Return the token claims, or None when the token is invalid or expired."""
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    if not claims.get("sub"):
        return None
    return claims
