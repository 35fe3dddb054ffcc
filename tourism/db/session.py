"""Engine and session construction.

The session factory is built from explicit settings in ``create_app`` and kept
on ``app.state``; request handlers receive sessions through :func:`get_db`.
"""

from __future__ import annotations

import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tourism.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; SQLite URLs get thread-sharing connect args."""
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(database_url: str | None) -> sessionmaker | None:
    """Return a session factory, or None when no database is configured."""
    if not database_url:
        logger.warning("[Database] DATABASE_URL not set; running without a store")
        return None
    engine = create_db_engine(database_url)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session | None]:
    """FastAPI dependency yielding a session, or None in degraded mode."""
    factory: sessionmaker | None = request.app.state.session_factory
    if factory is None:
        yield None
        return
    db = factory()
    try:
        yield db
    finally:
        db.close()


def require_db(db: Session | None) -> Session:
    """Return ``db`` or raise when writing without a store."""
    if db is None:
        raise StoreUnavailableError()
    return db
