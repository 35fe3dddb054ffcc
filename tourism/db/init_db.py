"""Database initialization utilities."""

from sqlalchemy.engine import Engine

from tourism import models  # noqa: F401
from tourism.db.base import Base


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
