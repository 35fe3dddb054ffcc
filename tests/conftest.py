import os
import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("JWT_SECRET", "test-secret")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from tourism.core.config import Settings  # noqa: E402
from tourism.core.security import create_session_token  # noqa: E402
from tourism.db.init_db import init_db  # noqa: E402
from tourism.main import create_app  # noqa: E402
from tourism.models.place import Place  # noqa: E402
from tourism.models.user import User  # noqa: E402
from tourism.services.places import create_place  # noqa: E402
from tourism.services.users import upsert_user  # noqa: E402

OWNER_OPEN_ID = "owner-open-id"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        owner_open_id=OWNER_OPEN_ID,
        s3_bucket=None,
    )


@pytest.fixture
def app(settings: Settings):
    application = create_app(settings)
    init_db(application.state.session_factory.kw["bind"])
    return application


@pytest.fixture
def db(app) -> Session:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def anon_client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_user(app) -> Callable[..., User]:
    """Create (or update) a user row and return a detached copy."""

    def _make(open_id: str, role: str = "user", name: str | None = None, email: str | None = None) -> User:
        session = app.state.session_factory()
        try:
            user = upsert_user(session, open_id, name=name or open_id, email=email, role=role)
            session.expunge(user)
            return user
        finally:
            session.close()

    return _make


@pytest.fixture
def client_for(app, settings: Settings) -> Callable[[User], TestClient]:
    """A client whose requests carry a session cookie for ``user``."""

    def _client(user: User) -> TestClient:
        token = create_session_token(settings, user.open_id, name=user.name)
        return TestClient(app, cookies={settings.session_cookie_name: token})

    return _client


@pytest.fixture
def admin(make_user) -> User:
    return make_user("admin-user", role="admin", name="Admin User", email="admin@example.com")


@pytest.fixture
def regular_user(make_user) -> User:
    return make_user("regular-user", name="Regular User", email="user@example.com")


@pytest.fixture
def admin_client(client_for, admin) -> TestClient:
    return client_for(admin)


@pytest.fixture
def user_client(client_for, regular_user) -> TestClient:
    return client_for(regular_user)


@pytest.fixture
def add_place(db) -> Callable[..., Place]:
    def _add(**overrides) -> Place:
        data = {
            "name": "Doi Suthep",
            "description": "Temple on the mountain",
            "category": "Temple",
            "latitude": "18.8048",
            "longitude": "98.9217",
            "image_url": "https://example.com/doi-suthep.jpg",
        }
        data.update(overrides)
        return create_place(db, data)

    return _add
