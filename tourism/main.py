"""FastAPI application entry point."""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import logging  # noqa: E402
from typing import Optional  # noqa: E402

from fastapi import FastAPI, Request, status  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from sqlalchemy.exc import IntegrityError  # noqa: E402

from tourism.api.routes import router  # noqa: E402
from tourism.core.config import Settings, get_settings  # noqa: E402
from tourism.core.errors import CategoryInUseError, StorageUnavailableError, StoreUnavailableError  # noqa: E402
from tourism.core.logging import configure_logging  # noqa: E402
from tourism.db.init_db import init_db  # noqa: E402
from tourism.db.session import create_session_factory  # noqa: E402
from tourism.utils.s3_storage import S3StorageManager, StorageError  # noqa: E402

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Optional[S3StorageManager]:
    """S3 storage for uploads, or None when no bucket is configured."""
    if not settings.s3_bucket:
        return None
    return S3StorageManager(
        bucket_name=settings.s3_bucket,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region=settings.s3_region,
        public_base_url=settings.s3_public_base_url,
    )


def _error(status_code: int, code: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"code": code, "detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "STORE_UNAVAILABLE", str(exc))

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable(request: Request, exc: StorageUnavailableError) -> JSONResponse:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "STORAGE_UNAVAILABLE", str(exc))

    @app.exception_handler(StorageError)
    async def storage_failed(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Upload failed: %s", exc)
        return _error(status.HTTP_502_BAD_GATEWAY, "STORAGE_ERROR", "File storage rejected the upload")

    @app.exception_handler(CategoryInUseError)
    async def category_in_use(request: Request, exc: CategoryInUseError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, "CONFLICT", str(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error on %s: %s", request.url.path, exc.orig)
        return _error(status.HTTP_409_CONFLICT, "CONFLICT", "Conflicts with an existing record")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from explicit settings."""
    settings = settings or get_settings()

    app = FastAPI(title=settings.project_name)
    app.state.settings = settings
    app.state.session_factory = create_session_factory(settings.database_url)
    app.state.storage = build_storage(settings)

    app.include_router(router, prefix=settings.api_prefix)
    register_exception_handlers(app)

    @app.on_event("startup")
    def on_startup() -> None:
        """Initialize database artifacts."""
        factory = app.state.session_factory
        if factory is not None:
            init_db(factory.kw["bind"])

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Health check endpoint for Docker."""
        return {"status": "ok"}

    return app


configure_logging(get_settings().log_level)
app = create_app()
