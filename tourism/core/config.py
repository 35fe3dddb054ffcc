"""Application configuration."""

from functools import lru_cache
import os

from pydantic import BaseModel


class Settings(BaseModel):
    """Application settings (env values when present, defaults otherwise)."""

    project_name: str = os.getenv("PROJECT_NAME", "District Guide API")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # No DATABASE_URL means the service runs without a store: reads come back
    # empty and writes fail with StoreUnavailableError.
    database_url: str | None = os.getenv("DATABASE_URL") or None

    jwt_secret: str = os.getenv("JWT_SECRET", "change-this-secret-key-in-production")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "app_session_id")
    owner_open_id: str | None = os.getenv("OWNER_OPEN_ID") or None

    s3_bucket: str | None = os.getenv("S3_BUCKET") or None
    s3_region: str = os.getenv("S3_REGION", "ap-southeast-1")
    s3_public_base_url: str | None = os.getenv("S3_PUBLIC_BASE_URL") or None
    aws_access_key_id: str | None = os.getenv("AWS_ACCESS_KEY_ID") or None
    aws_secret_access_key: str | None = os.getenv("AWS_SECRET_ACCESS_KEY") or None


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
