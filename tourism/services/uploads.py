"""Media uploads for places and categories."""

from __future__ import annotations

import base64
import binascii
import logging
import secrets
import time

from tourism.core.errors import StorageUnavailableError
from tourism.utils.s3_storage import S3StorageManager

logger = logging.getLogger(__name__)

UPLOAD_PREFIX = "uploads"


class InvalidUploadError(ValueError):
    """The upload payload is not valid base64."""


def safe_file_name(value: str, max_len: int = 100) -> str:
    # keep the extension readable; everything else unusual becomes "_"
    safe = "".join(c if c.isalnum() or c in ("-", "_", ".") else "_" for c in value)
    return safe[-max_len:] if len(safe) > max_len else safe


def build_upload_key(file_name: str) -> str:
    """``uploads/{epoch ms}-{random hex}-{file name}``; unique per call."""
    return f"{UPLOAD_PREFIX}/{int(time.time() * 1000)}-{secrets.token_hex(4)}-{safe_file_name(file_name)}"


def upload_file(
    storage: S3StorageManager | None,
    file_name: str,
    file_data: str,
    content_type: str,
) -> dict[str, str]:
    """Decode a base64 payload, store it and return its ``url`` and ``key``."""
    if storage is None:
        raise StorageUnavailableError()
    try:
        payload = base64.b64decode(file_data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidUploadError("fileData must be base64-encoded") from exc

    key = build_upload_key(file_name)
    url = storage.upload_bytes(key, payload, content_type)
    logger.info("Stored upload %s (%d bytes)", key, len(payload))
    return {"url": url, "key": key}
