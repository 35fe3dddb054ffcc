"""Media upload endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from tourism.api.deps import get_storage, require_admin
from tourism.schemas import UploadRequest, UploadResult
from tourism.services.uploads import InvalidUploadError, upload_file
from tourism.utils.s3_storage import S3StorageManager

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/file", response_model=UploadResult, dependencies=[Depends(require_admin)])
def upload(
    payload: UploadRequest,
    storage: Optional[S3StorageManager] = Depends(get_storage),
) -> dict:
    """Store a base64 payload and return the URL to save on a place or category."""
    try:
        return upload_file(storage, payload.file_name, payload.file_data, payload.content_type)
    except InvalidUploadError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
