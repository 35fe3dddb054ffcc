"""Schemas for media uploads."""

from pydantic import Field

from tourism.schemas.base import ApiModel


class UploadRequest(ApiModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_data: str = Field(..., description="Base64-encoded file content")
    content_type: str = Field(..., min_length=1)


class UploadResult(ApiModel):
    url: str
    key: str
