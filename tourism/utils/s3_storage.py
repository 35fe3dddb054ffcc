"""S3 storage manager for uploaded media.

- uploads/{epoch ms}-{random}-{file name}  (place and category media)
"""

from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError


class StorageError(RuntimeError):
    """The object store rejected a request."""


class S3StorageManager:
    """Stores media in S3 and hands back public URLs."""

    def __init__(
        self,
        bucket_name: str,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        region: str = "ap-southeast-1",
        public_base_url: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.bucket_name = bucket_name
        self.region = region
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self.s3_client = client or boto3.client(
            "s3",
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            region_name=region,
        )

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def upload_bytes(self, key: str, data: bytes, content_type: str) -> str:
        """Upload ``data`` under ``key`` and return its public URL."""
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except ClientError as exc:
            raise StorageError(f"Failed to store {key}: {exc}") from exc
        return self.public_url(key)
