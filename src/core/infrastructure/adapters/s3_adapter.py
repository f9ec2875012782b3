"""boto3 wrapper for the product media bucket.

The adapter is purely mechanical: boto3 and botocore exceptions propagate
unchanged and are translated by ``S3MediaStore``.
"""

import os
from typing import Any, Protocol

import boto3

from core.utils.constants import (
    DEFAULT_AWS_REGION,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_MEDIA_PUBLIC_BASE_URL,
    ENV_MEDIA_S3_BUCKET_NAME,
)


class S3AdapterProtocol(Protocol):
    """What S3MediaStore needs from the bucket."""

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None: ...

    def list_keys(self, *, prefix: str) -> list[str]: ...

    def delete_object(self, *, key: str) -> None: ...

    def public_url(self, *, key: str) -> str: ...


class S3Adapter:
    """Media bucket operations, configured from the environment.

    MEDIA_S3_BUCKET_NAME is required. MEDIA_PUBLIC_BASE_URL, when set,
    replaces the bucket's virtual-hosted URL in ``public_url`` (a CDN or
    the LocalStack endpoint, for example).
    """

    def __init__(self) -> None:
        bucket = os.getenv(ENV_MEDIA_S3_BUCKET_NAME)
        if not bucket:
            raise RuntimeError(f"{ENV_MEDIA_S3_BUCKET_NAME} environment variable is not set")

        self.bucket = bucket
        self.region = os.getenv(ENV_AWS_REGION) or DEFAULT_AWS_REGION
        self.public_base_url = (os.getenv(ENV_MEDIA_PUBLIC_BASE_URL) or "").rstrip("/")
        self.client: Any = boto3.client(
            "s3",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=self.region,
        )

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            Metadata=metadata,
        )

    def list_keys(self, *, prefix: str) -> list[str]:
        """Every key starting with prefix, across all result pages."""
        pages = self.client.get_paginator("list_objects_v2").paginate(
            Bucket=self.bucket,
            Prefix=prefix,
        )
        return [obj["Key"] for page in pages for obj in page.get("Contents", [])]

    def delete_object(self, *, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)

    def public_url(self, *, key: str) -> str:
        base = self.public_base_url or f"https://{self.bucket}.s3.{self.region}.amazonaws.com"
        return f"{base}/{key}"
