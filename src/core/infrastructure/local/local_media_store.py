"""Local filesystem implementation of MediaStore.

Images are written below the uploads directory that the static asset
handler serves, which makes this backend usable for local development
without an S3 bucket.
"""

import glob
import os
from pathlib import Path
import uuid

from aws_lambda_powertools import Logger

from core.models.errors import ImageUploadFailedError
from core.models.media import DeletionResult, DeletionStatus
from core.repositories.media_store import MediaStore
from core.utils.constants import (
    DEFAULT_LOCAL_MEDIA_BASE_URL,
    ENV_LOCAL_MEDIA_BASE_URL,
    STATIC_UPLOADS_URL_PREFIX,
)
from core.utils.mime import extension_for, guess_content_type
from core.utils.uploads import resolve_uploads_dir, resolve_within

logger = Logger(utc=True)


class LocalMediaStore(MediaStore):
    """Media store writing to '<uploads dir>/<folder>/<hex>.<ext>'."""

    def __init__(
        self,
        *,
        root: Path | None = None,
        base_url: str | None = None,
    ) -> None:
        self._root = (root or resolve_uploads_dir()).resolve()
        self._base_url = (
            base_url
            or os.getenv(ENV_LOCAL_MEDIA_BASE_URL)
            or DEFAULT_LOCAL_MEDIA_BASE_URL
        ).rstrip("/")

    def upload(self, *, data: bytes, folder: str) -> str:
        filename = f"{uuid.uuid4().hex}.{extension_for(guess_content_type(data))}"
        relative = f"{folder}/{filename}"
        path = resolve_within(self._root, relative)

        if path is None:
            raise ImageUploadFailedError(
                message="Invalid upload folder",
                details={"folder": folder},
            )

        logger.debug("Writing image", extra={"path": str(path), "size": len(data)})

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            logger.exception("Local image write failed", extra={"path": str(path)})
            raise ImageUploadFailedError(
                message="Unable to upload image at this time",
                details={"folder": folder},
            ) from exc

        url = f"{self._base_url}{STATIC_UPLOADS_URL_PREFIX}/{relative}"
        logger.info("Image stored locally", extra={"path": str(path), "url": url})
        return url

    def delete(self, *, public_id: str) -> DeletionResult:
        folder, _, stem = public_id.rpartition("/")
        directory = resolve_within(self._root, folder) if folder else self._root

        if directory is None or not stem:
            logger.warning("Rejected public ID", extra={"public_id": public_id})
            return DeletionResult(
                public_id=public_id,
                status=DeletionStatus.FAILED,
                error="Invalid public ID",
            )

        try:
            matches = [p for p in directory.glob(f"{glob.escape(stem)}.*") if p.is_file()]
            for match in matches:
                match.unlink()
        except OSError as exc:
            logger.error(
                "Failed to delete local image",
                extra={"public_id": public_id, "error": str(exc)},
            )
            return DeletionResult(
                public_id=public_id,
                status=DeletionStatus.FAILED,
                error=str(exc),
            )

        if not matches:
            return DeletionResult(public_id=public_id, status=DeletionStatus.NOT_FOUND)

        logger.info("Local image deleted", extra={"public_id": public_id})
        return DeletionResult(public_id=public_id, status=DeletionStatus.DELETED)
