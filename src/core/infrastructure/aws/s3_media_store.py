"""S3-backed implementation of MediaStore."""

import uuid

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import ImageDeletionFailedError, ImageUploadFailedError
from core.models.media import DeletionResult, DeletionStatus
from core.repositories.media_store import MediaStore
from core.utils.mime import extension_for, guess_content_type

logger = Logger(utc=True)


class S3MediaStore(MediaStore):
    """Media store backed by an Amazon S3 bucket.

    Objects are written as '<folder>/<hex>.<ext>', so the public ID
    '<folder>/<hex>' is a key prefix and deletion removes every object
    under '<folder>/<hex>.'.
    """

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create the media store using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    def upload(self, *, data: bytes, folder: str) -> str:
        """Upload image bytes to S3 and return the public object URL."""
        content_type = guess_content_type(data)
        key = f"{folder}/{uuid.uuid4().hex}.{extension_for(content_type)}"

        logger.debug(
            "Uploading image",
            extra={"key": key, "size": len(data), "content_type": content_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=data,
                content_type=content_type,
                metadata={"folder": folder},
            )
        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise ImageUploadFailedError(
                message="Unable to upload image at this time",
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading image")
            raise ImageUploadFailedError(
                message="Unable to upload image at this time",
                details={"key": key},
            ) from exc

        url = self._s3.public_url(key=key)
        logger.info("Image uploaded successfully", extra={"key": key, "url": url})
        return url

    def delete(self, *, public_id: str) -> DeletionResult:
        """Delete every object stored under the public ID. Never raises."""
        logger.debug("Deleting image", extra={"public_id": public_id})

        try:
            deleted = self._remove_objects(public_id)
        except ImageDeletionFailedError as exc:
            logger.error(
                "Failed to delete image from media store",
                extra={"public_id": public_id, "error": str(exc.__cause__ or exc)},
            )
            return DeletionResult(
                public_id=public_id,
                status=DeletionStatus.FAILED,
                error=exc.message,
            )

        if not deleted:
            logger.warning("No stored image matched public ID", extra={"public_id": public_id})
            return DeletionResult(public_id=public_id, status=DeletionStatus.NOT_FOUND)

        logger.info(
            "Image deleted successfully",
            extra={"public_id": public_id, "keys": deleted},
        )
        return DeletionResult(public_id=public_id, status=DeletionStatus.DELETED)

    def _remove_objects(self, public_id: str) -> list[str]:
        try:
            keys = self._s3.list_keys(prefix=f"{public_id}.")
            for key in keys:
                self._s3.delete_object(key=key)
            return keys

        except ClientError as exc:
            raise ImageDeletionFailedError(
                message="Unable to delete image at this time",
                details={"public_id": public_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting image")
            raise ImageDeletionFailedError(
                message="Unable to delete image at this time",
                details={"public_id": public_id},
            ) from exc
