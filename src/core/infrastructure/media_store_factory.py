"""Select the media store backend from the environment."""

import os

from aws_lambda_powertools import Logger

from core.infrastructure.aws.s3_media_store import S3MediaStore
from core.infrastructure.local.local_media_store import LocalMediaStore
from core.repositories.media_store import MediaStore
from core.utils.constants import (
    ENV_MEDIA_STORE_BACKEND,
    MEDIA_STORE_BACKEND_LOCAL,
    MEDIA_STORE_BACKEND_S3,
)

logger = Logger(utc=True)


def create_media_store() -> MediaStore:
    backend = (os.getenv(ENV_MEDIA_STORE_BACKEND) or MEDIA_STORE_BACKEND_S3).strip().lower()

    if backend == MEDIA_STORE_BACKEND_LOCAL:
        logger.debug("Using local media store")
        return LocalMediaStore()

    if backend == MEDIA_STORE_BACKEND_S3:
        return S3MediaStore()

    raise RuntimeError(
        f"{ENV_MEDIA_STORE_BACKEND} must be '{MEDIA_STORE_BACKEND_S3}' "
        f"or '{MEDIA_STORE_BACKEND_LOCAL}', got '{backend}'"
    )
