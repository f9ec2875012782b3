"""Exceptions raised by the catalog service.

Each error carries a client-safe ``message``, a stable ``error_code`` used
in API responses and optional ``details`` for logs.
"""

from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_IMAGE_DELETE_FAILED,
    ERROR_CODE_IMAGE_UPLOAD_FAILED,
    ERROR_CODE_INTERNAL_ERROR,
    ERROR_CODE_PRODUCT_NOT_FOUND,
    ERROR_CODE_PRODUCT_REPOSITORY,
    ERROR_CODE_VALIDATION_FAILED,
)


class CatalogServiceError(Exception):
    """Base class for every catalog error.

    Subclasses only pick a default error code; callers may still pass a
    more specific one.
    """

    default_error_code: ClassVar[str] = ERROR_CODE_INTERNAL_ERROR

    def __init__(
        self,
        *,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details: dict[str, Any] = details or {}


class ValidationError(CatalogServiceError):
    """The request is well-formed JSON but not an acceptable product."""

    default_error_code = ERROR_CODE_VALIDATION_FAILED


class ProductNotFoundError(CatalogServiceError):
    """An update targeted a product that does not exist."""

    default_error_code = ERROR_CODE_PRODUCT_NOT_FOUND


class ImageUploadFailedError(CatalogServiceError):
    default_error_code = ERROR_CODE_IMAGE_UPLOAD_FAILED


class ImageDeletionFailedError(CatalogServiceError):
    """A media store could not delete an image.

    Only used inside media store implementations, which turn it into a
    failed ``DeletionResult``.
    """

    default_error_code = ERROR_CODE_IMAGE_DELETE_FAILED


class ProductRepositoryError(CatalogServiceError):
    default_error_code = ERROR_CODE_PRODUCT_REPOSITORY
