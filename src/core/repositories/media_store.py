"""Abstract contract for remote image storage."""

from abc import ABC, abstractmethod

from core.models.media import DeletionResult


class MediaStore(ABC):
    """Contract for the media store hosting product images.

    Implementations could be S3, local disk, a third-party CDN, etc.
    """

    @abstractmethod
    def upload(self, *, data: bytes, folder: str) -> str:
        """Store image bytes under a folder.

        Args:
            data: Raw image content
            folder: Logical namespace, e.g. 'furniture_products'

        Returns:
            Durable, publicly resolvable URL of the stored image. Its last
            path segment is '<name>.<ext>' and '<folder>/<name>' is the
            public ID accepted by delete().

        Raises:
            ImageUploadFailedError: If the upload cannot complete
        """

    @abstractmethod
    def delete(self, *, public_id: str) -> DeletionResult:
        """Best-effort deletion of a previously uploaded image.

        Never raises: failures are logged and reported through the
        returned result.

        Args:
            public_id: '<folder>/<name>' as derived from the image URL
        """
