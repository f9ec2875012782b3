"""Image type detection from leading bytes."""

from core.utils.constants import (
    FALLBACK_CONTENT_TYPE,
    FALLBACK_EXTENSION,
    IMAGE_EXTENSIONS,
)

# Signatures are checked in order; WebP is a RIFF container.
_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"RIFF", "image/webp"),
)


def detect_mime_type(data: bytes) -> str:
    """Return the image MIME type for data.

    Raises:
        ValueError: If the bytes match no known image signature
    """
    mime = next((m for sig, m in _SIGNATURES if data.startswith(sig)), None)
    if mime is None:
        raise ValueError("Unsupported or unknown file type")
    return mime


def guess_content_type(data: bytes) -> str:
    try:
        return detect_mime_type(data)
    except ValueError:
        return FALLBACK_CONTENT_TYPE


def extension_for(mime_type: str) -> str:
    """Storage extension for a MIME type, 'bin' when unknown."""
    return IMAGE_EXTENSIONS.get(mime_type, (FALLBACK_EXTENSION,))[0]
