"""Derive media store public IDs from previously issued image URLs."""

from core.utils.constants import PRODUCT_IMAGE_FOLDER


def extract_public_id(url: str, folder: str = PRODUCT_IMAGE_FOLDER) -> str | None:
    """Map an image URL back to the identifier needed to delete it.

    The last path segment is stripped of its extension and prefixed with the
    folder, e.g. ``https://cdn.example.com/furniture_products/abc123.jpg``
    becomes ``furniture_products/abc123``.

    Returns None when the URL has no usable final segment or that segment
    carries no extension. Extension-less identifiers are not supported.
    """
    if not url:
        return None

    segment = url.split("/")[-1]
    if not segment:
        return None

    dot = segment.rfind(".")
    if dot <= 0:
        return None

    return f"{folder}/{segment[:dot]}"
