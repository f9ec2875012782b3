"""Request validation helpers shared by the product handlers."""

import base64
import binascii
from typing import Any, TypeVar

from pydantic import BaseModel

from core.utils.constants import ALLOWED_MIME_TYPES, MAX_FILE_SIZE, MAX_IMAGE_SIZE_MB
from core.utils.mime import detect_mime_type

ModelT = TypeVar("ModelT", bound=BaseModel)

# (substring of pydantic's message, message returned to the client)
_FRIENDLY_MESSAGES: tuple[tuple[str, str], ...] = (
    ("base64", "Image must be a valid Base64-encoded string"),
    ("field required", "This field is required"),
    ("valid string", "Invalid value type"),
    ("valid decimal", "Invalid value type"),
)


def _friendly(message: str) -> str:
    lowered = message.lower()
    for needle, replacement in _FRIENDLY_MESSAGES:
        if needle in lowered:
            return replacement
    return message


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic error dicts to ``{"field", "message"}`` pairs.

    Inputs, URLs and error contexts are dropped so request content never
    ends up in a response.
    """
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", [])) or "body",
            "message": _friendly(err.get("msg", "Invalid value").replace("Value error,", "").strip()),
        }
        for err in errors
    ]


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Build a request model, raising pydantic.ValidationError on bad input."""
    return model.model_validate(data)


def decode_image(value: str) -> bytes:
    """Decode a base64 product image and check it can be stored.

    Raises:
        ValueError: If the payload is not base64, is empty, is larger than
            the upload limit or is not a supported image type
    """
    try:
        data = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Invalid base64 encoded image") from exc

    if not data:
        raise ValueError("Decoded image is empty")

    if len(data) > MAX_FILE_SIZE:
        raise ValueError(f"Image size exceeds {MAX_IMAGE_SIZE_MB}MB limit")

    try:
        mime_type = detect_mime_type(data)
    except ValueError as exc:
        raise ValueError("Unsupported image type") from exc

    if mime_type not in ALLOWED_MIME_TYPES:
        raise ValueError("Unsupported image type")

    return data
