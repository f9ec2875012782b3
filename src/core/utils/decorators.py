"""
Error handling shared by every API Gateway Lambda handler.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import (
    CatalogServiceError,
    ProductNotFoundError,
    ValidationError,
)
from core.utils.response import JsonDict, ResponseBuilder

logger = Logger(service="catalog-api", utc=True)

# Messages starting with one of these were written for clients
_CLIENT_SAFE_PREFIXES = (
    "Invalid",
    "Missing",
    "Required",
    "Must",
    "Cannot",
    "Unable to",
    "Product",
    "Image",
    "Provide",
)

_GENERIC_MESSAGES: tuple[tuple[type[Exception] | tuple[type[Exception], ...], str], ...] = (
    (ValueError, "The provided data is invalid. Please check your input and try again."),
    ((KeyError, AttributeError), "A required field is missing. Please ensure all required fields are provided."),
    (TypeError, "The data format is incorrect. Please check the request format."),
)


def _client_message(exc: Exception) -> str:
    text = str(exc)
    if text.startswith(_CLIENT_SAFE_PREFIXES):
        return text

    for types, message in _GENERIC_MESSAGES:
        if isinstance(exc, types):
            return message

    return "We encountered an issue processing your request. Please try again."


def _error_response(exc: Exception, *, request_id: str | None, cors_origin: str | None) -> JsonDict:
    """Map an exception escaping a handler to its HTTP response."""
    kwargs: dict[str, Any] = {"request_id": request_id, "cors_origin": cors_origin}

    if isinstance(exc, PydanticValidationError):
        return ResponseBuilder.invalid_request(exc, **kwargs)
    if isinstance(exc, ProductNotFoundError):
        return ResponseBuilder.not_found(exc.message, **kwargs)
    if isinstance(exc, ValidationError):
        return ResponseBuilder.bad_request(exc.message, details=exc.details or None, **kwargs)
    if isinstance(exc, CatalogServiceError):
        return ResponseBuilder.service_error(exc, **kwargs)
    if isinstance(exc, (ValueError, KeyError, TypeError, AttributeError)):
        return ResponseBuilder.bad_request(_client_message(exc), **kwargs)
    if isinstance(exc, PermissionError):
        return ResponseBuilder.forbidden("You don't have permission to perform this action.", **kwargs)
    if isinstance(exc, (ConnectionError, TimeoutError)):
        return ResponseBuilder.unavailable(
            "Unable to connect to required services. Please try again later.", **kwargs
        )

    return ResponseBuilder.internal_error(
        "We're experiencing technical difficulties. Please try again in a few moments.",
        **kwargs,
    )


def _is_client_error(exc: Exception) -> bool:
    if isinstance(exc, CatalogServiceError):
        return isinstance(exc, (ProductNotFoundError, ValidationError))
    return isinstance(exc, (ValueError, KeyError, TypeError, AttributeError, PermissionError))


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Wrap a Lambda handler with CORS preflight and error mapping.

    Exceptions escaping the handler become JSON error responses:

    - pydantic ValidationError, domain ValidationError: 400
    - ProductNotFoundError: 404
    - any other CatalogServiceError: 500 with its error code
    - ValueError, KeyError, TypeError, AttributeError: 400
    - PermissionError: 403
    - ConnectionError, TimeoutError: 503
    - anything else: 500 with a generic message

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"status": "ok"})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)
        except Exception as exc:
            log_extra = {
                "handler": func.__name__,
                "request_id": request_id,
                "error": str(exc),
                "error_type": type(exc).__name__,
            }
            if _is_client_error(exc):
                logger.warning("Request rejected", extra=log_extra)
            else:
                logger.exception("Request failed", extra=log_extra)

            return _error_response(exc, request_id=request_id, cors_origin=cors_origin)

    return wrapper
