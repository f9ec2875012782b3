"""
Builders for API Gateway proxy integration responses.

JSON responses always carry CORS headers. Error bodies share one shape:
``{"error", "message", "timestamp", "details"?, "request_id"?}``.
"""

from __future__ import annotations

import base64
import json
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.models.errors import CatalogServiceError
from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    EXPOSE_HEADERS,
    JSON_CONTENT_TYPE,
)
from core.utils.time import utc_now_iso
from core.utils.validators import sanitize_validation_errors

JsonDict = dict[str, Any]


def _cors_headers(origin: str | None) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin or CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    @staticmethod
    def json(
        status: HTTPStatus,
        body: JsonDict | None = None,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = dict(body or {})
        if request_id:
            payload["request_id"] = request_id

        return {
            "statusCode": status.value,
            "headers": {"Content-Type": JSON_CONTENT_TYPE, **_cors_headers(cors_origin)},
            "body": json.dumps(payload),
        }

    @staticmethod
    def ok(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.json(HTTPStatus.OK, body, **kwargs)

    @staticmethod
    def created(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.json(HTTPStatus.CREATED, body, **kwargs)

    @staticmethod
    def no_content(*, cors_origin: str | None = None) -> JsonDict:
        """Empty 204, used for CORS preflight."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": {"Content-Type": JSON_CONTENT_TYPE, **_cors_headers(cors_origin)},
            "body": "",
        }

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return ResponseBuilder.json(
            status,
            payload,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @staticmethod
    def bad_request(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.BAD_REQUEST, message=message, **kwargs)

    @staticmethod
    def invalid_request(exc: PydanticValidationError, **kwargs: Any) -> JsonDict:
        """400 listing each offending field of a rejected request model."""
        errors = sanitize_validation_errors(exc.errors(include_input=False, include_url=False))
        return ResponseBuilder.bad_request(
            "Invalid request params",
            details={"errors": errors},
            **kwargs,
        )

    @staticmethod
    def forbidden(message: str = "Forbidden", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.FORBIDDEN, message=message, **kwargs)

    @staticmethod
    def not_found(message: str = "Resource not found", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.NOT_FOUND, message=message, **kwargs)

    @staticmethod
    def product_not_found(product_id: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.not_found(f"Product not found: {product_id}", **kwargs)

    @staticmethod
    def unavailable(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.SERVICE_UNAVAILABLE, message=message, **kwargs)

    @staticmethod
    def internal_error(message: str = "Internal server error", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            **kwargs,
        )

    @staticmethod
    def service_error(exc: CatalogServiceError, **kwargs: Any) -> JsonDict:
        """500 carrying the error code and client-safe message of exc."""
        return ResponseBuilder.internal_error(exc.message, error=exc.error_code, **kwargs)

    @staticmethod
    def binary_response(
        content: bytes,
        *,
        content_type: str,
        headers: dict[str, str] | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Base64 body flagged for API Gateway binary passthrough."""
        response_headers: dict[str, str] = {
            "Content-Type": content_type,
            "Content-Length": str(len(content)),
            "Access-Control-Expose-Headers": EXPOSE_HEADERS,
        }
        if cors_origin:
            response_headers.update(_cors_headers(cors_origin))
        response_headers.update(headers or {})

        return {
            "statusCode": HTTPStatus.OK.value,
            "headers": response_headers,
            "body": base64.b64encode(content).decode("utf-8"),
            "isBase64Encoded": True,
        }
