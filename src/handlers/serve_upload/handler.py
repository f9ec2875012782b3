"""
Lambda handler serving uploaded images from the local uploads directory.

Mapped to `GET /uploads/images/{proxy+}`. The directory is resolved once,
when the module is loaded.
"""

from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import STATIC_CACHE_MAX_AGE, STATIC_UPLOADS_URL_PREFIX
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.uploads import resolve_uploads_dir

from .service import StaticAssetService

logger = Logger(utc=True)
tracer = Tracer()

UPLOADS_ROOT = resolve_uploads_dir()


def _requested_path(event: dict[str, Any]) -> str:
    path_params = event.get("pathParameters") or {}
    proxy = path_params.get("proxy")
    if proxy:
        return str(proxy)

    # Fall back to the raw path when no proxy parameter is configured
    path = str(event.get("path") or "")
    prefix = f"{STATIC_UPLOADS_URL_PREFIX}/"
    return path[len(prefix):] if path.startswith(prefix) else ""


@api_gateway_handler
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return the requested image as a base64-encoded binary response."""
    relative_path = _requested_path(event)

    logger.debug(
        "Received static asset request",
        extra={"path": relative_path, "request_id": getattr(context, "aws_request_id", None)},
    )

    asset = StaticAssetService(UPLOADS_ROOT).read_asset(relative_path)
    if asset is None:
        return ResponseBuilder.not_found(f"File not found: {relative_path or '/'}")

    content, content_type = asset
    return ResponseBuilder.binary_response(
        content,
        content_type=content_type,
        headers={"Cache-Control": f"public, max-age={STATIC_CACHE_MAX_AGE}"},
    )
