"""Accessors for API Gateway proxy events."""

from decimal import Decimal
import json
from typing import Any


def json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    Numbers with a fractional part become Decimal so prices keep their
    exact value all the way to DynamoDB.

    Raises:
        ValueError: If the body is not a JSON object
    """
    try:
        body = json.loads(event.get("body") or "{}", parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON body") from exc

    if not isinstance(body, dict):
        raise ValueError("Invalid JSON body")
    return body


def path_parameter(event: dict[str, Any], name: str) -> str | None:
    return (event.get("pathParameters") or {}).get(name)


def query_parameter(event: dict[str, Any], name: str) -> str | None:
    return (event.get("queryStringParameters") or {}).get(name)


def request_summary(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Fields logged when a handler receives a request."""
    return {
        "http_method": event.get("httpMethod"),
        "path": event.get("path"),
        "request_id": getattr(context, "aws_request_id", None),
        "function_name": getattr(context, "function_name", None),
    }
