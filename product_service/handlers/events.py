"""Request envelope parsing and response building for product handlers."""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from product_service.exceptions import ValidationError

JSON_HEADERS = {"Content-Type": "application/json"}


def response(status_code: int, body: Optional[Any] = None) -> dict[str, Any]:
    """Build a handler response; body is JSON-encoded when given."""
    if body is None:
        return {"statusCode": status_code}
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body),
    }


def error_response(status_code: int, error: str, message: Optional[str] = None) -> dict[str, Any]:
    body = {"error": error}
    if message is not None:
        body["message"] = message
    return response(status_code, body)


def path_product_id(event: dict[str, Any]) -> str:
    """Extract the productId path parameter.

    Raises:
        ValidationError: If the parameter is missing or empty.
    """
    product_id = (event.get("pathParameters") or {}).get("productId")
    if not product_id:
        raise ValidationError("Missing path parameter: productId")
    return product_id


def json_body(event: dict[str, Any]) -> Any:
    """Decode the JSON request body (str, or raw bytes from the HTTP layer).

    Raises:
        ValidationError: If the body is missing or not valid JSON.
    """
    raw = event.get("body")
    if not raw:
        raise ValidationError("Request body is required")
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError("Request body must be valid JSON") from e


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
