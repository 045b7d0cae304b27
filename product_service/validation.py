"""Product payload validation.

Wraps the pydantic model so callers get a single human-readable message
for the first failing field instead of pydantic's full error list.
"""

import logging
from typing import Any

import pydantic

from product_service.exceptions import ValidationError
from product_service.models import ProductInput

logger = logging.getLogger(__name__)


def _describe(error: dict[str, Any]) -> str:
    """Render one pydantic error entry as a message."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "value"
    ctx = error.get("ctx") or {}
    error_type = error["type"]

    if error_type == "missing":
        text = "is required"
    elif error_type == "model_type":
        text = "must be of type object"
    elif error_type == "string_type":
        text = "must be a string"
    elif error_type == "string_too_short":
        if ctx.get("min_length") == 1:
            text = "is not allowed to be empty"
        else:
            text = f"length must be at least {ctx['min_length']} characters long"
    elif error_type == "string_too_long":
        text = f"length must be less than or equal to {ctx['max_length']} characters long"
    elif error_type in ("float_type", "float_parsing", "finite_number"):
        text = "must be a number"
    elif error_type == "greater_than":
        text = "must be a positive number"
    elif error_type in ("int_type", "int_parsing", "int_from_float"):
        text = "must be an integer"
    elif error_type == "less_than_equal":
        text = f"must be less than or equal to {ctx['le']}"
    elif error_type == "greater_than_equal":
        text = f"must be greater than or equal to {ctx['ge']}"
    elif error_type == "value_error":
        # Custom validators raise ValueError; pydantic prefixes "Value error, "
        text = str(ctx.get("error", error["msg"]))
    else:
        text = error["msg"]

    return f'"{field}" {text}'


def validate_product(payload: Any) -> ProductInput:
    """Validate a create/update payload.

    Args:
        payload: Decoded JSON body.

    Returns:
        The validated ProductInput.

    Raises:
        ValidationError: With the message for the first failing constraint.
    """
    try:
        return ProductInput.model_validate(payload)
    except pydantic.ValidationError as e:
        message = _describe(e.errors()[0])
        logger.info(f"Rejected product payload: {message}")
        raise ValidationError(message) from e
