"""Shared steps of every route: validate input, delegate, unwrap.

Routes validate their required fields with the ``require_*`` helpers, which
raise ``ValidationError`` (400), then hand exactly one data-access call to
``delegate``, which turns a failed ``Result`` into ``OperationError`` (500).
"""

import logging
import uuid
from collections.abc import Awaitable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from collab.core.errors import OperationError, OperationFailure, ValidationError
from collab.core.result import Err, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

USER_ID_REQUIRED = "User ID is required"


def require_uuid(value: Any, *, missing: str, label: str) -> uuid.UUID:
    """Validate a required identifier from a body or query string.

    Args:
        value: The raw value.
        missing: Message used when the value is absent or not a string.
        label: Human name of the identifier, used for format errors.

    Raises:
        ValidationError: If the value is absent, not a string, or not a UUID.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(missing)

    try:
        return uuid.UUID(value.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid {label} ID format") from e


def require_user_id(value: Any) -> uuid.UUID:
    """Validate the ``userId`` field most routes require."""
    return require_uuid(value, missing=USER_ID_REQUIRED, label="user")


def parse_path_id(value: str, label: str) -> uuid.UUID:
    """Validate an identifier taken from the URL path."""
    return require_uuid(value, missing=f"Invalid {label} ID format", label=label)


def require_text(value: Any, message: str) -> str:
    """Validate a required, non-blank string field."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def describe_validation_errors(errors: list[dict]) -> str:
    """Condense pydantic validation errors into one client-facing sentence."""
    if not errors:
        return "Invalid request"
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Request body must be valid JSON"

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    return f"Invalid value for {field or 'request'}: {first.get('msg', 'invalid')}"


def build_model(model: type[M], **fields: Any) -> M:
    """Construct a domain model from validated request fields.

    Raises:
        ValidationError: If a field breaks one of the model's constraints,
            such as a maximum length.
    """
    try:
        return model(**fields)
    except PydanticValidationError as e:
        raise ValidationError(describe_validation_errors(e.errors())) from e


async def delegate(operation: Awaitable[Result[T]], fallback: str) -> T:
    """Await one data-access call and unwrap its result.

    Args:
        operation: The pending helper call.
        fallback: Message used when the failure carries none.

    Returns:
        The helper's value.

    Raises:
        OperationError: If the helper returned ``Err`` or raised.
    """
    try:
        result = await operation
    except Exception as e:
        logger.error(f"Data operation raised: {e}", exc_info=True)
        raise OperationError(str(e) or fallback, OperationFailure.UNEXPECTED) from e

    if isinstance(result, Err):
        raise OperationError(result.error.message or fallback, result.error.failure)

    return result.value
