"""Core configuration, errors, and result types."""

from collab.core.config import Settings, get_settings
from collab.core.errors import (
    CollabError,
    ConfigurationError,
    OperationError,
    OperationFailure,
    ValidationError,
)
from collab.core.result import Err, Ok, Result

__all__ = [
    "Settings",
    "get_settings",
    "CollabError",
    "ConfigurationError",
    "OperationError",
    "OperationFailure",
    "ValidationError",
    "Err",
    "Ok",
    "Result",
]
