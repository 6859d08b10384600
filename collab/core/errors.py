"""Error taxonomy shared by the data-access helpers and the routes.

Only two kinds reach a client: ``ValidationError`` (HTTP 400) and
``OperationError`` (HTTP 500).
"""

import enum


class OperationFailure(str, enum.Enum):
    """Why a delegated data operation failed."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    STORAGE = "storage"
    UNEXPECTED = "unexpected"


class CollabError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CollabError):
    """A required field is missing or malformed."""

    status_code = 400


class OperationError(CollabError):
    """A delegated data operation failed.

    Attributes:
        message: Client-facing message. May be empty, in which case the
            route substitutes its own fallback.
        failure: Classification used for logging.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "",
        failure: OperationFailure = OperationFailure.UNEXPECTED,
    ) -> None:
        super().__init__(message)
        self.failure = failure

    def __repr__(self) -> str:
        return f"OperationError({self.message!r}, failure={self.failure.value})"


class ConfigurationError(Exception):
    """Required configuration is absent."""
