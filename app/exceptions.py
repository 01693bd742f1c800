from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for errors surfaced to the HTTP boundary.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(DailyDietError):
    """Raised by the HTTP layer when a meal is absent or owned by another session."""

    http_status = 404
    default_message = "Meal not found"


class UnauthorizedError(DailyDietError):
    """Raised when a protected route is called without a session cookie."""

    http_status = 401
    default_message = "Unauthorized"


class StoreError(DailyDietError):
    """Raised when the underlying meal store fails (connectivity, constraints).

    The message stays generic; the underlying SQLAlchemy exception is
    chained as ``__cause__`` and only logged server-side.
    """

    http_status = 500
    default_message = "Storage failure"
