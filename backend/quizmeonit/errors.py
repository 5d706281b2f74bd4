"""Error types surfaced by the request handlers.

Every error carries the HTTP status it maps to and any diagnostics that
should be returned alongside the message. The application registers one
exception handler that renders them as ``{"error": message, **extra}``.
"""

from typing import Any

from google.api_core import exceptions as google_exceptions

INVALID_API_KEY_MARKER = "API key not valid"


class QuizMeError(Exception):
    """Base class for errors rendered as JSON error responses."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None, **extra: Any):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class ClientInputError(QuizMeError):
    """Missing or invalid request fields."""

    status_code = 400
    default_message = "Missing required parameters"


class UpstreamAuthError(QuizMeError):
    """The model service rejected (or was never given) a credential."""

    status_code = 401
    default_message = "Server configuration error: Invalid API key."


class UpstreamBlockedError(QuizMeError):
    """The prompt or reply was withheld by the service's safety filters."""

    status_code = 400
    default_message = "The AI could not generate a response due to content restrictions."

    def __init__(self, categories: list[str] | None = None, block_reason: str | None = None):
        categories = categories or []
        message = self.default_message
        if categories:
            message += f" Blocked due to: {', '.join(categories)}."
        super().__init__(message, details=categories, blockReason=block_reason)
        self.categories = categories
        self.block_reason = block_reason


class UpstreamError(QuizMeError):
    """Any other failure of the model call."""

    status_code = 500


class ResponseParseError(QuizMeError):
    """Model output was not valid JSON after fence stripping."""

    status_code = 500
    default_message = "Failed to parse quiz data from AI response. The response was not valid JSON."


class ResponseShapeError(QuizMeError):
    """Model output parsed but did not have the expected structure."""

    status_code = 500
    default_message = "AI response did not follow the expected JSON structure."


def _is_auth_failure(exc: BaseException) -> bool:
    if INVALID_API_KEY_MARKER in str(exc):
        return True
    return isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied))


def classify_upstream_error(exc: BaseException) -> QuizMeError:
    """Map a failure raised by the model gateway onto a response error."""
    if isinstance(exc, QuizMeError):
        return exc
    if _is_auth_failure(exc):
        return UpstreamAuthError()
    details = str(exc) or None
    if details is None:
        return UpstreamError()
    return UpstreamError(details=details)
