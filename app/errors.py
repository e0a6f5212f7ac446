"""
Domain errors surfaced over HTTP.

Every AppError carries the status code and the message the client sees.
Details of unexpected failures are logged, never returned.
"""

from typing import Any, Dict, Optional, Sequence


class AppError(Exception):
    """Base class for errors rendered as `{"error": message}`."""

    status_code: int = 500
    default_message: str = "An internal server error occurred. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(AppError):
    """Malformed request body, message or history."""

    status_code = 400
    default_message = "Invalid request."


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class MeetingNotFoundError(NotFoundError):
    default_message = "Meeting not found"

    def __init__(self, meeting_id: str):
        self.meeting_id = meeting_id
        super().__init__()


class UpstreamFormatError(AppError):
    """
    Raised when the chat model rejects the shape of the history we sent.
    """

    status_code = 400
    default_message = (
        "Invalid conversation history format. Please try starting a new conversation."
    )


class UnclassifiedFailure(AppError):
    pass


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn pydantic/FastAPI validation errors into a client message naming the
    first failing field, e.g. `Invalid "preferredTime": Input should be a valid string`.
    """
    if not errors:
        return "Invalid request body."

    first = errors[0]
    field = ".".join(
        part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
    )
    reason = first.get("msg", "invalid value")
    if not field:
        return f"Invalid request body: {reason}"
    return f'Invalid "{field}": {reason}'
