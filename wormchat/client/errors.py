"""Errors surfaced to the user by the chat client."""

INVALID_REQUEST_MESSAGE = "Invalid request"
UPSTREAM_FAILURE_MESSAGE = "An error occurred while communicating with the AI service"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ChatError(Exception):
    """Raised when a chat exchange with the backend fails.

    Attributes:
        message: Text shown to the user in the error banner.
        status_code: HTTP status of the failed response, None if no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ChatError):
    """Backend rejected the request (HTTP 400)."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or INVALID_REQUEST_MESSAGE, status_code=400)


class UpstreamServiceError(ChatError):
    """Backend could not reach the AI service (HTTP 502)."""

    def __init__(self) -> None:
        super().__init__(UPSTREAM_FAILURE_MESSAGE, status_code=502)


class UnexpectedError(ChatError):
    """Any other failure status, transport failure or unreadable reply."""

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__(UNEXPECTED_ERROR_MESSAGE, status_code=status_code)
