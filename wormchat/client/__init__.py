"""HTTP client for the Worm AI backend.

Sends one JSON request per user message and maps failure statuses
onto a small error taxonomy with user-facing messages.
"""

from wormchat.client.errors import (
    ChatError,
    UnexpectedError,
    UpstreamServiceError,
    ValidationError,
)
from wormchat.client.transport import CHAT_ENDPOINT, ChatTransport

__all__ = [
    "CHAT_ENDPOINT",
    "ChatError",
    "ChatTransport",
    "UnexpectedError",
    "UpstreamServiceError",
    "ValidationError",
]
