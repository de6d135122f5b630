"""httpx transport for the PostWormAPI endpoint.

One POST per user message, no retries. Failure statuses are translated into
ChatError subclasses so callers only deal with user-facing messages.
"""

import logging

import httpx
import pydantic

from wormchat.client.errors import UnexpectedError, UpstreamServiceError, ValidationError
from wormchat.models.schemas import WormChatRequest, WormChatResponse

logger = logging.getLogger(__name__)

CHAT_ENDPOINT = "/api/PostWormAPI"
API_KEY_HEADER = "x-functions-key"
DEFAULT_TIMEOUT = 120.0


def _validation_detail(response: httpx.Response) -> str | None:
    """Extract the backend's validation messages from a 400 body.

    The backend answers a bad request with a JSON array of messages.
    Anything else yields None so the caller falls back to a fixed message.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, list):
        return None
    return ", ".join(str(item) for item in data)


class ChatTransport:
    """Client for the chat backend.

    Attributes:
        url: Absolute URL of the chat endpoint.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Backend base URL, e.g. ``https://worm.example.net``.
            api_key: Functions key. The header is omitted when empty.
            timeout: Request timeout in seconds.
        """
        self.url = f"{base_url.rstrip('/')}{CHAT_ENDPOINT}"
        self._api_key = api_key
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key
        return headers

    async def send(
        self,
        text: str,
        email: str,
        conversation_id: str | None = None,
    ) -> WormChatResponse:
        """Send one user message and wait for the assistant's reply.

        Args:
            text: The user's message.
            email: Address the user logged in with.
            conversation_id: Id from the previous reply; None starts a new conversation.

        Returns:
            Parsed backend reply.

        Raises:
            ValidationError: Backend answered 400.
            UpstreamServiceError: Backend answered 502.
            UnexpectedError: Any other failure status, transport error or bad reply body.
        """
        request = WormChatRequest(
            id=conversation_id or None,
            mail_address=email,
            chat_text=text,
        )

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.post(
                    self.url,
                    json=request.to_payload(),
                    headers=self._headers(),
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Chat request to {self.url} failed: {e!r}")
                raise UnexpectedError() from e

        if response.status_code == 400:
            detail = _validation_detail(response)
            logger.warning(f"Chat request rejected (400): {detail}")
            raise ValidationError(detail)
        if response.status_code == 502:
            logger.warning("Chat backend reported an AI service failure (502)")
            raise UpstreamServiceError()
        if not response.is_success:
            logger.warning(f"Chat request failed with status {response.status_code}")
            raise UnexpectedError(response.status_code)

        try:
            reply = WormChatResponse.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            logger.warning(f"Chat backend returned an unreadable reply: {e}")
            raise UnexpectedError(response.status_code) from e

        logger.debug(f"Received reply for conversation {reply.id}")
        return reply
