"""View-model for one chat screen.

Sends are single-flight: the loading flag is raised before the first await,
so a second send while a reply is outstanding is rejected rather than queued.
"""

import logging
from collections.abc import Callable

from wormchat.client.errors import ChatError
from wormchat.client.transport import ChatTransport
from wormchat.models.schemas import ChatMessage, Role
from wormchat.session.state import SessionState

logger = logging.getLogger(__name__)


class Conversation:
    """Messages, loading flag and error banner for the chat view.

    Attributes:
        messages: Exchanged messages, oldest first.
        is_loading: True while a request to the backend is outstanding.
        error: Message of the last failed exchange, empty if none.
    """

    def __init__(
        self,
        session: SessionState,
        transport: ChatTransport,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[ChatMessage] = []
        self.is_loading: bool = False
        self.error: str = ""
        self._session = session
        self._transport = transport
        self._on_change = on_change

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def can_send(self, text: str | None) -> bool:
        return bool(text and text.strip()) and not self.is_loading

    async def send(self, text: str) -> bool:
        """Send a user message and append the assistant's reply.

        Args:
            text: Message as typed.

        Returns:
            True if a reply was appended, False if the message was rejected
            or the exchange failed.
        """
        if not self.can_send(text):
            return False

        self.messages.append(ChatMessage(role=Role.USER, content=text.strip()))
        self.is_loading = True
        self.error = ""
        self._notify()

        email = self._session.email or ""
        try:
            reply = await self._transport.send(
                text.strip(),
                email=email,
                conversation_id=self._session.conversation_id,
            )
        except ChatError as e:
            logger.info(f"Chat exchange failed: {e.message}")
            self.error = e.message
            return False
        else:
            # A reply arriving after logout belongs to the previous user
            if self._session.email == email:
                self._session.conversation_id = reply.id
            else:
                logger.info("Discarding conversation id from a reply after logout")
            self.messages.append(ChatMessage(role=Role.ASSISTANT, content=reply.output_text))
            return True
        finally:
            self.is_loading = False
            self._notify()

    def reset(self) -> None:
        """Clear messages and the error banner."""
        self.messages.clear()
        self.error = ""
        self._notify()

    def start_new_conversation(self) -> None:
        """Drop the stored conversation id and clear the screen."""
        self._session.new_conversation()
        self.reset()
