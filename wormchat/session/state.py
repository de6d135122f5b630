"""Login state machine over the persisted email and conversation id.

States are LoggedOut and LoggedIn. A stored email means LoggedIn, so the
state survives page reloads for as long as the browser storage does.
"""

import logging
from enum import Enum

from wormchat.session.storage import KeyValueStore

logger = logging.getLogger(__name__)

EMAIL_KEY = "wormchat_email"
CONVERSATION_ID_KEY = "wormchat_conversation_id"

EMPTY_EMAIL_MESSAGE = "Please enter your email address"


class AuthStatus(str, Enum):
    """Whether the user has unlocked the chat view."""

    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class LoginError(ValueError):
    """Raised when the login form is submitted without an email."""

    def __init__(self, message: str = EMPTY_EMAIL_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class SessionState:
    """Client-side session: the logged-in email and current conversation id.

    All reads go straight to the store, so two views over the same store
    always agree.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def email(self) -> str | None:
        return self._store.get(EMAIL_KEY) or None

    @property
    def status(self) -> AuthStatus:
        return AuthStatus.LOGGED_IN if self.email else AuthStatus.LOGGED_OUT

    @property
    def is_logged_in(self) -> bool:
        return self.status is AuthStatus.LOGGED_IN

    @property
    def conversation_id(self) -> str | None:
        return self._store.get(CONVERSATION_ID_KEY) or None

    @conversation_id.setter
    def conversation_id(self, value: str | None) -> None:
        # Replies without an id keep the current conversation.
        if value:
            self._store.set(CONVERSATION_ID_KEY, value)

    def login(self, email: str) -> str:
        """Log in with an email address.

        Args:
            email: Address as typed. Surrounding whitespace is removed.

        Returns:
            The stored, trimmed email.

        Raises:
            LoginError: If the email is empty or whitespace only.
        """
        trimmed = email.strip() if email else ""
        if not trimmed:
            raise LoginError()

        self._store.set(EMAIL_KEY, trimmed)
        logger.info("Logged in")
        return trimmed

    def logout(self) -> None:
        """Forget the email and the conversation id."""
        self._store.remove(EMAIL_KEY)
        self._store.remove(CONVERSATION_ID_KEY)
        logger.info("Logged out")

    def new_conversation(self) -> None:
        """Forget the conversation id, staying logged in."""
        self._store.remove(CONVERSATION_ID_KEY)
        logger.info("Started a new conversation")
