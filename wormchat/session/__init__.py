"""Local login state persisted per browser.

Responsibilities:
    - Key-value storage abstraction with synchronous get/set/remove
    - LoggedOut/LoggedIn state machine over the stored email
    - Conversation id persistence between messages
"""

from wormchat.session.state import (
    CONVERSATION_ID_KEY,
    EMAIL_KEY,
    AuthStatus,
    LoginError,
    SessionState,
)
from wormchat.session.storage import KeyValueStore, MappingStore

__all__ = [
    "CONVERSATION_ID_KEY",
    "EMAIL_KEY",
    "AuthStatus",
    "KeyValueStore",
    "LoginError",
    "MappingStore",
    "SessionState",
]
