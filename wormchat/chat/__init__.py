"""Conversation state for the chat view.

Responsibilities:
    - Ordered list of user and assistant messages
    - Single-flight loading flag for the outstanding request
    - Error banner text for the last failed exchange

Contains no rendering. The UI observes changes through a callback.
"""

from wormchat.chat.conversation import Conversation

__all__ = ["Conversation"]
