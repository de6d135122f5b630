"""Pydantic models for the backend wire format and chat messages.

Models:
    - Role: Message author (user or assistant)
    - ChatMessage: Individual message in the conversation
    - WormChatRequest: Outgoing chat request payload
    - WormChatResponse: Backend reply with conversation id
"""

from wormchat.models.schemas import ChatMessage, Role, WormChatRequest, WormChatResponse

__all__ = ["ChatMessage", "Role", "WormChatRequest", "WormChatResponse"]
