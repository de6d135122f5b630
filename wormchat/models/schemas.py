from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker (user or assistant).
        content: The message text. Markdown for assistant messages.
    """

    role: Role
    content: str


class WormChatRequest(BaseModel):
    """Request payload for the PostWormAPI endpoint.

    Attributes:
        id: Conversation id from a previous reply, if any.
        mail_address: Email the user logged in with.
        chat_text: The user's message.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    mail_address: str = Field(..., alias="mailAddress")
    chat_text: str = Field(..., alias="chatText")

    def to_payload(self) -> dict[str, str]:
        """Serialize to the JSON body, leaving out ``id`` when unset."""
        return self.model_dump(by_alias=True, exclude_none=True)


class WormChatResponse(BaseModel):
    """Reply from the PostWormAPI endpoint.

    Attributes:
        id: Conversation id to send with follow-up messages.
        output_text: The assistant's answer, markdown formatted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    output_text: str = Field(..., alias="outputText")
