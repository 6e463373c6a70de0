"""Model representing a single chat message."""

from pydantic import BaseModel, ConfigDict, StrictStr

from .enums import MessageRole


class ChatMessage(BaseModel):
    """One turn of the conversation.

    Messages are immutable; a conversation is an ordered list of them
    and the order is forwarded to the provider untouched.
    """

    role: MessageRole
    content: StrictStr

    model_config = ConfigDict(frozen=True)
