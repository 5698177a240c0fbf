from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single chat turn held in session history.

    Messages are immutable values. The revealing assistant message is
    updated by replacing it with a copy (see ``SessionState.replace_last``).

    Attributes:
        role: Who said it (user or assistant).
        content: The message text.
        is_revealing: True while the assistant text is still being typed out.
        timestamp: Creation time, informational only.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    is_revealing: bool = False
    timestamp: datetime | None = Field(default_factory=datetime.now)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str, is_revealing: bool = False) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content, is_revealing=is_revealing)

    @property
    def time_label(self) -> str:
        """Creation time formatted for display, e.g. ``03:15 PM``."""
        if self.timestamp is None:
            return ""
        return self.timestamp.strftime("%I:%M %p")


class SendRequest(BaseModel):
    """Request body for ``POST /api/chat/send``.

    Attributes:
        message: The user's trimmed message.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class SendResponse(BaseModel):
    """Success body returned by ``POST /api/chat/send``.

    Attributes:
        conversation_id: Server-assigned conversation identifier.
        bot_response: The complete assistant reply.
    """

    conversation_id: int | None = None
    bot_response: str
