"""Pydantic models for chat messages and the assistant wire protocol.

Provides type safety and validation for both session history and the
``/api/chat/send`` request/response bodies.

Models:
    - Role: Speaker of a chat turn (user or assistant)
    - ChatMessage: Individual message in the session history
    - SendRequest: Outgoing chat request payload
    - SendResponse: Assistant reply with conversation identifier
"""

from src.models.schemas import ChatMessage, Role, SendRequest, SendResponse

__all__ = ["ChatMessage", "Role", "SendRequest", "SendResponse"]
