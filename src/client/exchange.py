"""HTTP exchange with the remote assistant endpoint.

One call, one request/response cycle. The exchange never touches session
state; callers decide what to do with the result or the failure.
"""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from src.models.schemas import SendRequest, SendResponse

logger = logging.getLogger(__name__)

SEND_PATH = "/api/chat/send"


class ExchangeFailure(Exception):
    """Raised when an exchange with the assistant could not complete.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.status_code = status_code


class ExchangeResult(BaseModel):
    """Outcome of a successful exchange.

    Attributes:
        conversation_id: Id reported by the server, if any.
        bot_response: The complete assistant reply.
    """

    conversation_id: int | None
    bot_response: str


class ChatExchange:
    """Client for ``POST /api/chat/send``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the exchange.

        Args:
            base_url: Scheme and host the send path is appended to.
            timeout: Seconds to wait for the whole request.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: str, conversation_id: int | None = None) -> ExchangeResult:
        """Send one user message and wait for the full reply.

        Args:
            message: Non-blank user message.
            conversation_id: Known conversation id, omitted from the request if None.

        Returns:
            ExchangeResult with the reply text and the server's conversation id.

        Raises:
            ExchangeFailure: Invalid base URL, network error, non-success status,
                or malformed body.
        """
        body = SendRequest(message=message)
        params = {"conversation_id": conversation_id} if conversation_id is not None else None

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(SEND_PATH, params=params, json=body.model_dump())
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExchangeFailure(
                f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise ExchangeFailure(f"Connection failed: {e}") from e
        except httpx.InvalidURL as e:
            raise ExchangeFailure(f"Invalid URL: {e}") from e

        try:
            payload = SendResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ExchangeFailure(
                f"Malformed response: {e.error_count()} validation error(s)",
                status_code=response.status_code,
            ) from e

        logger.debug(f"Exchange complete (conversation_id={payload.conversation_id})")
        return ExchangeResult(
            conversation_id=payload.conversation_id,
            bot_response=payload.bot_response,
        )
