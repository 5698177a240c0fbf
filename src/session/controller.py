"""Session lifecycle: the send state machine behind the chat page.

Drives one send from user input to a fully revealed reply:

    IDLE --submit--> SENDING --success--> REVEALING --done--> IDLE
                        \\--failure--> IDLE (error notification)

"Start new" returns to IDLE from any phase with a fresh seed session. Work
still pending from before the reset (a network reply, a running reveal) is
dropped by comparing the session generation instead of cancelling tasks.

Sends are serialized: a submit while SENDING or REVEALING is ignored, so at
most one message is ever revealing and it is always the last one.
"""

import logging
from enum import Enum
from typing import Protocol

from src.client.config import ClientConfig, get_client_config
from src.client.exchange import ExchangeFailure, ExchangeResult
from src.models.schemas import ChatMessage
from src.session.reveal import RevealSimulator
from src.session.state import SessionState

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send message"


class Phase(str, Enum):
    """Where the controller is in the send cycle."""

    IDLE = "idle"
    SENDING = "sending"
    REVEALING = "revealing"


class Exchange(Protocol):
    async def send(
        self, message: str, conversation_id: int | None = None
    ) -> ExchangeResult: ...


class Notifier(Protocol):
    """Fire-and-forget error surface (a toast in the UI)."""

    def notify(self, message: str, duration: float) -> None: ...


class SessionController:
    """Owns the session state and orchestrates sends and resets.

    Attributes:
        state: The session being rendered.
        phase: Current lifecycle phase.
        draft: Current text-input value; the page binds its input to it.
    """

    def __init__(
        self,
        exchange: Exchange,
        notifier: Notifier,
        config: ClientConfig | None = None,
        state: SessionState | None = None,
        revealer: RevealSimulator | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            exchange: Performs the request/response cycle.
            notifier: Receives error notifications.
            config: Client configuration. Loads from environment if not provided.
            state: Existing session; a fresh seeded one is created if omitted.
            revealer: Typing simulator; built from config if omitted.
        """
        self._config = config or get_client_config()
        self._exchange = exchange
        self._notifier = notifier
        self._revealer = revealer or RevealSimulator(
            initial_delay=self._config.reveal_initial_delay,
            min_char_delay=self._config.reveal_min_char_delay,
            max_char_delay=self._config.reveal_max_char_delay,
        )
        self.state = state or SessionState(self.seed_message())
        self.phase = Phase.IDLE
        self.draft = ""

    def seed_message(self) -> ChatMessage:
        return ChatMessage.assistant(self._config.greeting)

    @property
    def can_send(self) -> bool:
        return self.phase is Phase.IDLE

    async def send(self, text: str | None = None) -> bool:
        """Submit a message (the current draft by default).

        Args:
            text: Message to send instead of the draft.

        Returns:
            True if the reply was received and fully revealed into this
            session. False for blank input, a busy controller, a failed
            exchange, or a reset that happened while the send was pending.
        """
        message = (self.draft if text is None else text).strip()
        if not message:
            return False
        if not self.can_send:
            logger.debug(f"Ignoring send while {self.phase.value}")
            return False

        self.draft = ""
        generation = self.state.generation
        self.state.append(ChatMessage.user(message))
        self.phase = Phase.SENDING
        self.state.set_busy(True)

        try:
            result = await self._exchange.send(message, self.state.conversation_id)
        except ExchangeFailure as e:
            if self._is_stale(generation):
                return False
            logger.warning(f"Chat exchange failed: {e}")
            self.state.set_busy(False)
            self.phase = Phase.IDLE
            self._notifier.notify(SEND_FAILED_MESSAGE, self._config.error_toast_duration)
            return False

        if self._is_stale(generation):
            logger.info("Discarding reply for a session that was reset")
            return False

        self.state.set_conversation_id(result.conversation_id)
        self.state.set_busy(False)
        self.phase = Phase.REVEALING
        try:
            return await self._revealer.reveal(self.state, result.bot_response)
        finally:
            if not self._is_stale(generation):
                self.phase = Phase.IDLE

    def start_new(self) -> None:
        """Discard the conversation and start over from the greeting."""
        logger.info(f"Starting new conversation (previous id: {self.state.conversation_id})")
        self.phase = Phase.IDLE
        self.state.reset(self.seed_message())

    def _is_stale(self, generation: int) -> bool:
        return self.state.generation != generation
