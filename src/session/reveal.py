"""Client-side typing simulation over a complete assistant reply.

The reply has already been received in full; this module only discloses it
character by character so the page looks like the assistant is typing.
"""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from src.models.schemas import ChatMessage
from src.session.state import SessionState

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

DEFAULT_INITIAL_DELAY = 0.5
DEFAULT_MIN_CHAR_DELAY = 0.015
DEFAULT_MAX_CHAR_DELAY = 0.040


class RevealSimulator:
    """Animates a known-final reply into session state.

    Args:
        initial_delay: Pause before the first character ("thinking" time).
        min_char_delay: Lower bound of the per-character pause.
        max_char_delay: Upper bound of the per-character pause.
        sleep: Awaitable sleep, ``asyncio.sleep`` by default.
        rng: Random source for per-character pauses.
    """

    def __init__(
        self,
        initial_delay: float = DEFAULT_INITIAL_DELAY,
        min_char_delay: float = DEFAULT_MIN_CHAR_DELAY,
        max_char_delay: float = DEFAULT_MAX_CHAR_DELAY,
        sleep: Sleep | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if min_char_delay > max_char_delay:
            raise ValueError("min_char_delay must not exceed max_char_delay")
        self.initial_delay = initial_delay
        self.min_char_delay = min_char_delay
        self.max_char_delay = max_char_delay
        self._sleep = sleep or asyncio.sleep
        self._rng = rng or random.Random()

    def char_delay(self) -> float:
        return self._rng.uniform(self.min_char_delay, self.max_char_delay)

    async def reveal(self, state: SessionState, text: str) -> bool:
        """Type ``text`` into a new assistant message.

        Args:
            state: Session to append to and update.
            text: The complete reply.

        Returns:
            True if the reveal completed, False if the session was reset
            while it was running (nothing more is written in that case).
        """
        generation = state.generation
        placeholder = ChatMessage.assistant("", is_revealing=True)
        state.append(placeholder)

        await self._sleep(self.initial_delay)

        current = ""
        for char in text:
            if state.generation != generation:
                logger.debug("Session reset during reveal, dropping remaining text")
                return False
            current += char
            state.replace_last(placeholder.model_copy(update={"content": current}))
            await self._sleep(self.char_delay())

        if state.generation != generation:
            logger.debug("Session reset during reveal, dropping final message")
            return False

        # Final content is the original reply, not the accumulated copy
        state.replace_last(
            placeholder.model_copy(update={"content": text, "is_revealing": False})
        )
        return True
