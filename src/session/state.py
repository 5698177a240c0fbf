"""In-memory session state: ordered history, conversation identity, busy flag.

Single source of truth for everything the chat page renders. Mutations are
plain method calls on one object; listeners registered with ``subscribe`` are
invoked after every change so the presentation layer can re-render.
"""

import logging
from collections.abc import Callable

from src.models.schemas import ChatMessage

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class SessionStateError(Exception):
    """Raised when a mutation would break the history ordering rules."""

    pass


class ReplaceOnEmptyHistoryError(SessionStateError):
    """Raised when ``replace_last`` is called before anything was appended."""

    pass


class SessionState:
    """Owned, single-writer state of one chat conversation.

    Attributes:
        history: Messages in chronological (insertion) order.
        conversation_id: Server-assigned id, ``None`` until first success.
        busy: True only while a network round trip is in flight.
        generation: Incremented on every reset; lets pending async work
            detect that the session it started against is gone.
    """

    def __init__(self, seed: ChatMessage) -> None:
        self.history: list[ChatMessage] = [seed]
        self.conversation_id: int | None = None
        self.busy: bool = False
        self.generation: int = 0
        self._listeners: list[Listener] = []

    @property
    def last(self) -> ChatMessage | None:
        return self.history[-1] if self.history else None

    @property
    def revealing(self) -> ChatMessage | None:
        """The message currently being revealed, if any."""
        last = self.last
        if last is not None and last.is_revealing:
            return last
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every mutation.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def append(self, message: ChatMessage) -> None:
        """Append a message to the end of history.

        Raises:
            SessionStateError: If the last message is still being revealed.
        """
        if self.revealing is not None:
            raise SessionStateError("Cannot append while the last message is still revealing")
        self.history.append(message)
        self._changed()

    def replace_last(self, message: ChatMessage) -> None:
        """Replace the final history element.

        Raises:
            ReplaceOnEmptyHistoryError: If history is empty.
        """
        if not self.history:
            raise ReplaceOnEmptyHistoryError("replace_last called on empty history")
        self.history[-1] = message
        self._changed()

    def set_conversation_id(self, conversation_id: int | None) -> bool:
        """Assign the conversation id once; later calls are ignored.

        Returns:
            True if the id was assigned by this call.
        """
        if conversation_id is None or self.conversation_id is not None:
            return False
        self.conversation_id = conversation_id
        logger.info(f"Conversation id assigned: {conversation_id}")
        self._changed()
        return True

    def set_busy(self, busy: bool) -> None:
        if self.busy == busy:
            return
        self.busy = busy
        self._changed()

    def reset(self, seed: ChatMessage) -> None:
        """Discard history and identity, leaving only the seed message."""
        self.history = [seed]
        self.conversation_id = None
        self.busy = False
        self.generation += 1
        self._changed()
