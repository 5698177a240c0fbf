"""Conversation session controller.

Owns message history, conversation identity and the send/receive lifecycle,
including the client-side typing reveal of assistant replies.

Responsibilities:
    - Ordered, in-memory message history with change notification
    - Sticky server-assigned conversation id
    - Send state machine (idle, sending, revealing)
    - Character-by-character reveal of complete replies

Has no knowledge of NiceGUI. The UI observes state and calls the controller.
"""

from src.session.controller import Phase, SessionController
from src.session.reveal import RevealSimulator
from src.session.state import ReplaceOnEmptyHistoryError, SessionState, SessionStateError

__all__ = [
    "Phase",
    "ReplaceOnEmptyHistoryError",
    "RevealSimulator",
    "SessionController",
    "SessionState",
    "SessionStateError",
]
