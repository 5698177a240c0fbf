"""Unit tests for SessionState."""

import pytest
import pytest_check as check

from src.models.schemas import ChatMessage
from src.session.state import ReplaceOnEmptyHistoryError, SessionState, SessionStateError


@pytest.fixture
def seed() -> ChatMessage:
    return ChatMessage.assistant("Welcome")


@pytest.fixture
def state(seed: ChatMessage) -> SessionState:
    return SessionState(seed)


class TestInitialState:
    """Tests for a new session."""

    def test_starts_with_seed_only(self, state: SessionState, seed: ChatMessage) -> None:
        """History holds only the seed and nothing else is set."""
        check.equal(state.history, [seed])
        check.is_none(state.conversation_id)
        check.is_false(state.busy)
        check.equal(state.generation, 0)


class TestAppendAndReplace:
    """Tests for history mutations."""

    def test_append_keeps_insertion_order(self, state: SessionState, seed: ChatMessage) -> None:
        """Messages keep the order they were added in."""
        first = ChatMessage.user("one")
        second = ChatMessage.assistant("two")

        state.append(first)
        state.append(second)

        assert state.history == [seed, first, second]

    def test_append_allows_duplicates(self, state: SessionState) -> None:
        """Identical messages are both kept."""
        msg = ChatMessage.user("same")

        state.append(msg)
        state.append(msg)

        assert state.history[-2:] == [msg, msg]

    def test_append_behind_revealing_message_fails(self, state: SessionState) -> None:
        """Nothing can be appended behind a revealing message."""
        state.append(ChatMessage.assistant("", is_revealing=True))

        with pytest.raises(SessionStateError):
            state.append(ChatMessage.user("too early"))

    def test_replace_last(self, state: SessionState) -> None:
        """Only the last message is replaced."""
        state.append(ChatMessage.assistant("", is_revealing=True))
        final = ChatMessage.assistant("done")

        state.replace_last(final)

        check.equal(state.last, final)
        check.is_none(state.revealing)
        check.equal(len(state.history), 2)

    def test_replace_last_on_empty_history(self, state: SessionState) -> None:
        """Replacing with no messages is an error."""
        state.history.clear()

        with pytest.raises(ReplaceOnEmptyHistoryError):
            state.replace_last(ChatMessage.assistant("x"))

    def test_revealing_property(self, state: SessionState) -> None:
        """The revealing property tracks the last message."""
        placeholder = ChatMessage.assistant("", is_revealing=True)

        check.is_none(state.revealing)
        state.append(placeholder)
        check.equal(state.revealing, placeholder)


class TestConversationId:
    """Conversation identity is sticky for the session's lifetime."""

    def test_first_assignment_wins(self, state: SessionState) -> None:
        """A second id does not replace the first."""
        check.is_true(state.set_conversation_id(42))
        check.is_false(state.set_conversation_id(7))
        check.equal(state.conversation_id, 42)

    def test_none_is_ignored(self, state: SessionState) -> None:
        """None never assigns an id."""
        check.is_false(state.set_conversation_id(None))
        check.is_none(state.conversation_id)

    def test_zero_is_a_valid_id(self, state: SessionState) -> None:
        """Zero is stored as an id."""
        state.set_conversation_id(0)
        state.set_conversation_id(5)

        assert state.conversation_id == 0


class TestReset:
    """Tests for starting over."""

    def test_reset_restores_seed(self, state: SessionState) -> None:
        """Reset clears history, id and busy and bumps the generation."""
        state.append(ChatMessage.user("hi"))
        state.set_conversation_id(42)
        state.set_busy(True)
        new_seed = ChatMessage.assistant("Welcome back")

        state.reset(new_seed)

        check.equal(state.history, [new_seed])
        check.is_none(state.conversation_id)
        check.is_false(state.busy)
        check.equal(state.generation, 1)

    def test_reset_allows_new_conversation_id(self, state: SessionState, seed: ChatMessage) -> None:
        """A new id can be assigned after a reset."""
        state.set_conversation_id(42)
        state.reset(seed)

        state.set_conversation_id(43)

        assert state.conversation_id == 43


class TestListeners:
    """Listeners fire after every mutation."""

    def test_listener_called_on_each_mutation(self, state: SessionState, seed: ChatMessage) -> None:
        """Every mutation notifies."""
        calls: list[int] = []
        state.subscribe(lambda: calls.append(len(state.history)))

        state.append(ChatMessage.user("a"))
        state.replace_last(ChatMessage.user("b"))
        state.set_conversation_id(1)
        state.set_busy(True)
        state.reset(seed)

        assert calls == [2, 2, 2, 2, 1]

    def test_unchanged_busy_does_not_notify(self, state: SessionState) -> None:
        """Setting busy to its current value is silent."""
        calls: list[None] = []
        state.subscribe(lambda: calls.append(None))

        state.set_busy(False)
        state.set_conversation_id(None)

        assert calls == []

    def test_unsubscribe(self, state: SessionState) -> None:
        """Unsubscribed listeners are not called."""
        calls: list[None] = []
        unsubscribe = state.subscribe(lambda: calls.append(None))

        unsubscribe()
        unsubscribe()
        state.append(ChatMessage.user("a"))

        assert calls == []
