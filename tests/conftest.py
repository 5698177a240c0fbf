"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - config: Client configuration with instant reveal pacing
    - notifier: Records error notifications instead of showing toasts
    - sleep: Records reveal pauses without actually waiting
    - fake_exchange: Scripted stand-in for the assistant endpoint
    - controller: SessionController wired to the fakes above
    - async_client: HTTPX client for the host application
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.client.config import ClientConfig
from src.client.exchange import ExchangeFailure, ExchangeResult
from src.session.controller import SessionController
from src.session.reveal import RevealSimulator

GREETING = "Hello! How can I help?"


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: list[tuple[str, float]] = []

    def notify(self, message: str, duration: float) -> None:
        self.calls.append((message, duration))


class RecordingSleep:
    """Awaitable sleep that only records delays.

    ``hook`` (if set) runs on every call, which lets tests act in the
    middle of a reveal.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []
        self.hook: Callable[[int], Awaitable[None] | None] | None = None

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self.hook is not None:
            result = self.hook(len(self.delays))
            if result is not None:
                await result


class FakeExchange:
    """Returns scripted results (or raises scripted failures) in order.

    Set ``gate`` to hold every call until the event is set.
    """

    def __init__(self) -> None:
        self.outcomes: list[ExchangeResult | ExchangeFailure] = []
        self.calls: list[tuple[str, int | None]] = []
        self.before_return: Callable[[], None] | None = None
        self.gate: asyncio.Event | None = None

    def reply(self, bot_response: str, conversation_id: int | None = 1) -> None:
        self.outcomes.append(
            ExchangeResult(conversation_id=conversation_id, bot_response=bot_response)
        )

    def fail(self, reason: str = "Connection failed") -> None:
        self.outcomes.append(ExchangeFailure(reason))

    async def send(self, message: str, conversation_id: int | None = None) -> ExchangeResult:
        self.calls.append((message, conversation_id))
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0)
        if self.before_return is not None:
            self.before_return()
        if isinstance(outcome, ExchangeFailure):
            raise outcome
        return outcome


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration with zero reveal delays."""
    return ClientConfig(
        app_env="development",
        api_base_url="",
        upstream_url="http://assistant.test",
        request_timeout=5.0,
        greeting=GREETING,
        reveal_initial_delay=0.0,
        reveal_min_char_delay=0.0,
        reveal_max_char_delay=0.0,
        error_toast_duration=3.0,
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def fake_exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def revealer(sleep: RecordingSleep) -> RevealSimulator:
    return RevealSimulator(
        initial_delay=0.5,
        min_char_delay=0.015,
        max_char_delay=0.040,
        sleep=sleep,
    )


@pytest.fixture
def controller(
    fake_exchange: FakeExchange,
    notifier: RecordingNotifier,
    config: ClientConfig,
    revealer: RevealSimulator,
) -> SessionController:
    """Controller wired to the fake exchange, recording notifier and sleep."""
    return SessionController(fake_exchange, notifier, config=config, revealer=revealer)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
