"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation of messages and wire bodies
    - session/: State mutations, reveal pacing, send lifecycle
    - client/: Configuration and HTTP exchange (httpx MockTransport)

Uses scripted fakes for the exchange, notifier and sleep so nothing waits.
"""
