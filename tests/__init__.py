"""Test package for the Typing Chat Client.

Structure:
    - unit/: Session state, reveal, controller, exchange and config in isolation
    - integration/: Controller over real HTTP against an assistant stub, host app

Uses pytest with pytest-asyncio (auto mode) and pytest-check for soft assertions.
"""
