"""Integration tests for components working together as a system.

Coverage:
    - Full send cycle through ChatExchange to an in-process assistant app
    - Host application endpoints

Uses httpx ASGITransport, no network access required.
"""
