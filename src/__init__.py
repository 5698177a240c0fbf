"""Typing Chat Client - single-conversation chat with a simulated typing reveal.

Combines httpx for the assistant exchange, NiceGUI for visualization,
FastAPI/uvicorn for hosting, and Pydantic for data validation.

Components:
    - session: History, conversation identity, send lifecycle and reveal
    - client: Assistant endpoint configuration and HTTP exchange
    - models: Message and wire schemas
    - ui: Web interface for chat interactions
    - api: Host application and health endpoint
"""

__version__ = "0.1.0"
