"""FastAPI host for the chat client.

Serves the NiceGUI page and exposes service endpoints.

Endpoints:
    - GET /health: Service health status
"""

from src.api.app import create_app

__all__ = ["create_app"]
