"""HTTP client for the remote assistant endpoint.

Responsibilities:
    - Environment-driven client configuration
    - One request/response exchange per user message
    - Translation of transport, status and payload errors into ExchangeFailure
"""

from src.client.config import ClientConfig, get_client_config
from src.client.exchange import ChatExchange, ExchangeFailure, ExchangeResult

__all__ = [
    "ChatExchange",
    "ClientConfig",
    "ExchangeFailure",
    "ExchangeResult",
    "get_client_config",
]
