"""
betfair_api package
-------------------

Client for the Betfair Exchange Betting API: certificate login,
JSON-RPC transport with deadline-bound retries and a typed facade with
one method per betting operation.  The FastAPI front-end lives in
:mod:`betfair_api.main` and is not imported here.
"""

from betfair_api.clients.jsonrpc_client import JsonRPCClient
from betfair_api.core.config import Settings, get_settings
from betfair_api.core.context import Deadline
from betfair_api.core.errors import (
    AuthError,
    BetfairError,
    DeadlineExceededError,
    DecodeError,
    InvokeError,
    RemoteAPIError,
    SetupError,
    TransportError,
)
from betfair_api.services.betting_service import BettingAPI

__all__ = [
    "AuthError",
    "BetfairError",
    "BettingAPI",
    "Deadline",
    "DeadlineExceededError",
    "DecodeError",
    "InvokeError",
    "JsonRPCClient",
    "RemoteAPIError",
    "Settings",
    "SetupError",
    "TransportError",
    "get_settings",
]
