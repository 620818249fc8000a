"""
core/auth.py
-------------

Helpers for building the headers of the two Betfair endpoints.

The certificate login takes the application key and a form body; every
JSON-RPC call carries the application key plus the session token issued
by the login.  Keeping header construction here means the token never
has to be assembled (or logged) anywhere else.
"""

from __future__ import annotations

from typing import Dict

JSONRPC_NAMESPACE = "SportsAPING/v1.0"


def build_login_headers(app_key: str) -> Dict[str, str]:
    """Headers for the certificate login request."""
    return {
        "X-Application": app_key,
        "Content-Type": "application/x-www-form-urlencoded",
        "Accept": "application/json",
    }


def build_rpc_headers(app_key: str, session_token: str) -> Dict[str, str]:
    """Headers for an authenticated JSON-RPC call.

    :param app_key: the application key
    :param session_token: token from the last successful login; may be
        empty, in which case the exchange answers with an error envelope
    :return: a dictionary of headers suitable for use with httpx
    """
    return {
        "X-Application": app_key,
        "X-Authentication": session_token,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def rpc_method(operation: str) -> str:
    """Qualify an operation name with the JSON-RPC namespace."""
    return f"{JSONRPC_NAMESPACE}/{operation}"
