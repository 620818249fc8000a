"""
core/errors.py
---------------

Exception hierarchy shared by the transport client and the facade.
Everything raised on purpose by this package derives from
``BetfairError`` so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any, Dict


class BetfairError(Exception):
    """Base class for all client errors."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "message": str(self)}


class SetupError(BetfairError):
    """Missing application key or unreadable CA bundle / client keypair."""


class AuthError(BetfairError):
    """The identity endpoint refused the login."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"unable to authenticate: {reason} [{status}]")
        self.status = status
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "status": self.status, "reason": self.reason}


class TransportError(BetfairError):
    """Connection-level failure (DNS, TCP, TLS) that retries did not cure."""


class DeadlineExceededError(TransportError):
    """The call deadline elapsed or was cancelled before a response arrived."""


class InvokeError(BetfairError):
    """The JSON-RPC endpoint answered with a non-200 status."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"request failed: {reason} [{status}]")
        self.status = status
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "status": self.status, "reason": self.reason}


class RemoteAPIError(BetfairError):
    """A ``{code, message}`` error object returned inside a 200 response."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"error returned from API {code} [{message}]")
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "code": self.code, "remote_message": self.message}


class DecodeError(BetfairError):
    """A response body could not be parsed into the expected shape."""
