"""
schemas/auth.py
----------------

Models related to the certificate login.  ``Session`` mirrors the body
returned by the identity endpoint; ``LoginStatus`` is what the HTTP
layer hands back to its callers, deliberately without the token.
"""

from __future__ import annotations

from betfair_api.schemas.common import WireModel

LOGIN_SUCCESS = "SUCCESS"


class Session(WireModel):
    session_token: str = ""
    login_status: str = ""


class LoginStatus(WireModel):
    login_status: str
    authenticated: bool
