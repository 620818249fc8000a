"""
routes/auth.py
---------------

Login route.  Runs the certificate login with the configured account
and reports the outcome; the session token itself stays inside the
shared transport client and is never returned.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request

from betfair_api.clients.jsonrpc_client import JsonRPCClient
from betfair_api.logging_config import logger
from betfair_api.schemas.auth import LOGIN_SUCCESS, LoginStatus

router = APIRouter(prefix="/auth", tags=["auth"])


def get_rpc_client(request: Request) -> JsonRPCClient:
    """Dependency to retrieve the shared transport client from the application state."""
    return request.app.state.rpc_client


@router.post("/login", response_model=LoginStatus)
def login(client: JsonRPCClient = Depends(get_rpc_client)) -> LoginStatus:
    logger.info(json.dumps({"event": "login_request"}))
    session = client.authenticate()
    return LoginStatus(login_status=session.login_status, authenticated=session.login_status == LOGIN_SUCCESS)


@router.get("/status", response_model=LoginStatus)
def status(client: JsonRPCClient = Depends(get_rpc_client)) -> LoginStatus:
    session = client.session
    return LoginStatus(login_status=session.login_status, authenticated=bool(session.session_token))
