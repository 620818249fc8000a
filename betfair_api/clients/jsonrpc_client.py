"""
clients/jsonrpc_client.py
-------------------------

Transport client for the Betfair Betting API.

``JsonRPCClient`` owns the authenticated session.  ``authenticate``
performs the certificate login and stores the session token;
``invoke`` is the single generic entry point used by every operation:
it builds the ``params`` object, wraps it in a JSON-RPC 2.0 envelope,
posts it with the current token and unwraps either the raw ``result``
or the protocol error.

The session token is the only mutable state.  It is kept behind a lock
so that concurrent ``invoke`` calls each read one consistent value
while another thread re-authenticates; the last write wins.
"""

from __future__ import annotations

import json
import threading
from typing import Optional

import orjson
from pydantic import ValidationError

from betfair_api.clients.http_client import HTTPClient
from betfair_api.core.auth import build_login_headers, build_rpc_headers, rpc_method
from betfair_api.core.config import Settings
from betfair_api.core.context import Deadline
from betfair_api.core.errors import AuthError, DecodeError, InvokeError, RemoteAPIError, SetupError
from betfair_api.core.params import build_params
from betfair_api.logging_config import logger
from betfair_api.schemas.auth import LOGIN_SUCCESS, Session
from betfair_api.schemas.envelope import JsonRPCRequest, JsonRPCResponse
from betfair_api.schemas.filters import MarketFilter
from betfair_api.schemas.params import OperationParams


class JsonRPCClient:
    """Certificate-authenticated JSON-RPC client.

    :param settings: immutable client settings; ``app_key`` must be set
    :param http_client: optional pre-built :class:`HTTPClient`; when
        omitted one is created with the mutual-TLS context
    :raises SetupError: if the application key is missing or the
        certificate material cannot be loaded
    """

    def __init__(self, settings: Settings, *, http_client: Optional[HTTPClient] = None) -> None:
        if not settings.app_key or not settings.app_key.strip():
            raise SetupError("an application key is required")
        self.settings = settings
        self._http = http_client or HTTPClient(settings)
        self._lock = threading.Lock()
        self._session = Session()

    def __enter__(self) -> "JsonRPCClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    @property
    def session(self) -> Session:
        """Snapshot of the current session."""
        with self._lock:
            return self._session

    def set_session_token(self, token: str) -> None:
        """Use a session token obtained elsewhere."""
        with self._lock:
            self._session = Session(session_token=token, login_status=LOGIN_SUCCESS)

    def _deadline(self, deadline: Optional[Deadline]) -> Deadline:
        return deadline if deadline is not None else Deadline(self.settings.request_timeout)

    def authenticate(self, deadline: Optional[Deadline] = None) -> Session:
        """Log in with the client certificate and store the session token.

        :raises AuthError: on a non-200 answer or a refused login; the
            previously stored session is kept
        :raises DecodeError: if the 200 body is not the expected JSON
        :return: the new session
        """
        response = self._http.request(
            "POST",
            self.settings.identity_url,
            deadline=self._deadline(deadline),
            headers=build_login_headers(self.settings.app_key),
            data={"username": self.settings.username, "password": self.settings.password},
        )
        if response.status_code != 200:
            logger.warning(json.dumps({
                "event": "login_failed",
                "username": self.settings.username,
                "status_code": response.status_code,
                "detail": response.reason_phrase,
            }))
            raise AuthError(response.status_code, response.reason_phrase)
        try:
            session = Session.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"unable to decode login response: {exc}") from exc
        if session.login_status != LOGIN_SUCCESS or not session.session_token:
            logger.warning(json.dumps({
                "event": "login_refused",
                "username": self.settings.username,
                "login_status": session.login_status,
            }))
            raise AuthError(response.status_code, session.login_status or "no session token issued")

        with self._lock:
            self._session = session
        logger.info(json.dumps({
            "event": "login_success",
            "username": self.settings.username,
            "login_status": session.login_status,
        }))
        return session

    def invoke(
        self,
        id: int,
        method: str,
        filter: Optional[MarketFilter] = None,
        extra_params: Optional[OperationParams] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> bytes:
        """Call one remote operation and return its raw ``result``.

        :param id: JSON-RPC correlation id
        :param method: operation name without namespace, e.g. ``listEvents``
        :param filter: market filter, ``None`` for operations addressed by id
        :param extra_params: operation-specific parameter bag
        :param deadline: call deadline; defaults to ``request_timeout``
        :raises InvokeError: on a non-200 answer
        :raises DecodeError: if the body is not a JSON-RPC envelope
        :raises RemoteAPIError: if the envelope carries an error object
        :return: the ``result`` member serialised as JSON bytes
        """
        envelope = JsonRPCRequest(method=rpc_method(method), params=build_params(filter, extra_params), id=id)
        with self._lock:
            token = self._session.session_token

        response = self._http.request(
            "POST",
            self.settings.jsonrpc_url,
            deadline=self._deadline(deadline),
            headers=build_rpc_headers(self.settings.app_key, token),
            content=orjson.dumps(envelope.model_dump()),
        )
        if response.status_code != 200:
            logger.error(json.dumps({
                "event": "rpc_http_error",
                "method": envelope.method,
                "status_code": response.status_code,
                "detail": response.reason_phrase,
            }))
            raise InvokeError(response.status_code, response.reason_phrase)
        try:
            rpc_response = JsonRPCResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"unable to decode {envelope.method} response: {exc}") from exc
        if rpc_response.error is not None:
            logger.error(json.dumps({
                "event": "rpc_error",
                "method": envelope.method,
                "code": rpc_response.error.code,
                "detail": rpc_response.error.message,
            }))
            raise RemoteAPIError(rpc_response.error.code, rpc_response.error.message)
        try:
            return orjson.dumps(rpc_response.result)
        except orjson.JSONEncodeError as exc:
            raise DecodeError(f"unable to re-encode {envelope.method} result: {exc}") from exc
