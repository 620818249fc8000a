"""Shared test fixtures for the Betfair client test suite.

``FakeExchange`` plays both Betfair endpoints behind an
``httpx.MockTransport`` so the transport client, the facade and the
routes can be exercised without network access or certificate files.
"""

import json
from typing import Any, Callable, List, Union

import httpx
import pytest

from betfair_api.clients.http_client import HTTPClient
from betfair_api.clients.jsonrpc_client import JsonRPCClient
from betfair_api.core.config import Settings
from betfair_api.services.betting_service import BettingAPI

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeExchange:
    """Scripted replies for the identity and JSON-RPC endpoints.

    Replies are consumed in order; an exception instance is raised as if
    the connection failed, a callable is invoked with the request.
    """

    def __init__(self) -> None:
        self.replies: List[Reply] = []
        self.requests: List[httpx.Request] = []

    def queue(self, *replies: Reply) -> "FakeExchange":
        self.replies.extend(replies)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"unexpected request to {request.url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


def rpc_result(result: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json={"jsonrpc": "2.0", "result": result, "id": 1})


def rpc_error(code: int, message: str) -> httpx.Response:
    return httpx.Response(200, json={"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": 1})


def login_ok(token: str = "abc") -> httpx.Response:
    return httpx.Response(200, json={"sessionToken": token, "loginStatus": "SUCCESS"})


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_key="test-app-key",
        username="punter",
        password="s3cret",
        http_backoff_factor=0.0,
        _env_file=None,
    )


@pytest.fixture
def exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def http_client(settings, exchange, sleeps) -> HTTPClient:
    client = HTTPClient(settings, transport=httpx.MockTransport(exchange.handler), sleep=sleeps.append)
    yield client
    client.close()


@pytest.fixture
def rpc_client(settings, http_client) -> JsonRPCClient:
    return JsonRPCClient(settings, http_client=http_client)


@pytest.fixture
def api(rpc_client) -> BettingAPI:
    return BettingAPI(rpc_client)
