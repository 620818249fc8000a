import json
import logging

from betfair_api.logging_config import _sanitize, log_call, log_http_request
from betfair_api.schemas.auth import Session
from betfair_api.schemas.filters import MarketFilter


def test_sanitize_removes_secrets():
    cleaned = _sanitize({
        "username": "punter",
        "password": "s3cret",
        "sessionToken": "abc",
        "app_key": "key",
        "nested": [{"secret": 1, "keep": 2}],
        "blob": b"\x00\x01",
    })
    assert cleaned == {"username": "punter", "nested": [{"keep": 2}], "blob": "<binary 2 bytes>"}


def test_sanitize_dumps_models_by_alias():
    assert _sanitize(MarketFilter(event_ids=["1"])) == {"eventIds": ["1"]}
    assert _sanitize(Session(session_token="abc", login_status="SUCCESS")) == {"loginStatus": "SUCCESS"}


def test_log_http_request_drops_auth_headers(caplog):
    with caplog.at_level(logging.DEBUG, logger="betfair_api"):
        log_http_request("POST", "https://example.test", headers={
            "X-Authentication": "abc",
            "X-Application": "key",
            "Accept": "application/json",
        }, attempt=1, status=200, duration_ms=1.234)

    data = json.loads(caplog.records[-1].getMessage())
    assert data["headers"] == {"Accept": "application/json"}
    assert data["status"] == 200
    assert data["duration_ms"] == 1.23


def test_log_call_records_entry_and_exit(caplog):
    @log_call
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="betfair_api"):
        assert add(1, 2) == 3

    events = [json.loads(r.getMessage())["event"] for r in caplog.records]
    assert events == ["call_start", "call_end"]
