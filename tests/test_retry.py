import math

import httpx
import pytest

from betfair_api.core.retry import RetryDecision, backoff_delay, check_retry


def _reset() -> httpx.ConnectError:
    return httpx.ConnectError("connection reset by peer")


def test_connection_error_within_deadline_is_retried():
    assert check_retry(1, -5.0, error=_reset()) is RetryDecision.RETRY


@pytest.mark.parametrize("overdue", [0.0, 0.5, math.inf])
def test_fired_deadline_stops(overdue):
    assert check_retry(1, overdue, error=_reset()) is RetryDecision.STOP


@pytest.mark.parametrize("status", [200, 401, 500, 503])
def test_received_response_is_never_retried(status):
    response = httpx.Response(status)
    assert check_retry(1, -5.0, response=response) is RetryDecision.STOP


def test_non_connection_error_stops():
    assert check_retry(1, -5.0, error=ValueError("boom")) is RetryDecision.STOP


@pytest.mark.parametrize("error", [
    httpx.ConnectTimeout("timed out"),
    httpx.PoolTimeout("pool exhausted"),
])
def test_connect_phase_errors_are_retried(error):
    assert check_retry(3, -1.0, error=error) is RetryDecision.RETRY


@pytest.mark.parametrize("error", [
    httpx.ReadTimeout("timed out"),
    httpx.WriteTimeout("timed out"),
    httpx.ReadError("reset"),
    httpx.RemoteProtocolError("closed"),
])
def test_errors_after_send_are_not_retried(error):
    assert check_retry(1, -5.0, error=error) is RetryDecision.STOP


def test_max_retries_caps_attempts():
    assert check_retry(2, -5.0, error=_reset(), max_retries=2) is RetryDecision.RETRY
    assert check_retry(3, -5.0, error=_reset(), max_retries=2) is RetryDecision.STOP
    assert check_retry(1, -5.0, error=_reset(), max_retries=0) is RetryDecision.STOP


def test_backoff_delay_grows_and_is_capped():
    assert backoff_delay(1, 0.5, 30.0) == 0.5
    assert backoff_delay(2, 0.5, 30.0) == 1.0
    assert backoff_delay(3, 0.5, 30.0) == 2.0
    assert backoff_delay(10, 0.5, 30.0) == 30.0
    assert backoff_delay(0, 0.5, 30.0) == 0.0
