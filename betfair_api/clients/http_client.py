"""
clients/http_client.py
----------------------

HTTP client wrapper with connection pooling, mutual TLS, per-call
deadlines and retries on connection-level failures.  One instance is
owned by each ``JsonRPCClient``; it uses ``httpx`` under the hood and
honours the settings defined in :mod:`betfair_api.core.config`.

Retry decisions are delegated to :func:`betfair_api.core.retry.check_retry`.
Only failures where the request never left the client are retried, and
never once the deadline has fired.  Any received response, whatever its
status, is returned to the caller on the first attempt.
"""

from __future__ import annotations

import json
import time
from typing import Any, Callable, Optional

import httpx

from betfair_api.core.config import Settings
from betfair_api.core.context import Deadline
from betfair_api.core.errors import DeadlineExceededError, TransportError
from betfair_api.core.retry import RetryDecision, backoff_delay, check_retry
from betfair_api.core.tls import build_ssl_context
from betfair_api.logging_config import log_http_request, logger


class HTTPClient:
    """Thread-safe HTTP client with deadline-bound retries.

    :param settings: client settings (timeouts, retry tuning, certificate paths)
    :param transport: optional ``httpx`` transport; when given, no SSL
        context is built, which is how tests plug in ``httpx.MockTransport``
    :param sleep: function used to wait between attempts
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.timeout = settings.http_timeout
        self.max_retries = settings.http_max_retries
        self.backoff_factor = settings.http_backoff_factor
        self.backoff_max = settings.http_backoff_max
        self._sleep = sleep
        if transport is not None:
            self._client = httpx.Client(transport=transport, timeout=self.timeout)
        else:
            self._client = httpx.Client(verify=build_ssl_context(settings), timeout=self.timeout)

    def close(self) -> None:
        """Close the underlying HTTPX client and release pooled connections."""
        self._client.close()

    def request(self, method: str, url: str, *, deadline: Deadline, **kwargs: Any) -> httpx.Response:
        """Send a request, retrying connection failures until the deadline.

        :raises DeadlineExceededError: if the deadline fires before a
            response is obtained
        :raises TransportError: if a transport failure is not retried, or
            any other ``httpx.RequestError`` occurs
        :return: the first response received, whatever its status
        """
        headers = kwargs.get("headers") or {}
        attempt = 0
        while True:
            if deadline.expired:
                raise DeadlineExceededError(f"deadline exceeded after {attempt} attempt(s) to {url}")
            attempt += 1
            start_time = time.monotonic()
            try:
                response = self._client.request(method, url, timeout=deadline.clamp(self.timeout), **kwargs)
            except httpx.TransportError as exc:
                duration_ms = (time.monotonic() - start_time) * 1000
                log_http_request(method, url, headers=headers, attempt=attempt,
                                 duration_ms=duration_ms, error=repr(exc))
                decision = check_retry(attempt, deadline.overdue(), error=exc, max_retries=self.max_retries)
                if decision is RetryDecision.STOP:
                    if deadline.expired:
                        raise DeadlineExceededError(
                            f"deadline exceeded after {attempt} attempt(s) to {url}: {exc}"
                        ) from exc
                    raise TransportError(f"{method} {url} failed after {attempt} attempt(s): {exc}") from exc
                delay = deadline.clamp(backoff_delay(attempt, self.backoff_factor, self.backoff_max))
                logger.warning(json.dumps({
                    "event": "http_retry",
                    "url": url,
                    "attempt": attempt,
                    "delay": round(delay, 3),
                    "detail": str(exc),
                }))
                if delay > 0:
                    self._sleep(delay)
                continue
            except httpx.RequestError as exc:
                duration_ms = (time.monotonic() - start_time) * 1000
                log_http_request(method, url, headers=headers, attempt=attempt,
                                 duration_ms=duration_ms, error=repr(exc))
                raise TransportError(f"{method} {url} failed: {exc}") from exc
            duration_ms = (time.monotonic() - start_time) * 1000
            log_http_request(method, url, headers=headers, attempt=attempt,
                             status=response.status_code, duration_ms=duration_ms)
            return response
