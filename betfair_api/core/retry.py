"""
core/retry.py
--------------

Retry policy for outbound calls, kept free of any HTTP client state so
the decision table can be exercised without network I/O.

Decision table, evaluated in order:

* the deadline has fired (or was cancelled): stop;
* a response was received, whatever its status or body: stop;
* a connection-level error occurred (DNS, TCP or TLS handshake failure,
  connect or pool timeout): retry, unless ``max_retries`` is set and
  used up;
* anything else: stop and let the error propagate.

A JSON-RPC error object or a non-200 status is therefore never
retried: the request reached the exchange and may have been acted on.
Read and write timeouts, and errors raised once the request was sent,
are terminal for the same reason.
"""

from __future__ import annotations

import enum
from typing import Optional

import httpx


class RetryDecision(str, enum.Enum):
    RETRY = "retry"
    STOP = "stop"


CONNECTION_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


def is_connection_error(error: BaseException) -> bool:
    """True for failures where the request never left the client."""
    return isinstance(error, CONNECTION_ERRORS)


def check_retry(
    attempt: int,
    overdue: float,
    *,
    error: Optional[BaseException] = None,
    response: Optional[httpx.Response] = None,
    max_retries: Optional[int] = None,
) -> RetryDecision:
    """Decide whether a failed attempt should be repeated.

    :param attempt: number of attempts already made (1 after the first)
    :param overdue: seconds elapsed since the deadline; ``>= 0`` means the
        deadline has fired
    :param error: exception raised by the attempt, if any
    :param response: response received by the attempt, if any
    :param max_retries: optional cap on the number of retries
    :return: ``RetryDecision.RETRY`` or ``RetryDecision.STOP``
    """
    if overdue >= 0:
        return RetryDecision.STOP
    if response is not None:
        return RetryDecision.STOP
    if error is None or not is_connection_error(error):
        return RetryDecision.STOP
    if max_retries is not None and attempt > max_retries:
        return RetryDecision.STOP
    return RetryDecision.RETRY


def backoff_delay(attempt: int, factor: float, maximum: float) -> float:
    """Exponential delay before retry number ``attempt`` (1-based)."""
    if attempt < 1:
        return 0.0
    return min(factor * (2 ** (attempt - 1)), maximum)
