"""
logging_config.py
------------------

Shared logging configuration and helpers for the Betfair client.  It
uses Python's built-in ``logging`` module so that output can be
captured by standard handlers or shipped to an external collector.
Messages are serialised as JSON strings to make them easy to parse
downstream.

Import ``logger`` and call its methods instead of ``logging.info``
directly.  The ``log_call`` decorator records entry and exit of a
function at DEBUG level without leaking session tokens, passwords or
the application key.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("betfair_api")

SENSITIVE_KEYWORDS = ("token", "password", "secret", "app_key", "appkey")
SENSITIVE_HEADERS = {"x-authentication", "x-application"}


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionary keys containing one of ``SENSITIVE_KEYWORDS`` are removed,
    byte strings are replaced by a size marker and pydantic models are
    dumped by alias before being cleaned.  Anything that is still not JSON
    serialisable is rendered with ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in SENSITIVE_KEYWORDS):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump(by_alias=True, exclude_defaults=True))
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions at DEBUG level.

    The ``call_start`` event carries a sanitised snapshot of the arguments
    (``self`` excluded when the first argument is an object with a
    ``__dict__``); the ``call_end`` event only records the type of the
    result so that large market books are not dumped into the log.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args[1:] if args and hasattr(args[0], "__dict__") else args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result_type": type(result).__name__,
            }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     attempt: int | None = None, status: int | None = None,
                     duration_ms: float | None = None, error: str | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Authentication headers are removed before logging.  Request bodies are
    never logged because the login form carries the account password.

    Parameters
    ----------
    method : str
        The HTTP method.
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  ``X-Authentication`` and ``X-Application`` are
        dropped.
    attempt : int, optional
        One-based attempt number within the retry loop.
    status : int, optional
        Response status code, when a response was received.
    duration_ms : float, optional
        Time taken by the attempt in milliseconds.
    error : str, optional
        Connection-level error text, when no response was received.
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if attempt is not None:
        data["attempt"] = attempt
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    if error is not None:
        data["error"] = error
    logger.debug(json.dumps(data))
