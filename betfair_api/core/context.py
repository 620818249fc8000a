"""
core/context.py
----------------

Deadline-bearing execution context for outbound calls.  A ``Deadline``
is created per call (or supplied by the caller) and consulted by the
retry loop before every attempt; each attempt's socket timeout is
clamped to the time that is left.  Cancelling a deadline makes it
expire immediately, which stops any further retries.
"""

from __future__ import annotations

import math
import threading
import time
from typing import Callable


class Deadline:
    """Absolute point in time after which a call must give up.

    :param timeout: seconds from now until the deadline
    :param clock: monotonic clock, replaceable in tests
    """

    def __init__(self, timeout: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.timeout = timeout
        self.expires_at = clock() + timeout
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float:
        """Seconds left, never negative; zero once cancelled."""
        if self.cancelled:
            return 0.0
        return max(self.expires_at - self._clock(), 0.0)

    def overdue(self) -> float:
        """Seconds elapsed since the deadline.

        Zero or negative while time remains; a cancelled deadline is
        infinitely overdue.
        """
        if self.cancelled:
            return math.inf
        return self._clock() - self.expires_at

    @property
    def expired(self) -> bool:
        return self.overdue() >= 0

    def clamp(self, seconds: float) -> float:
        return min(seconds, self.remaining())

    def __repr__(self) -> str:
        return f"Deadline(timeout={self.timeout}, remaining={self.remaining():.3f}, cancelled={self.cancelled})"
