import math

from betfair_api.core.context import Deadline
from tests.conftest import FakeClock


def test_deadline_counts_down_and_expires():
    clock = FakeClock()
    deadline = Deadline(5.0, clock=clock)
    assert deadline.remaining() == 5.0
    assert not deadline.expired

    clock.advance(3.0)
    assert deadline.remaining() == 2.0
    assert deadline.overdue() == -2.0

    clock.advance(4.0)
    assert deadline.remaining() == 0.0
    assert deadline.overdue() == 2.0
    assert deadline.expired


def test_clamp_never_exceeds_remaining_time():
    clock = FakeClock()
    deadline = Deadline(5.0, clock=clock)
    assert deadline.clamp(10.0) == 5.0
    assert deadline.clamp(1.0) == 1.0


def test_cancelled_deadline_is_expired():
    deadline = Deadline(60.0)
    deadline.cancel()
    assert deadline.cancelled
    assert deadline.expired
    assert deadline.remaining() == 0.0
    assert deadline.overdue() == math.inf
