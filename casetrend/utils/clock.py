"""Wall-clock helpers. The engine never reads the clock itself; callers pass `now`."""

import time
from typing import Callable

MS_PER_DAY = 24 * 60 * 60 * 1000

Clock = Callable[[], int]


def utc_now_ms() -> int:
    """Current UTC time as integer epoch milliseconds."""
    return int(time.time() * 1000)


def fixed_clock(now_ms: int) -> Clock:
    """Clock that always returns `now_ms`."""
    return lambda: now_ms
