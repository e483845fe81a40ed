"""Wall-clock helpers with microsecond resolution and a busy-wait sleep."""

import time

# Below this many microseconds the sleep loop spins instead of yielding.
_SPIN_THRESHOLD_US = 200


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def now_us() -> int:
    """Return the current wall-clock time in whole microseconds."""
    return time.time_ns() // 1_000


def ms_between(start_us: int, end_us: int) -> int:
    """Return the whole milliseconds elapsed from ``start_us`` to ``end_us``."""
    return (end_us - start_us) // 1000


def precise_sleep(useconds: int) -> None:
    """Sleep for at least ``useconds`` microseconds, waking early to stay accurate.

    The remaining time is halved on every pass, so the call ends close to the
    requested duration at the cost of some extra CPU time.
    """
    start = now_us()
    elapsed = 0
    remaining = useconds
    while elapsed < useconds:
        if remaining > _SPIN_THRESHOLD_US:
            time.sleep((remaining >> 1) / 1_000_000)
        elapsed = now_us() - start
        remaining = useconds - elapsed


def wait_until(start_us: int) -> None:
    """Block until the wall clock reaches ``start_us`` microseconds."""
    current = now_us()
    if current < start_us:
        precise_sleep(start_us - current)