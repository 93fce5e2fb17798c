"""Current-time source for expiry arithmetic.

Every "now" read in crumb goes through :func:`now` so the clock can be
swapped for a fixed one. ``time.time`` is looked up on each call, which
keeps ``freezegun`` and similar tools effective without extra wiring.
"""

import threading
import time
from collections.abc import Callable

type Clock = Callable[[], float]

_lock = threading.Lock()
_clock: Clock | None = None


def now() -> int:
    """Return the current Unix timestamp in whole seconds."""
    clock = _clock or time.time
    return int(clock())


def set_clock(clock: Clock | None) -> Clock | None:
    """Install *clock* as the time source and return the previous one.

    Pass ``None`` to go back to ``time.time``.
    """
    global _clock
    with _lock:
        previous, _clock = _clock, clock
    return previous
