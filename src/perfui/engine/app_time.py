"""Engine time resource — monotonic elapsed time since application start.

Unaffected by wall-clock adjustments. Advanced once per refresh by the
refresh loop; entries only read it.
"""

from __future__ import annotations

import time
from typing import Callable


class Time:
    """Elapsed time since the application started.

    Args:
        clock: Monotonic time source in seconds (default ``time.monotonic``).
            Injected so tests can drive time by hand.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.started_at: float = clock()
        self.elapsed: float = 0.0
        self.delta: float = 0.0
        self.tick_count: int = 0

    def tick(self) -> float:
        """Read the clock and advance ``elapsed``. Returns the new elapsed value."""
        now = self._clock() - self.started_at
        self.delta = now - self.elapsed
        self.elapsed = now
        self.tick_count += 1
        return now
