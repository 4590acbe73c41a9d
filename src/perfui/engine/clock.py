"""System clock source — wall-clock time of day in UTC or local time.

Local time is a runtime capability chosen at startup: with
``local_time=False`` every read falls back to UTC, the same way a build
without timezone support would behave.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable, Optional, Tuple

from perfui.util.pretty import NANOS_PER_SECOND

log = logging.getLogger(__name__)

HMS = Tuple[int, int, int, int]
"""(hour 0-23, minute 0-59, second 0-59, nanosecond 0-999_999_999)."""


class SystemClock:
    """Reads the operating system's wall clock.

    Args:
        local_time: Whether local (timezone-aware) time is available.
        now_ns: Source of nanoseconds since the Unix epoch
            (default ``time.time_ns``).
    """

    def __init__(
        self,
        local_time: bool = True,
        now_ns: Callable[[], int] = time.time_ns,
    ) -> None:
        self._local_time = local_time
        self._now_ns = now_ns

    @property
    def has_local_time(self) -> bool:
        return self._local_time

    def utc_hms(self) -> Optional[HMS]:
        """Current UTC time of day, or ``None`` if the clock can't be read."""
        ns = self._read_ns()
        if ns is None:
            return None
        secs, nanos = divmod(ns, NANOS_PER_SECOND)
        return ((secs // 3600) % 24, (secs // 60) % 60, secs % 60, nanos)

    def local_hms(self) -> Optional[HMS]:
        """Current local time of day; UTC when local time is unavailable."""
        if not self._local_time:
            return self.utc_hms()
        ns = self._read_ns()
        if ns is None:
            return None
        secs, nanos = divmod(ns, NANOS_PER_SECOND)
        try:
            now = datetime.fromtimestamp(secs)
        except (OverflowError, OSError, ValueError) as e:
            log.debug("Local time conversion failed for %d: %s", secs, e)
            return None
        return (now.hour, now.minute, now.second, nanos)

    def _read_ns(self) -> Optional[int]:
        try:
            ns = self._now_ns()
        except OSError as e:
            log.debug("System clock read failed: %s", e)
            return None
        if ns < 0:
            log.debug("System clock is before the Unix epoch (%d ns)", ns)
            return None
        return ns
