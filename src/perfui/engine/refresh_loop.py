"""Refresh loop — asyncio-based overlay tick.

Responsibilities:
- Advance the engine time resource
- Refresh all perf UI entries (update + format)
- Track refresh timing for the debug monitor

Rendering is not done here; renderers subscribe to ``PerfUiRefreshed``
on the event bus.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from perfui.engine.app_time import Time
    from perfui.engine.perf_ui import PerfUi, Row
    from perfui.loaders.config_loader import PerfUiConfig

log = logging.getLogger(__name__)


class RefreshLoop:
    """Periodic perf UI refresh.

    Args:
        perf_ui: Registry of entries to refresh.
        app_time: Engine time resource, advanced once per tick.
        config: Supplies ``refresh_interval_ms``. Defaults to 250 ms.
        max_ticks: Stop after this many ticks (``None`` runs until stop()).
    """

    def __init__(
        self,
        perf_ui: PerfUi,
        app_time: Time,
        config: PerfUiConfig | None = None,
        max_ticks: Optional[int] = None,
    ) -> None:
        self._perf_ui = perf_ui
        self._time = app_time
        self._running = False
        if max_ticks is not None and max_ticks < 1:
            raise ValueError(f"max_ticks must be at least 1, got {max_ticks}")
        self._interval = (config.refresh_interval_ms / 1000.0) if config else 0.25
        self._max_ticks = max_ticks

        # --- Debug / monitoring counters ---
        self.tick_count: int = 0
        self.started_at: float = 0.0
        self.last_refresh_ms: float = 0.0
        self.avg_refresh_ms: float = 0.0
        self._refresh_sum_ms: float = 0.0

    async def run(self) -> None:
        """Start refreshing. Runs until stop() is called or max_ticks is reached."""
        self._running = True
        self.started_at = time.monotonic()
        while self._running:
            self.step()
            if self._max_ticks is not None and self.tick_count >= self._max_ticks:
                log.info("Reached %d ticks — stopping", self._max_ticks)
                self._running = False
                break
            await asyncio.sleep(self._interval)

    def step(self) -> tuple[Row, ...]:
        """One refresh: advance time, update and format all entries."""
        t0 = time.monotonic()
        self._time.tick()
        rows = self._perf_ui.refresh(self._time)
        elapsed_ms = (time.monotonic() - t0) * 1000

        self.tick_count += 1
        self.last_refresh_ms = elapsed_ms
        self._refresh_sum_ms += elapsed_ms
        self.avg_refresh_ms = self._refresh_sum_ms / self.tick_count
        log.debug("Tick %d refreshed %d entries in %.3f ms", self.tick_count, len(rows), elapsed_ms)
        return rows

    @property
    def uptime_seconds(self) -> float:
        """Seconds since the loop started."""
        if self.started_at == 0.0:
            return 0.0
        return time.monotonic() - self.started_at

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def perf_ui(self) -> PerfUi:
        return self._perf_ui

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def stop(self) -> None:
        """Signal the loop to stop."""
        self._running = False
