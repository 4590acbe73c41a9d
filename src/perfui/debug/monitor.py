"""State snapshot collector — gathers overlay state for debugging.

Pulls data from the refresh loop and the perf UI into a plain dict that
can be serialised to JSON.
"""

from __future__ import annotations

import os
import time
from typing import Any, TYPE_CHECKING

from perfui.util.pretty import format_pretty_time

if TYPE_CHECKING:
    from perfui.engine.refresh_loop import RefreshLoop


def collect_snapshot(loop: RefreshLoop) -> dict[str, Any]:
    """Build a JSON-serialisable snapshot of the overlay state.

    Args:
        loop: The running (or stopped) refresh loop.

    Returns:
        Nested dict with loop counters, entries and the last rows.
    """
    snap: dict[str, Any] = {}

    # -- Refresh loop ---
    snap["loop"] = _loop_info(loop)

    # -- Entries ---
    snap["entries"] = _entries_info(loop)

    # -- Process ---
    snap["process"] = _process_info()

    return snap


# -------------------------------------------------------------------
# Section collectors
# -------------------------------------------------------------------


def _loop_info(loop: RefreshLoop) -> dict[str, Any]:
    return {
        "running": loop.is_running,
        "tick_count": loop.tick_count,
        "interval_ms": round(loop.interval_seconds * 1000, 3),
        "uptime_s": round(loop.uptime_seconds, 1),
        "uptime_fmt": format_pretty_time(0, loop.uptime_seconds),
        "last_refresh_ms": round(loop.last_refresh_ms, 3),
        "avg_refresh_ms": round(loop.avg_refresh_ms, 3),
    }


def _entries_info(loop: RefreshLoop) -> dict[str, Any]:
    perf_ui = loop.perf_ui
    return {
        "count": len(perf_ui),
        "rows": [
            {"sort_key": r.sort_key, "label": r.label, "text": r.text}
            for r in perf_ui.last_rows
        ],
    }


def _process_info() -> dict[str, Any]:
    return {
        "pid": os.getpid(),
        "time": time.strftime("%Y-%m-%d %H:%M:%S"),
    }
