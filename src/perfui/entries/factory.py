"""Entry factory — builds perf UI entries from plain config dicts.

Format: ``{"kind": "running_time" | "clock", <option>: <value>, ...}``
where the options are the entry's dataclass fields.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Optional

from perfui.engine.clock import SystemClock
from perfui.entries.base import PerfUiEntry
from perfui.entries.time import PerfUiEntryClock, PerfUiEntryRunningTime

ENTRY_KINDS: dict[str, type] = {
    "running_time": PerfUiEntryRunningTime,
    "clock": PerfUiEntryClock,
}


def build_entry(spec: dict[str, Any], clock: Optional[SystemClock] = None) -> PerfUiEntry:
    """Create one entry from a config dict.

    Args:
        spec: Entry definition with a ``kind`` key.
        clock: Clock source handed to clock entries.

    Returns:
        The new entry. Without an explicit ``sort_key`` it gets the next
        process-wide key.

    Raises:
        ValueError: Unknown kind, unknown option, or invalid option value.
    """
    raw = dict(spec)
    kind = raw.pop("kind", None)
    cls = ENTRY_KINDS.get(kind)
    if cls is None:
        raise ValueError(f"Unknown entry kind {kind!r} (expected one of {sorted(ENTRY_KINDS)})")

    allowed = {f.name for f in fields(cls) if f.init and f.name != "clock"}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValueError(f"Unknown option(s) for {kind}: {', '.join(unknown)}")

    if cls is PerfUiEntryClock and clock is not None:
        raw["clock"] = clock
    return cls(**raw)
