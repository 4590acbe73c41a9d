"""Perf UI registry — holds entries and refreshes them in sort-key order.

Each refresh calls ``update_value`` then ``format_value`` on every entry
and produces one :class:`Row` per entry. An entry without a value this
tick gets an empty row instead of stopping the refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from perfui.util.events import EntryAdded, EntryRemoved, EventBus, PerfUiRefreshed

if TYPE_CHECKING:
    from perfui.engine.app_time import Time
    from perfui.entries.base import PerfUiEntry

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """One rendered perf UI line."""
    sort_key: int
    label: str
    text: str  # "" when the entry had no value this tick


class PerfUi:
    """Collection of perf UI entries.

    Args:
        event_bus: Receives entry and refresh events. Optional so the
            registry can be used standalone.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._events = event_bus
        self._entries: list[PerfUiEntry] = []
        self.tick_count: int = 0
        self.last_rows: tuple[Row, ...] = ()

    @property
    def entries(self) -> list[PerfUiEntry]:
        """Entries in display order (ascending sort key, then insertion)."""
        return sorted(self._entries, key=lambda e: e.sort_key)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: PerfUiEntry) -> PerfUiEntry:
        """Attach an entry. Returns it for chaining."""
        self._entries.append(entry)
        log.debug("Entry added: %r (sort_key=%d)", entry.display_label(), entry.sort_key)
        self._emit(EntryAdded(label=entry.display_label(), sort_key=entry.sort_key))
        return entry

    def remove(self, entry: PerfUiEntry) -> bool:
        """Detach an entry. Returns False if it was not attached."""
        for i, e in enumerate(self._entries):
            if e is entry:
                del self._entries[i]
                self._emit(EntryRemoved(label=entry.display_label(), sort_key=entry.sort_key))
                return True
        return False

    def clear(self) -> None:
        """Detach all entries."""
        for entry in list(self._entries):
            self.remove(entry)

    def refresh(self, time: Time) -> tuple[Row, ...]:
        """Update and format every entry once.

        Returns:
            Rows in display order.
        """
        rows = tuple(self._refresh_entry(entry, time) for entry in self.entries)
        self.tick_count += 1
        self.last_rows = rows
        self._emit(PerfUiRefreshed(tick=self.tick_count, rows=rows))
        return rows

    def _refresh_entry(self, entry: PerfUiEntry, time: Time) -> Row:
        label = entry.display_label()
        try:
            value = entry.update_value(time)
            text = "" if value is None else entry.format_value(value)
        except Exception:
            log.exception("Entry %r failed to refresh", label)
            text = ""
        return Row(sort_key=entry.sort_key, label=label, text=text)

    def _emit(self, event: object) -> None:
        if self._events is not None:
            self._events.emit(event)
