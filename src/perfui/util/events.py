"""Typed event bus — decoupled notification between the perf UI and its consumers.

The registry announces added/removed entries and finished refreshes;
renderers and monitors subscribe without the registry knowing about them.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Type

T = TypeVar("T")


# -- Registry events -----------------------------------------------------

@dataclass(frozen=True)
class EntryAdded:
    """An entry was attached to a perf UI."""
    label: str
    sort_key: int


@dataclass(frozen=True)
class EntryRemoved:
    """An entry was detached from a perf UI."""
    label: str
    sort_key: int


# -- Refresh events ------------------------------------------------------

@dataclass(frozen=True)
class PerfUiRefreshed:
    """All entries were updated and formatted for one tick."""
    tick: int
    rows: tuple  # tuple[Row, ...] in sort-key order


# -- Event Bus -----------------------------------------------------------

class EventBus:
    """Simple synchronous event bus with typed events.

    Usage:
        bus = EventBus()
        bus.on(PerfUiRefreshed, lambda e: print(e.rows))
        bus.emit(PerfUiRefreshed(tick=1, rows=()))
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def on(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event type."""
        self._handlers[event_type].append(handler)

    def off(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Unregister a handler."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: object) -> None:
        """Emit an event to all registered handlers."""
        for handler in self._handlers.get(type(event), []):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
