"""Perf UI entry contract.

Every entry exposes four operations the registry calls each refresh:
``display_label()``, ``sort_key``, ``update_value(time)`` and
``format_value(value)``. ``update_value`` may return ``None`` when no
value is available this tick; the entry then shows nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from perfui.engine.app_time import Time

V = TypeVar("V")


class PerfUiEntry(ABC, Generic[V]):
    """Base class for a single perf UI line.

    Attributes:
        label: Custom label; empty means "use the default label".
        sort_key: Position among sibling entries (ascending).
    """

    label: str
    sort_key: int

    @abstractmethod
    def display_label(self) -> str:
        """Label shown next to the value."""

    @abstractmethod
    def update_value(self, time: Time) -> Optional[V]:
        """Compute this tick's value, or ``None`` if there is none."""

    @abstractmethod
    def format_value(self, value: V) -> str:
        """Render a value produced by :meth:`update_value`."""
