"""Perf UI entries for displaying time.

- :class:`PerfUiEntryRunningTime` — time since the app started (or since
  a given baseline), as seconds or HH:MM:SS.
- :class:`PerfUiEntryClock` — current wall-clock time of day.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Optional

from perfui.engine.app_time import Time
from perfui.engine.clock import HMS, SystemClock
from perfui.entries.base import PerfUiEntry
from perfui.util import constants
from perfui.util.pretty import format_pretty_float, format_pretty_time, format_pretty_time_hms
from perfui.util.sort_key import next_sort_key


def _check_width(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= constants.MAX_DIGITS:
        raise ValueError(f"{name} must be between 0 and {constants.MAX_DIGITS}, got {value}")


def _check_common(entry: PerfUiEntry) -> None:
    if not isinstance(entry.label, str):
        raise ValueError(f"label must be a string, got {entry.label!r}")
    if isinstance(entry.sort_key, bool) or not isinstance(entry.sort_key, int):
        raise ValueError(f"sort_key must be an integer, got {entry.sort_key!r}")


def _check_flag(name: str, value: bool) -> None:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")


@dataclass
class PerfUiEntryRunningTime(PerfUiEntry[float]):
    """Time the app has been running.

    Attributes:
        label: Custom label. Empty uses ``"Running Time"``.
        start: If set, count time relative to this (seconds since startup,
            e.g. an earlier ``Time.elapsed`` reading). Must be a finite number; a
            start in the future yields a negative value, shown with a
            leading ``-``.
        format_hms: Format as HH:MM:SS instead of seconds.
        display_units: Append ``" s"``. Only used if ``format_hms`` is false.
        digits: Integer-part width. Only used if ``format_hms`` is false.
        precision: Fractional digits.
        sort_key: Position in the perf UI.
    """

    label: str = ""
    start: Optional[float] = None
    format_hms: bool = False
    display_units: bool = True
    digits: int = constants.RUNNING_TIME_DIGITS
    precision: int = constants.RUNNING_TIME_PRECISION
    sort_key: int = field(default_factory=next_sort_key)

    def __post_init__(self) -> None:
        _check_common(self)
        if self.start is not None and (
            isinstance(self.start, bool) or not isinstance(self.start, Real)
            or not math.isfinite(self.start)
        ):
            raise ValueError(f"start must be a finite number of seconds, got {self.start!r}")
        _check_flag("format_hms", self.format_hms)
        _check_flag("display_units", self.display_units)
        _check_width("digits", self.digits)
        _check_width("precision", self.precision)

    def display_label(self) -> str:
        return self.label or constants.LABEL_RUNNING_TIME

    def update_value(self, time: Time) -> Optional[float]:
        elapsed = time.elapsed
        if self.start is not None:
            return elapsed - self.start
        return elapsed

    def format_value(self, value: float) -> str:
        if self.format_hms:
            return format_pretty_time(self.precision, value)
        text = format_pretty_float(self.digits, self.precision, value)
        if self.display_units:
            text += constants.UNIT_SECONDS
        return text


@dataclass
class PerfUiEntryClock(PerfUiEntry[HMS]):
    """Wall clock / current time of day.

    Shows local time when the clock source supports it, UTC otherwise.

    Attributes:
        label: Custom label. Empty uses ``"Clock"`` or ``"Clock (UTC)"``.
        prefer_utc: Show UTC even when local time is available.
        precision: Fractional-second digits.
        sort_key: Position in the perf UI.
        clock: System clock source.
    """

    label: str = ""
    prefer_utc: bool = False
    precision: int = constants.CLOCK_PRECISION
    sort_key: int = field(default_factory=next_sort_key)
    clock: SystemClock = field(default_factory=SystemClock, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_common(self)
        _check_flag("prefer_utc", self.prefer_utc)
        _check_width("precision", self.precision)

    @property
    def shows_local_time(self) -> bool:
        return self.clock.has_local_time and not self.prefer_utc

    def display_label(self) -> str:
        if self.label:
            return self.label
        return constants.LABEL_CLOCK if self.shows_local_time else constants.LABEL_CLOCK_UTC

    def update_value(self, time: Time) -> Optional[HMS]:
        # Engine time is irrelevant here; the system clock is read directly.
        if self.shows_local_time:
            return self.clock.local_hms()
        return self.clock.utc_hms()

    def format_value(self, value: HMS) -> str:
        h, m, s, nanos = value
        return format_pretty_time_hms(self.precision, h, m, s, nanos)
