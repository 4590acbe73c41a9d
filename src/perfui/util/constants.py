"""Perf UI constants — labels, defaults, timing.

Magic strings and numbers shared by entries, loaders and the loop.
"""

# -- Labels --------------------------------------------------------------

LABEL_RUNNING_TIME: str = "Running Time"
"""Default label of the running-time entry."""

LABEL_CLOCK: str = "Clock"
"""Default label of the clock entry when showing local time."""

LABEL_CLOCK_UTC: str = "Clock (UTC)"
"""Default label of the clock entry when showing UTC."""

UNIT_SECONDS: str = " s"
"""Suffix appended to decimal-seconds values."""

# -- Entry defaults ------------------------------------------------------

RUNNING_TIME_DIGITS: int = 5
RUNNING_TIME_PRECISION: int = 3
CLOCK_PRECISION: int = 0

MAX_DIGITS: int = 255
"""Upper bound for digit/precision settings."""

# -- Timing --------------------------------------------------------------

REFRESH_INTERVAL_MS: float = 250.0
"""Default interval between overlay refreshes in milliseconds."""

LABEL_WIDTH: int = 16
"""Default width of the label column in the text overlay."""
