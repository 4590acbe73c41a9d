"""Pretty-printing helpers for perf UI values.

Fixed-width decimal numbers and HH:MM:SS time strings. The overlay
redraws every refresh, so output widths are kept stable from one tick
to the next.
"""

from __future__ import annotations

import math
from decimal import ROUND_DOWN, Context, Decimal

NANOS_PER_SECOND: int = 1_000_000_000


def format_pretty_float(digits: int, precision: int, value: float) -> str:
    """Format a float with a zero-padded integer part and a fixed fraction.

    The fractional part is truncated, not rounded, so a value never
    displays as larger than it is (``123.4567`` → ``"00123.456"``).

    Args:
        digits: Minimum width of the integer part (zero-padded).
        precision: Exact number of fractional digits. ``0`` omits the
            decimal point.
        value: The number to format. Negative values get a leading ``-``.

    Returns:
        The formatted string.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() is the shortest string that round-trips, so 0.29 stays 0.29
    # instead of becoming 0.28999…
    ctx = Context(prec=400 + precision)
    exact = Decimal(repr(value)).quantize(
        Decimal(1).scaleb(-precision), rounding=ROUND_DOWN, context=ctx,
    )
    sign = "-" if exact < 0 else ""
    int_part, _, frac_part = format(abs(exact), "f").partition(".")

    text = sign + int_part.zfill(digits)
    if precision > 0:
        text += "." + frac_part
    return text


def format_pretty_time_hms(precision: int, h: int, m: int, s: int, nanos: int) -> str:
    """Format time components as ``HH:MM:SS`` with an optional fraction.

    Args:
        precision: Number of fractional-second digits taken from *nanos*.
            Digits beyond the nine available are zero-filled.
        h: Hours (not wrapped; ``100`` renders as ``"100"``).
        m: Minutes.
        s: Seconds.
        nanos: Sub-second part in nanoseconds.
    """
    text = f"{h:02d}:{m:02d}:{s:02d}"
    if precision > 0:
        frac = f"{nanos:09d}"[:precision].ljust(precision, "0")
        text += "." + frac
    return text


def format_pretty_time(precision: int, seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS[.fff]``.

    Hours are not wrapped at 24. Negative durations are rendered with a
    leading ``-`` (``-2.5`` → ``"-00:00:02"``).
    """
    sign = "-" if seconds < 0 else ""
    total_ns = round(abs(seconds) * NANOS_PER_SECOND)
    secs, nanos = divmod(total_ns, NANOS_PER_SECOND)
    h, rem = divmod(secs, 3600)
    m, s = divmod(rem, 60)
    return sign + format_pretty_time_hms(precision, h, m, s, nanos)
