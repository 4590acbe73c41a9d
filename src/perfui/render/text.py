"""Plain-text overlay renderer.

Turns refreshed rows into aligned ``label  value`` lines and writes them
to the log or a stream whenever the perf UI refreshes.
"""

from __future__ import annotations

import logging
from typing import IO, Iterable, Optional

from perfui.engine.perf_ui import Row
from perfui.util import constants
from perfui.util.events import EventBus, PerfUiRefreshed

log = logging.getLogger(__name__)


def render_rows(rows: Iterable[Row], label_width: int = constants.LABEL_WIDTH) -> list[str]:
    """Format rows as lines with a left-aligned label column.

    Labels longer than *label_width* widen the column for all rows.
    """
    rows = list(rows)
    if not rows:
        return []
    width = max(label_width, max(len(r.label) for r in rows))
    return [f"{r.label:<{width}}  {r.text}".rstrip() for r in rows]


class TextOverlay:
    """Renders every refresh as a text block.

    Args:
        event_bus: Bus to subscribe to ``PerfUiRefreshed`` on.
        label_width: Minimum label column width.
        stream: Write here instead of logging at INFO.
    """

    def __init__(
        self,
        event_bus: EventBus,
        label_width: int = constants.LABEL_WIDTH,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self._events = event_bus
        self._label_width = label_width
        self._stream = stream
        self.last_lines: list[str] = []
        event_bus.on(PerfUiRefreshed, self._on_refreshed)

    def close(self) -> None:
        """Stop listening for refreshes."""
        self._events.off(PerfUiRefreshed, self._on_refreshed)

    def _on_refreshed(self, event: PerfUiRefreshed) -> None:
        self.last_lines = render_rows(event.rows, self._label_width)
        block = "\n".join(self.last_lines)
        if self._stream is not None:
            self._stream.write(block + "\n")
            self._stream.flush()
        else:
            log.info("[tick %d]\n%s", event.tick, block)
