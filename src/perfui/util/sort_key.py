"""Sort key allocation for perf UI entries.

Entries that do not set a sort key explicitly get the next value from a
process-wide counter, so they appear in the order they were created.
Keys are never reused and are not persisted across restarts.
"""

from __future__ import annotations

import threading


class SortKeyAllocator:
    """Thread-safe, strictly increasing integer counter.

    Args:
        start: First key handed out.
    """

    def __init__(self, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start

    def next(self) -> int:
        """Return a new key, larger than every key returned before."""
        with self._lock:
            key = self._next
            self._next += 1
            return key

    @property
    def peek(self) -> int:
        """The key the next call to :meth:`next` will return."""
        return self._next


_default_allocator = SortKeyAllocator()


def next_sort_key() -> int:
    """Allocate a key from the process-wide default allocator."""
    return _default_allocator.next()
