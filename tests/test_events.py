"""Tests for the event bus."""

from perfui.engine.perf_ui import Row
from perfui.util.events import EntryAdded, EntryRemoved, EventBus, PerfUiRefreshed


class TestEventBus:
    def test_emit_triggers_handler(self):
        bus = EventBus()
        received = []
        bus.on(EntryAdded, lambda e: received.append(e.sort_key))
        bus.emit(EntryAdded(label="Clock", sort_key=4))
        assert received == [4]

    def test_no_cross_event(self):
        bus = EventBus()
        received = []
        bus.on(EntryAdded, lambda e: received.append("added"))
        bus.emit(EntryRemoved(label="Clock", sort_key=4))
        assert received == []

    def test_multiple_handlers(self):
        bus = EventBus()
        a, b = [], []
        bus.on(PerfUiRefreshed, lambda e: a.append(e.tick))
        bus.on(PerfUiRefreshed, lambda e: b.append(len(e.rows)))
        bus.emit(PerfUiRefreshed(tick=3, rows=(Row(1, "Clock", "01:00:00"),)))
        assert a == [3] and b == [1]

    def test_off_removes_handler(self):
        bus = EventBus()
        received = []
        handler = lambda e: received.append(1)
        bus.on(EntryRemoved, handler)
        bus.off(EntryRemoved, handler)
        bus.emit(EntryRemoved(label="Clock", sort_key=1))
        assert received == []

    def test_clear(self):
        bus = EventBus()
        received = []
        bus.on(EntryAdded, lambda e: received.append(1))
        bus.clear()
        bus.emit(EntryAdded(label="Clock", sort_key=1))
        assert received == []
