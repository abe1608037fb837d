from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from trackgraph.tracking import DataPoint, HoverEvent, TrackingCoordinator
from trackgraph.config import TrackingOptions


class EventRecorder:
    """Records notifications as (event, payload) pairs in arrival order."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def listen(self, target: Any, *names: str) -> "EventRecorder":
        for name in names:
            target.on(name, lambda payload, name=name: self.events.append((name, payload)))
        return self

    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def payloads(self, name: str) -> List[Any]:
        return [payload for event, payload in self.events if event == name]

    def clear(self) -> None:
        self.events.clear()


class FakeContent:
    """Minimal content source with on/off and direct emission."""

    def __init__(self) -> None:
        self.handlers: Dict[str, List[Any]] = {}

    def on(self, event: str, handler: Any) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: Any) -> None:
        self.handlers[event].remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for handler in list(self.handlers.get(event, ())):
            handler(payload)

    def subscriber_count(self) -> int:
        return sum(len(handlers) for handlers in self.handlers.values())


def hover_at(point: DataPoint | None, mouse_x: float = 5.0, mouse_y: float = 7.0) -> HoverEvent:
    return HoverEvent(mouse_x=mouse_x, mouse_y=mouse_y, data_point=point)


TRACK_EVENTS = ("willTrack", "didTrack")


@pytest.fixture()
def first_point() -> DataPoint:
    return DataPoint(x=1, y=10, data="a")


@pytest.fixture()
def last_point() -> DataPoint:
    return DataPoint(x=9, y=90, data="z")


@pytest.fixture()
def hover_point() -> DataPoint:
    return DataPoint(x=5, y=50, data="m")


@pytest.fixture()
def make_coordinator():
    """Factory for coordinators with a recorder attached to track events."""

    def _make(mode: str = "none", selected: bool = False, **option_kwargs):
        options = TrackingOptions(tracking_mode=mode, selected=selected, **option_kwargs)
        coordinator = TrackingCoordinator(options, source="graphic", graph="graph")
        recorder = EventRecorder().listen(coordinator, *TRACK_EVENTS)
        return coordinator, recorder

    return _make
