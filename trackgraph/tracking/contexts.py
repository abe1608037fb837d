"""Value types passed between content sources, the tracker and listeners."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class DataPoint:
    """A rendered data point. Never mutated by the tracking code."""

    x: Any
    y: Any
    data: Any = None


@dataclass
class HoverEvent:
    """Pointer movement over chart content.

    ``data_point`` is the content source's nearest-point resolution for
    the pointer position (None when nothing is near).
    """

    mouse_x: float
    mouse_y: float
    source: Any = None
    graph: Any = None
    data_point: Optional[DataPoint] = None


@dataclass
class HoverContext:
    """Payload of ``didHoverChange`` and the ``hoverChange`` action."""

    mouse_x: float
    mouse_y: float
    source: Any = None
    graph: Any = None


@dataclass
class HoverEndContext:
    """Payload of ``didHoverEnd`` and the ``hoverEnd`` action."""

    original_event: Any = None
    source: Any = None
    graph: Any = None


@dataclass
class TrackPayload:
    """Payload of ``willTrack`` / ``didTrack``."""

    x: Any = None
    y: Any = None
    data: Any = None
    source: Any = None
    graph: Any = None

    @classmethod
    def from_point(cls, point: Optional[DataPoint], source: Any = None, graph: Any = None) -> "TrackPayload":
        if point is None:
            return cls(source=source, graph=graph)
        return cls(x=point.x, y=point.y, data=point.data, source=source, graph=graph)


@dataclass
class VisibleDataContext:
    """Payload of a content source's ``didVisibleDataChange`` event."""

    first_visible: Optional[DataPoint] = None
    last_visible: Optional[DataPoint] = None


def is_finite_number(value: Any) -> bool:
    """True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)
