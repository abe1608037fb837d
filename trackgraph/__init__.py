"""trackgraph: decides which data point a chart graphic highlights while hovered."""

from .config import TrackingOptions
from .tracking import (
    DataPoint,
    HoverEvent,
    SnapPolicy,
    TrackingCoordinator,
    TrackingMode,
    TrackPayload,
    UpdateScheduler,
    classify,
)
from .plotting import Graph, GraphContent, SeriesData, SeriesDataError, TrackedLineGraphic

__all__ = [
    "TrackingOptions",
    "DataPoint",
    "HoverEvent",
    "SnapPolicy",
    "TrackingCoordinator",
    "TrackingMode",
    "TrackPayload",
    "UpdateScheduler",
    "classify",
    "Graph",
    "GraphContent",
    "SeriesData",
    "SeriesDataError",
    "TrackedLineGraphic",
]
