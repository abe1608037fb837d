"""Chart-side collaborators for data-point tracking.

This package contains the pieces a chart wires around the tracking core:
- series: DataFrame-backed series with nearest-point and window lookups
- content: content source emitting hover and visible-data events
- graphic: graph context and a line graphic composing a TrackingCoordinator
"""

from .series import SeriesData, SeriesDataError
from .content import GraphContent
from .graphic import Graph, TrackedLineGraphic

__all__ = [
    "SeriesData",
    "SeriesDataError",
    "GraphContent",
    "Graph",
    "TrackedLineGraphic",
]
