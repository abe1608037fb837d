"""Graph context and a line graphic that tracks a data point."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..config import TrackingOptions
from ..tracking.contexts import DataPoint
from ..tracking.coordinator import TrackingCoordinator
from ..tracking.scheduler import UpdateScheduler
from .content import GraphContent


class Graph:
    """Shared context for the graphics drawn on one chart."""

    def __init__(
        self,
        content: Optional[GraphContent] = None,
        scheduler: Optional[UpdateScheduler] = None,
    ):
        self.content = content
        self.scheduler = scheduler or UpdateScheduler()
        if content is not None and content.graph is None:
            content.graph = self

    def update(self):
        """Open an update cycle shared by every graphic on this graph."""
        return self.scheduler.cycle()


class TrackedLineGraphic:
    """A line/area graphic with a tracking dot.

    Tracking behavior lives in a TrackingCoordinator; this class only
    wires it to the graph's content and forwards the common calls.
    """

    def __init__(self, graph: Graph, options: Optional[TrackingOptions] = None, name: str = ""):
        """Initialize the graphic.

        Args:
            graph: Graph this graphic is drawn on
            options: Tracking configuration
            name: Label used in diagnostics
        """
        self.graph = graph
        self.name = name
        self.tracking = TrackingCoordinator(
            options,
            source=self,
            graph=graph,
            scheduler=graph.scheduler,
        )
        self.is_inserted = False

    def __repr__(self) -> str:
        return f"TrackedLineGraphic({self.name!r})"

    def did_insert(self) -> None:
        """Attach tracking to the graph's content once the graphic is on the chart."""
        content = self.graph.content
        with self.graph.update():
            self.tracking.attach_content_source(content)
            if content is not None:
                visible = content.visible_data()
                self.tracking.set_boundary_points(visible.first_visible, visible.last_visible)
        self.is_inserted = True
        print(f"[Graphic] {self.name or 'graphic'} inserted (mode: {self.tracking.tracking_mode})")

    def will_destroy(self) -> None:
        """Detach tracking before the graphic is removed."""
        self.tracking.detach()
        self.is_inserted = False

    @property
    def tracking_mode(self) -> str:
        return self.tracking.tracking_mode

    @tracking_mode.setter
    def tracking_mode(self, mode: str) -> None:
        self.tracking.set_mode(mode)

    @property
    def selected(self) -> bool:
        return self.tracking.selected

    @selected.setter
    def selected(self, value: bool) -> None:
        self.tracking.set_selected(value)

    @property
    def tracked_data(self) -> Optional[DataPoint]:
        return self.tracking.tracked_data

    @property
    def show_tracking_dot(self) -> bool:
        return self.tracking.show_tracking_dot

    @property
    def tracking_dot_radius(self) -> float:
        return self.tracking.tracking_dot_radius

    def on(self, event: str, listener: Callable[[Any], None]) -> None:
        self.tracking.on(event, listener)

    def off(self, event: str, listener: Callable[[Any], None]) -> None:
        self.tracking.off(event, listener)
