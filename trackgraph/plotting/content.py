"""Chart content that turns pointer positions into hover events."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from ..tracking.contexts import HoverEvent, VisibleDataContext
from ..tracking.notifier import Notifier
from .series import SeriesData


class GraphContent:
    """Content source for tracked graphics.

    Resolves the nearest data point for a pointer position and emits
    ``didHoverChange``, ``didHoverEnd`` and ``didVisibleDataChange``.
    Positions are in data coordinates; mapping from screen pixels happens
    upstream.
    """

    def __init__(
        self,
        series: Optional[SeriesData] = None,
        *,
        graph: Any = None,
        snap_distance: Optional[float] = None,
    ):
        """Initialize the content source.

        Args:
            series: Series used to resolve hover points
            graph: Graph context attached to emitted events
            snap_distance: Largest x distance at which a point is still
                resolved (None resolves the nearest point at any distance)
        """
        self.series = series
        self.graph = graph
        self.snap_distance = snap_distance
        self.x_domain: Tuple[Optional[float], Optional[float]] = (None, None)
        self._notifier = Notifier()

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self._notifier.on(event, handler)

    def off(self, event: str, handler: Callable[[Any], None]) -> None:
        self._notifier.off(event, handler)

    def hover(self, mouse_x: float, mouse_y: float) -> HoverEvent:
        """Report the pointer at (mouse_x, mouse_y) and emit ``didHoverChange``."""
        point = None
        if self.series is not None:
            point = self.series.nearest(mouse_x, max_distance=self.snap_distance)

        event = HoverEvent(
            mouse_x=mouse_x,
            mouse_y=mouse_y,
            source=self,
            graph=self.graph,
            data_point=point,
        )
        self._notifier.trigger("didHoverChange", event)
        return event

    def hover_end(self, original_event: Any = None) -> None:
        """Report that the pointer left the content."""
        self._notifier.trigger("didHoverEnd", original_event)

    def set_series(self, series: Optional[SeriesData]) -> None:
        """Replace the series and re-announce the visible window."""
        self.series = series
        self._announce_visible_data()

    def set_x_domain(self, x_min: Optional[float], x_max: Optional[float]) -> None:
        """Change the visible x range and emit ``didVisibleDataChange``.

        Passing None for both bounds shows the whole series.
        """
        self.x_domain = (x_min, x_max)
        self._announce_visible_data()

    def visible_data(self) -> VisibleDataContext:
        """Return the first and last visible points for the current domain."""
        if self.series is None or len(self.series) == 0:
            return VisibleDataContext()

        x_min, x_max = self.x_domain
        series_min, series_max = self.series.x_range()
        first, last = self.series.visible_window(
            series_min if x_min is None else x_min,
            series_max if x_max is None else x_max,
        )
        return VisibleDataContext(first_visible=first, last_visible=last)

    def _announce_visible_data(self) -> None:
        context = self.visible_data()
        print(
            f"[Content] Visible window {self.x_domain}: "
            f"first={context.first_visible}, last={context.last_visible}"
        )
        self._notifier.trigger("didVisibleDataChange", context)
