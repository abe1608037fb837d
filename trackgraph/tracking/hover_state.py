"""Hover status and the most recent hover-sourced data point."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..config import HOVER_LOG_INTERVAL
from .contexts import DataPoint, HoverContext, HoverEndContext, HoverEvent
from .notifier import Notifier


class HoverStateTracker:
    """Records hover start/stop and gates which hover points may be tracked.

    ``is_hovered`` is always updated so snap fallbacks know when hovering
    stops, but ``hover_data`` only takes a new point when ``allow_hover``
    returns True for the current mode and selection.
    """

    def __init__(
        self,
        notifier: Notifier,
        allow_hover: Callable[[], bool],
        source: Any = None,
        graph: Any = None,
    ):
        """Initialize the hover state tracker.

        Args:
            notifier: Notifier used for hover notifications and actions
            allow_hover: Returns True when hover points may update hover_data
            source: Graphic reported as the source of notifications
            graph: Graph context reported with notifications
        """
        self.notifier = notifier
        self.allow_hover = allow_hover
        self.source = source
        self.graph = graph

        self.is_hovered = False
        self.hover_data: Optional[DataPoint] = None

        # Called after each state mutation, before notifications go out
        self.on_state_changed: Optional[Callable[[], None]] = None

        self._hover_call_count = 0

    def on_hover_change(self, event: HoverEvent) -> Optional[DataPoint]:
        """Handle pointer movement over the content.

        Args:
            event: Hover event with the content's resolved data point

        Returns:
            The data point resolved for this event (None if none was found)
        """
        point = getattr(event, "data_point", None)

        self._hover_call_count += 1
        if self._hover_call_count % HOVER_LOG_INTERVAL == 1:
            print(f"[Hover] Pointer at ({event.mouse_x}, {event.mouse_y}) -> {point}")

        changed = False
        if not self.is_hovered:
            self.is_hovered = True
            changed = True

        if self.allow_hover() and point is not self.hover_data:
            self.hover_data = point
            changed = True

        if changed and self.on_state_changed:
            self.on_state_changed()

        context = HoverContext(
            mouse_x=event.mouse_x,
            mouse_y=event.mouse_y,
            source=self.source,
            graph=self.graph,
        )
        self.notifier.trigger("hoverChange", event)
        self.notifier.trigger("didHoverChange", context)
        self.notifier.send_action("hoverChange", context)
        return point

    def on_hover_end(self, event: Any = None) -> None:
        """Handle the pointer leaving the content.

        Args:
            event: The content's hover end event, passed through as original_event
        """
        changed = self.hover_data is not None or self.is_hovered
        self.hover_data = None
        if self.is_hovered:
            self.is_hovered = False

        if changed:
            print(f"[Hover] Ended after {self._hover_call_count} hover events")
            self._hover_call_count = 0
            if self.on_state_changed:
                self.on_state_changed()

        context = HoverEndContext(original_event=event, source=self.source, graph=self.graph)
        self.notifier.trigger("hoverEnd", context)
        self.notifier.trigger("didHoverEnd", context)
        self.notifier.send_action("hoverEnd", context)

    def reset(self) -> None:
        """Forget hover state without notifying anyone."""
        self.is_hovered = False
        self.hover_data = None
        self._hover_call_count = 0
