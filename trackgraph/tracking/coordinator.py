"""Single source of truth for the tracked data point of a graphic.

Combines hover state, the tracking mode, the selection gate and the
visible boundary points into one tracked value, and notifies listeners
before (``willTrack``) and after (``didTrack``) each change.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Callable, Optional

from ..config import TrackingOptions
from .contexts import DataPoint, TrackPayload, VisibleDataContext, is_finite_number
from .hover_state import HoverStateTracker
from .modes import ModeTraits, TrackingMode, classify, is_known_mode
from .notifier import Notifier
from .scheduler import UpdateScheduler
from .snap_policy import SnapPolicy

# Content source events the coordinator subscribes to
_CONTENT_EVENTS = ("didHoverChange", "didHoverEnd", "didVisibleDataChange")


class TrackingCoordinator:
    """Owns the tracked value and orders notifications around its changes.

    While hovering in a mode that allows it, the tracked value follows the
    hover point synchronously. Otherwise the fallback from ``SnapPolicy``
    is evaluated once at the end of the current update cycle, so several
    inputs changing together produce a single change.
    """

    def __init__(
        self,
        options: Optional[TrackingOptions] = None,
        *,
        source: Any = None,
        graph: Any = None,
        scheduler: Optional[UpdateScheduler] = None,
        snap_policy: Optional[SnapPolicy] = None,
    ):
        """Initialize the tracking coordinator.

        Args:
            options: Tracking configuration (defaults to TrackingOptions())
            source: Graphic reported as the source of notifications
            graph: Graph context reported with notifications
            scheduler: Update scheduler shared with the rest of the graph
            snap_policy: Fallback policy used while not hovering
        """
        options = options or TrackingOptions()

        self.source = source
        self.graph = graph
        self.scheduler = scheduler or UpdateScheduler()
        self.snap_policy = snap_policy or SnapPolicy()
        self.tracking_dot_radius = options.tracking_dot_radius

        self.notifier = Notifier(options.action_names(), options.action_handler)
        self.hover = HoverStateTracker(self.notifier, self._allows_hover, source=source, graph=graph)
        self.hover.on_state_changed = self._update

        self._mode = TrackingMode.NONE
        self._traits: ModeTraits = classify(self._mode)
        self._selected = bool(options.selected)
        self._first_visible: Optional[DataPoint] = None
        self._last_visible: Optional[DataPoint] = None
        self._tracked: Optional[DataPoint] = None
        self._applying = False
        self._content: Any = None
        self._content_handlers: dict = {}

        self._set_mode_value(options.tracking_mode)

    # ------------------------------------------------------------------ #
    #  Read-only state
    # ------------------------------------------------------------------ #

    @property
    def tracked_data(self) -> Optional[DataPoint]:
        return self._tracked

    @property
    def show_tracking_dot(self) -> bool:
        """True when the tracked point has finite x and y coordinates."""
        point = self._tracked
        if point is None:
            return False
        return is_finite_number(point.x) and is_finite_number(point.y)

    @property
    def tracking_mode(self) -> str:
        return self._mode

    @property
    def mode_traits(self) -> ModeTraits:
        return self._traits

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def first_visible_data(self) -> Optional[DataPoint]:
        return self._first_visible

    @property
    def last_visible_data(self) -> Optional[DataPoint]:
        return self._last_visible

    @property
    def is_hovered(self) -> bool:
        return self.hover.is_hovered

    @property
    def hover_data(self) -> Optional[DataPoint]:
        return self.hover.hover_data

    @property
    def is_should_track(self) -> bool:
        """Whether hover points are tracked under the current mode and selection."""
        return self._allows_hover()

    @property
    def content_source(self) -> Any:
        return self._content

    # ------------------------------------------------------------------ #
    #  Inputs
    # ------------------------------------------------------------------ #

    def set_mode(self, mode: str) -> None:
        """Change the tracking mode. Unknown modes behave as ``none``."""
        if self._set_mode_value(mode):
            self._update()

    def set_selected(self, selected: bool) -> None:
        selected = bool(selected)
        if selected == self._selected:
            return
        self._selected = selected
        self._update()

    def set_boundary_points(
        self,
        first_visible: Optional[DataPoint],
        last_visible: Optional[DataPoint],
    ) -> None:
        """Update the first and last points of the visible data window."""
        if first_visible is self._first_visible and last_visible is self._last_visible:
            return
        self._first_visible = first_visible
        self._last_visible = last_visible
        self._update()

    def batch(self) -> AbstractContextManager:
        """Group input changes into one update cycle.

        Example:
            with coordinator.batch():
                coordinator.set_selected(True)
                coordinator.set_boundary_points(first, last)
        """
        return self.scheduler.cycle()

    def on(self, event: str, listener: Callable[[Any], None]) -> None:
        """Subscribe to hoverChange, didHoverChange, hoverEnd, didHoverEnd, willTrack or didTrack."""
        self.notifier.on(event, listener)

    def off(self, event: str, listener: Callable[[Any], None]) -> None:
        self.notifier.off(event, listener)

    # ------------------------------------------------------------------ #
    #  Content source wiring
    # ------------------------------------------------------------------ #

    def attach_content_source(self, content: Any) -> None:
        """Subscribe to a content source's hover and visible-data events.

        Any previously attached source is detached first. Attaching also
        schedules an initial evaluation so snap modes track a boundary point
        before the first hover.
        """
        if self._content is not None:
            self._unsubscribe()

        if content is None:
            print("[Tracking] No content source to attach; hover tracking disabled")
        else:
            self._content_handlers = {
                "didHoverChange": self.hover.on_hover_change,
                "didHoverEnd": self.hover.on_hover_end,
                "didVisibleDataChange": self._on_visible_data_change,
            }
            for event in _CONTENT_EVENTS:
                content.on(event, self._content_handlers[event])
            self._content = content
            print(f"[Tracking] Attached to content source (mode: {self._mode})")

        self.scheduler.schedule_once(self, "_process_unhovered")

    def detach(self) -> None:
        """Unsubscribe from the content source and discard tracking state.

        No notifications are sent; the component is being torn down.
        """
        if self._content is not None:
            self._unsubscribe()
            print("[Tracking] Detached from content source")
        self.scheduler.cancel(self, "_process_unhovered")
        self.hover.reset()
        self._tracked = None

    def _unsubscribe(self) -> None:
        for event, handler in self._content_handlers.items():
            self._content.off(event, handler)
        self._content_handlers = {}
        self._content = None

    def _on_visible_data_change(self, context: VisibleDataContext) -> None:
        self.set_boundary_points(context.first_visible, context.last_visible)

    # ------------------------------------------------------------------ #
    #  Recomputation
    # ------------------------------------------------------------------ #

    def compute_tracked(self) -> Optional[DataPoint]:
        """Return the value the tracked point should have for the current inputs."""
        if self.hover.is_hovered and self._allows_hover():
            return self.hover.hover_data
        return self.snap_policy.resolve(
            self._mode,
            self._selected,
            self._first_visible,
            self._last_visible,
        )

    def _update(self) -> None:
        if self.hover.is_hovered and self._allows_hover():
            self._apply(self.hover.hover_data)
        else:
            self.scheduler.schedule_once(self, "_process_unhovered")

    def _process_unhovered(self) -> None:
        # State may have changed since scheduling; use the latest inputs
        self._apply(self.compute_tracked())

    def _apply(self, new: Optional[DataPoint]) -> None:
        if self._applying:
            # The outer apply re-checks the latest inputs once it finishes
            return
        self._applying = True
        try:
            # Listeners may change inputs; repeat until the value is current
            while new is not self._tracked:
                old = self._tracked
                self.before_apply(old)
                self._tracked = new
                self.after_apply(new)
                new = self.compute_tracked()
        finally:
            self._applying = False

    def before_apply(self, old: Optional[DataPoint]) -> None:
        """Send ``willTrack`` with the value about to be replaced."""
        payload = TrackPayload.from_point(old, source=self.source, graph=self.graph)
        self.notifier.trigger("willTrack", payload)
        self.notifier.send_action("willTrack", payload)

    def after_apply(self, new: Optional[DataPoint]) -> None:
        """Send ``didTrack`` with the value just applied."""
        payload = TrackPayload.from_point(new, source=self.source, graph=self.graph)
        self.notifier.trigger("didTrack", payload)
        self.notifier.send_action("didTrack", payload)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _allows_hover(self) -> bool:
        return self._traits.allows_hover(self._selected)

    def _set_mode_value(self, mode: Any) -> bool:
        """Store ``mode`` (normalized). Returns True if the stored mode changed."""
        if not is_known_mode(mode):
            print(f"[Tracking] Unknown tracking mode {mode!r}; using 'none'")
            mode = TrackingMode.NONE
        if mode == self._mode:
            return False
        print(f"[Tracking] Mode changed: {self._mode} -> {mode}")
        self._mode = mode
        self._traits = classify(mode)
        return True
