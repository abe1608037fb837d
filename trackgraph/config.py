"""Default settings for chart data-point tracking."""

from __future__ import annotations

from typing import Any, Callable, Optional

# Tracking mode used when a graphic does not configure one
DEFAULT_TRACKING_MODE = "none"

# Radius of the tracking dot, in points
DEFAULT_TRACKING_DOT_RADIUS = 2.5

# Hover-move diagnostics are printed once every N events
HOVER_LOG_INTERVAL = 50

# Column names SeriesData reads when none are given
DEFAULT_X_COLUMN = "x"
DEFAULT_Y_COLUMN = "y"


class TrackingOptions:
    """Configuration options for a tracked graphic."""

    def __init__(
        self,
        *,
        # Behavior
        tracking_mode: str = DEFAULT_TRACKING_MODE,
        selected: bool = False,
        tracking_dot_radius: float = DEFAULT_TRACKING_DOT_RADIUS,

        # Named actions (None disables forwarding of that event)
        hover_change: Optional[str] = None,
        hover_end: Optional[str] = None,
        did_track: Optional[str] = None,
        will_track: Optional[str] = None,
        action_handler: Optional[Callable[[str, Any], None]] = None,
    ):
        """Initialize tracking options.

        Args:
            tracking_mode: One of the TrackingMode values
            selected: Initial state of the selection gate
            tracking_dot_radius: Radius of the tracking dot
            hover_change: Action name sent when the hovered point changes
            hover_end: Action name sent when hovering stops
            did_track: Action name sent after the tracked point changes
            will_track: Action name sent before the tracked point changes
            action_handler: Callable receiving (action_name, payload)
        """
        self.tracking_mode = tracking_mode
        self.selected = selected
        self.tracking_dot_radius = tracking_dot_radius
        self.hover_change = hover_change
        self.hover_end = hover_end
        self.did_track = did_track
        self.will_track = will_track
        self.action_handler = action_handler

    def action_names(self) -> dict:
        """Map each forwarded event to its configured action name."""
        return {
            "hoverChange": self.hover_change,
            "hoverEnd": self.hover_end,
            "didTrack": self.did_track,
            "willTrack": self.will_track,
        }
