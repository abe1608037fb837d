"""Fallback tracked point while the pointer is not over the content."""

from __future__ import annotations

from typing import Optional

from .contexts import DataPoint
from .modes import TrackingMode


class SnapPolicy:
    """Chooses between no point, the first visible point and the last one."""

    def resolve(
        self,
        mode: str,
        selected: bool,
        first_visible: Optional[DataPoint],
        last_visible: Optional[DataPoint],
    ) -> Optional[DataPoint]:
        """Return the point to track when not hovering.

        Args:
            mode: Current tracking mode
            selected: Whether the graphic is selected
            first_visible: First data point in the visible window
            last_visible: Last data point in the visible window

        Returns:
            ``last_visible`` for snap-last modes, ``first_visible`` for
            snap-first modes, otherwise None. Snap-last is checked first.
        """
        if mode == TrackingMode.SNAP_LAST or (selected and mode == TrackingMode.SELECTED_SNAP_LAST):
            return last_visible
        if mode == TrackingMode.SNAP_FIRST or (selected and mode == TrackingMode.SELECTED_SNAP_FIRST):
            return first_visible
        return None
