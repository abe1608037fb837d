"""Tracking mode values and their behavioral categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TrackingMode:
    """String constants for the supported tracking modes."""

    NONE = "none"
    HOVER = "hover"
    SNAP_LAST = "snap-last"
    SNAP_FIRST = "snap-first"
    SELECTED_HOVER = "selected-hover"
    SELECTED_SNAP_LAST = "selected-snap-last"
    SELECTED_SNAP_FIRST = "selected-snap-first"


TRACKING_MODES = (
    TrackingMode.NONE,
    TrackingMode.HOVER,
    TrackingMode.SNAP_LAST,
    TrackingMode.SNAP_FIRST,
    TrackingMode.SELECTED_HOVER,
    TrackingMode.SELECTED_SNAP_LAST,
    TrackingMode.SELECTED_SNAP_FIRST,
)


@dataclass(frozen=True)
class ModeTraits:
    """Behavioral flags derived from a tracking mode."""

    is_hover_kind: bool = False
    is_snap_first_kind: bool = False
    is_snap_last_kind: bool = False
    requires_selection: bool = False

    def allows_hover(self, selected: bool) -> bool:
        """Whether hover data may be tracked given the selection state."""
        return self.is_hover_kind and (not self.requires_selection or bool(selected))


_NO_TRACKING = ModeTraits()

_TRAITS = {
    TrackingMode.HOVER: ModeTraits(is_hover_kind=True),
    TrackingMode.SNAP_FIRST: ModeTraits(is_hover_kind=True, is_snap_first_kind=True),
    TrackingMode.SNAP_LAST: ModeTraits(is_hover_kind=True, is_snap_last_kind=True),
    TrackingMode.SELECTED_HOVER: ModeTraits(is_hover_kind=True, requires_selection=True),
    TrackingMode.SELECTED_SNAP_FIRST: ModeTraits(
        is_hover_kind=True, is_snap_first_kind=True, requires_selection=True
    ),
    TrackingMode.SELECTED_SNAP_LAST: ModeTraits(
        is_hover_kind=True, is_snap_last_kind=True, requires_selection=True
    ),
}


def classify(mode: Any) -> ModeTraits:
    """Map a tracking mode to its behavioral category.

    Unrecognized values (including None) classify as ``none``.
    """
    if not isinstance(mode, str):
        return _NO_TRACKING
    return _TRAITS.get(mode, _NO_TRACKING)


def is_known_mode(mode: Any) -> bool:
    return isinstance(mode, str) and mode in TRACKING_MODES


def normalize_mode(mode: Any) -> str:
    """Return ``mode`` if it is a known tracking mode, otherwise ``none``."""
    if is_known_mode(mode):
        return mode
    return TrackingMode.NONE
