"""Data-point tracking for chart graphics.

This package decides which data point a line or area graphic highlights:
- modes: tracking mode values and their behavioral categories
- hover_state: hover status and gated hover data
- snap_policy: fallback point while not hovering
- scheduler: end-of-cycle flushing of deferred work
- coordinator: the tracked value and its willTrack/didTrack notifications
"""

from .contexts import (
    DataPoint,
    HoverContext,
    HoverEndContext,
    HoverEvent,
    TrackPayload,
    VisibleDataContext,
)
from .coordinator import TrackingCoordinator
from .hover_state import HoverStateTracker
from .modes import TRACKING_MODES, ModeTraits, TrackingMode, classify, normalize_mode
from .notifier import Notifier
from .scheduler import UpdateScheduler
from .snap_policy import SnapPolicy

__all__ = [
    "DataPoint",
    "HoverContext",
    "HoverEndContext",
    "HoverEvent",
    "TrackPayload",
    "VisibleDataContext",
    "TrackingCoordinator",
    "HoverStateTracker",
    "TRACKING_MODES",
    "ModeTraits",
    "TrackingMode",
    "classify",
    "normalize_mode",
    "Notifier",
    "UpdateScheduler",
    "SnapPolicy",
]
