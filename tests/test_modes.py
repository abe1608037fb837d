import pytest

from trackgraph.tracking.modes import (
    TRACKING_MODES,
    ModeTraits,
    TrackingMode,
    classify,
    normalize_mode,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("hover", ModeTraits(is_hover_kind=True)),
        ("snap-first", ModeTraits(is_hover_kind=True, is_snap_first_kind=True)),
        ("snap-last", ModeTraits(is_hover_kind=True, is_snap_last_kind=True)),
        ("selected-hover", ModeTraits(is_hover_kind=True, requires_selection=True)),
        (
            "selected-snap-first",
            ModeTraits(is_hover_kind=True, is_snap_first_kind=True, requires_selection=True),
        ),
        (
            "selected-snap-last",
            ModeTraits(is_hover_kind=True, is_snap_last_kind=True, requires_selection=True),
        ),
        ("none", ModeTraits()),
    ],
)
def test_classify_known_modes(mode, expected):
    assert classify(mode) == expected


@pytest.mark.parametrize("mode", ["", "HOVER", "snap", "selected", None, 3])
def test_unrecognized_modes_classify_as_none(mode):
    assert classify(mode) == classify(TrackingMode.NONE)
    assert normalize_mode(mode) == TrackingMode.NONE


def test_normalize_keeps_known_modes():
    for mode in TRACKING_MODES:
        assert normalize_mode(mode) == mode


def test_allows_hover_respects_selection_gate():
    assert classify("hover").allows_hover(selected=False)
    assert not classify("selected-hover").allows_hover(selected=False)
    assert classify("selected-hover").allows_hover(selected=True)
    assert not classify("none").allows_hover(selected=True)
