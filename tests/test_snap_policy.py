import pytest

from trackgraph.tracking import DataPoint, SnapPolicy

FIRST = DataPoint(x=0, y=1, data="first")
LAST = DataPoint(x=10, y=2, data="last")


@pytest.mark.parametrize(
    "mode, selected, expected",
    [
        ("snap-last", False, LAST),
        ("snap-last", True, LAST),
        ("snap-first", False, FIRST),
        ("selected-snap-last", True, LAST),
        ("selected-snap-last", False, None),
        ("selected-snap-first", True, FIRST),
        ("selected-snap-first", False, None),
        ("hover", True, None),
        ("selected-hover", True, None),
        ("none", True, None),
        ("bogus", True, None),
    ],
)
def test_resolve(mode, selected, expected):
    assert SnapPolicy().resolve(mode, selected, FIRST, LAST) is expected


def test_resolve_returns_missing_boundary_as_none():
    assert SnapPolicy().resolve("snap-first", False, None, LAST) is None
