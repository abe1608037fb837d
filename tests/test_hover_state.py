from trackgraph.tracking import DataPoint, HoverStateTracker, Notifier
from trackgraph.tracking.contexts import HoverContext, HoverEndContext

from conftest import EventRecorder, hover_at


def _tracker(allowed=True, **notifier_kwargs):
    notifier = Notifier(**notifier_kwargs)
    tracker = HoverStateTracker(notifier, lambda: allowed, source="graphic", graph="graph")
    recorder = EventRecorder().listen(notifier, "hoverChange", "didHoverChange", "hoverEnd", "didHoverEnd")
    return tracker, recorder


def test_hover_change_sets_hover_data_when_allowed():
    tracker, _ = _tracker(allowed=True)
    point = DataPoint(x=1, y=2)

    result = tracker.on_hover_change(hover_at(point))

    assert result is point
    assert tracker.is_hovered
    assert tracker.hover_data is point


def test_gated_hover_still_marks_hovered():
    tracker, _ = _tracker(allowed=False)

    tracker.on_hover_change(hover_at(DataPoint(x=1, y=2)))

    assert tracker.is_hovered
    assert tracker.hover_data is None


def test_hover_change_notifies_raw_event_then_context():
    tracker, recorder = _tracker(allowed=False)
    event = hover_at(DataPoint(x=1, y=2), mouse_x=11, mouse_y=22)

    tracker.on_hover_change(event)

    assert recorder.names() == ["hoverChange", "didHoverChange"]
    assert recorder.payloads("hoverChange") == [event]
    assert recorder.payloads("didHoverChange") == [
        HoverContext(mouse_x=11, mouse_y=22, source="graphic", graph="graph")
    ]


def test_hover_end_clears_state_and_notifies():
    tracker, recorder = _tracker()
    tracker.on_hover_change(hover_at(DataPoint(x=1, y=2)))
    recorder.clear()

    tracker.on_hover_end("leave")

    assert not tracker.is_hovered
    assert tracker.hover_data is None
    expected = HoverEndContext(original_event="leave", source="graphic", graph="graph")
    assert recorder.payloads("didHoverEnd") == [expected]
    assert recorder.payloads("hoverEnd") == [expected]


def test_state_changed_callback_runs_before_notifications():
    tracker, recorder = _tracker()
    seen = []
    tracker.on_state_changed = lambda: seen.append((tracker.is_hovered, list(recorder.names())))

    tracker.on_hover_change(hover_at(DataPoint(x=1, y=2)))
    tracker.on_hover_end()

    assert seen == [(True, []), (False, ["hoverChange", "didHoverChange"])]


def test_state_changed_not_called_when_nothing_changes():
    tracker, _ = _tracker(allowed=False)
    calls = []
    tracker.on_state_changed = lambda: calls.append(1)

    tracker.on_hover_change(hover_at(DataPoint(x=1, y=2)))
    tracker.on_hover_change(hover_at(DataPoint(x=3, y=4)))
    tracker.on_hover_end()
    tracker.on_hover_end()

    assert len(calls) == 2


def test_hover_actions_forwarded_only_when_named():
    sent = []
    tracker, _ = _tracker(
        action_names={"hoverChange": "pointerMoved", "hoverEnd": None},
        action_handler=lambda name, payload: sent.append(name),
    )

    tracker.on_hover_change(hover_at(DataPoint(x=1, y=2)))
    tracker.on_hover_end()

    assert sent == ["pointerMoved"]
