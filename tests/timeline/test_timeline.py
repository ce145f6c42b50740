"""Tests for the stateful Timeline.

Why these tests exist:
- Timeline is what hosts typically hold; it must follow History semantics
- undo/redo at a boundary report False instead of raising
- max_past trimming must never touch the present or the future
"""

import logging

import pytest

from undoable import History, Timeline, TimelineSettings

LOGGER = "undoable.timeline.timeline"


@pytest.fixture
def timeline() -> Timeline[int]:
    """Timeline with values 0, 1, 2 committed in order."""
    tl = Timeline(0, TimelineSettings(max_past=None))
    tl.commit(1)
    tl.commit(2)
    return tl


def test_commit_returns_new_current(timeline: Timeline[int]) -> None:
    assert timeline.commit(3) == 3
    assert timeline.current == 3
    assert list(timeline.history.past) == [2, 1, 0]


def test_update_applies_function_to_current(timeline: Timeline[int]) -> None:
    assert timeline.update(lambda v: v * 10) == 20
    assert timeline.can_undo


def test_undo_and_redo(timeline: Timeline[int]) -> None:
    assert timeline.undo()
    assert timeline.current == 1
    assert timeline.can_redo

    assert timeline.redo()
    assert timeline.current == 2
    assert not timeline.can_redo


def test_boundaries_report_false_and_keep_state() -> None:
    tl = Timeline("only", TimelineSettings())
    before = tl.history

    assert not tl.undo()
    assert not tl.redo()
    assert tl.history is before


def test_commit_after_undo_clears_redo(timeline: Timeline[int]) -> None:
    timeline.undo()

    timeline.commit(99)

    assert not timeline.can_redo
    assert not timeline.redo()
    assert list(timeline.history.past) == [1, 0]


def test_snapshots_survive_later_operations(timeline: Timeline[int]) -> None:
    snapshot = timeline.history

    timeline.undo()
    timeline.commit(7)

    assert snapshot.current == 2
    assert list(snapshot.past) == [1, 0]


def test_max_past_trims_oldest_values() -> None:
    tl = Timeline(0, TimelineSettings(max_past=2))
    for value in range(1, 6):
        tl.commit(value)

    assert list(tl.history.past) == [4, 3]
    assert tl.current == 5


def test_max_past_trim_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    tl = Timeline(0, TimelineSettings(max_past=1))

    tl.commit(1)
    assert not caplog.records

    tl.commit(2)
    assert "Trimmed 1 past value(s) to max_past=1" in caplog.text


def test_max_past_zero_warns() -> None:
    with pytest.warns(UserWarning, match="max_past=0"):
        tl = Timeline(0, TimelineSettings(max_past=0))

    tl.commit(1)
    assert not tl.undo()


def test_max_past_zero_warning_points_at_caller() -> None:
    settings = TimelineSettings(max_past=0)

    with pytest.warns(UserWarning, match="max_past=0") as direct:
        Timeline(0, settings)
    with pytest.warns(UserWarning, match="max_past=0") as wrapped:
        Timeline.from_history(History.new(0).to(1), settings)

    assert direct[0].filename == __file__
    assert wrapped[0].filename == __file__


def test_boundary_logging_is_opt_in(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=LOGGER)

    Timeline(0, TimelineSettings(log_boundary=False)).undo()
    assert not caplog.records

    Timeline(0, TimelineSettings(log_boundary=True)).redo()
    assert "redo ignored" in caplog.text


def test_from_history_wraps_snapshot() -> None:
    h = History.new("a").to("b").back()

    tl = Timeline.from_history(h, TimelineSettings())

    assert tl.history is h
    assert tl.redo()
    assert tl.current == "b"


def test_reset_drops_past_and_future(timeline: Timeline[int]) -> None:
    timeline.undo()

    timeline.reset(42)

    assert timeline.history == History.new(42)
    assert not timeline.can_undo
    assert not timeline.can_redo


def test_repr(timeline: Timeline[int]) -> None:
    timeline.undo()

    assert repr(timeline) == "Timeline(current=1, past=1, future=1)"
