"""Tests for DrawingSession and end-to-end drawing flows."""

import pytest

from sketchgrid.config import CurveConfig, GridConfig, InputMode, SessionSettings
from sketchgrid.dispatcher import CursorMove, InputDispatcher, ToggleMode
from sketchgrid.geometry import CellAddress, Point, fit_smooth_curve, to_path_data
from sketchgrid.session import DrawingSession
from sketchgrid.sinks import RecordingSink
from sketchgrid.strokes import CellOutOfRangeError, StrokeState


class TestDrawingSession:
    def test_initial_state(self, session):
        assert session.state is StrokeState.IDLE
        assert session.cursor == CellAddress(0, 0)
        assert session.mode is InputMode.DIRECT_ACTIVATION
        assert session.painted == set()
        assert session.strokes == []

    def test_initial_mode_from_settings(self, grid):
        session = DrawingSession(settings=SessionSettings(grid=grid, initial_mode=InputMode.CONTINUOUS_PAINT))
        assert session.continuous
        assert session.state is StrokeState.ACTIVE
        assert session.builder.active.cells == [CellAddress(0, 0)]

    def test_continuous_start_keeps_cursor_cell(self, grid):
        sink = RecordingSink()
        session = DrawingSession(
            settings=SessionSettings(grid=grid, initial_mode=InputMode.CONTINUOUS_PAINT), sink=sink
        )
        dispatcher = InputDispatcher(session)
        dispatcher.dispatch(CursorMove(0, 1))
        dispatcher.dispatch(CursorMove(0, 1))

        assert session.builder.active.points == [Point(5, 5), Point(15, 5), Point(25, 5)]
        assert sink.painted == [CellAddress(0, 0), CellAddress(0, 1), CellAddress(0, 2)]
        assert sink.announcements[0] == "Stroke started. Row 1, column 1."

    def test_set_cursor_rejects_out_of_range(self, session):
        with pytest.raises(CellOutOfRangeError):
            session.set_cursor(CellAddress(-1, 0))
        assert session.cursor == CellAddress(0, 0)

    def test_paths_skip_unrenderable_strokes(self, session):
        builder = session.builder
        builder.start_stroke(CellAddress(0, 0))
        builder.finish_stroke()
        builder.start_stroke(CellAddress(0, 0))
        builder.extend_stroke(CellAddress(0, 1))
        builder.finish_stroke()
        paths = session.paths()
        assert len(paths) == 1
        assert paths[0].startswith("M 5 5 C")

    def test_paths_refit_without_touching_state(self, session):
        builder = session.builder
        for cell in [(0, 0), (0, 3), (3, 3)]:
            if builder.is_active:
                builder.extend_stroke(CellAddress(*cell))
            else:
                builder.start_stroke(CellAddress(*cell))
        builder.finish_stroke()
        before = session.snapshot()
        uniform = session.paths(alpha=0.0)
        chordal = session.paths(alpha=1.0)
        assert uniform != chordal
        assert session.paths(alpha=0.0) == uniform
        assert session.snapshot() == before

    def test_active_path(self, session):
        assert session.active_path() == ""
        session.builder.start_stroke(CellAddress(0, 0))
        assert session.active_path() == ""
        session.builder.extend_stroke(CellAddress(1, 0))
        expected = to_path_data(fit_smooth_curve([Point(5, 5), Point(5, 15)], 0.5), 2)
        assert session.active_path() == expected

    def test_snapshot(self, session):
        session.builder.start_stroke(CellAddress(1, 0))
        session.builder.extend_stroke(CellAddress(0, 0))
        snap = session.snapshot()
        assert snap["state"] == "active"
        assert snap["mode"] == "direct"
        assert snap["painted"] == [[0, 0], [1, 0]]
        assert snap["active"]["cells"] == [[1, 0], [0, 0]]
        assert snap["strokes"] == []


class TestEndToEnd:
    """End-to-end behaviour on a 4x4 grid with 10 px cells."""

    def test_two_cell_stroke(self, session):
        builder = session.builder
        builder.start_stroke(CellAddress(0, 0))
        builder.extend_stroke(CellAddress(0, 1))
        builder.finish_stroke()
        assert [s.points for s in session.strokes] == [(Point(5, 5), Point(15, 5))]
        assert session.painted == {CellAddress(0, 0), CellAddress(0, 1)}
        assert session.state is StrokeState.IDLE

    def test_continuous_paint_cursor_walk(self, dispatcher, session, sink):
        dispatcher.dispatch(ToggleMode(InputMode.CONTINUOUS_PAINT))
        dispatcher.dispatch(CursorMove(0, 1))
        dispatcher.dispatch(CursorMove(0, 1))
        assert len(session.builder.active.points) == 3
        assert len(sink.painted) == 3
        assert session.strokes == []

    def test_collinear_curve_is_straight(self):
        commands = fit_smooth_curve([Point(0, 0), Point(10, 0), Point(20, 0)], 0.5)
        for cmd in commands[1:]:
            assert (cmd.c1.y, cmd.c2.y, cmd.end.y) == (0.0, 0.0, 0.0)

    def test_paint_off_finishes_without_restart(self, dispatcher, session, sink):
        dispatcher.dispatch(ToggleMode(InputMode.CONTINUOUS_PAINT))
        dispatcher.dispatch(CursorMove(1, 0))
        starts_before = sum(m.startswith("Stroke started") for m in sink.announcements)
        dispatcher.dispatch(ToggleMode(InputMode.DIRECT_ACTIVATION))
        starts_after = sum(m.startswith("Stroke started") for m in sink.announcements)
        assert starts_after == starts_before
        assert len(sink.strokes) == 1
        assert session.state is StrokeState.IDLE

    def test_reset_after_long_history(self):
        sink = RecordingSink()
        session = DrawingSession(
            settings=SessionSettings(grid=GridConfig(rows=6, cols=6, cell_size=4.0), curve=CurveConfig(alpha=1.0)),
            sink=sink,
        )
        dispatcher = InputDispatcher(session)
        dispatcher.dispatch(ToggleMode(InputMode.CONTINUOUS_PAINT))
        for _ in range(20):
            dispatcher.dispatch(CursorMove(1, 2))
        dispatcher.dispatch(ToggleMode(InputMode.DIRECT_ACTIVATION))
        dispatcher.dispatch(ToggleMode(InputMode.CONTINUOUS_PAINT))
        session.reset()
        assert session.painted == set()
        assert session.strokes == []
        assert session.state is StrokeState.IDLE
