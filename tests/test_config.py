"""Tests for configuration validation and message catalogs."""

import math

import pytest

from sketchgrid.config import CurveConfig, GridConfig, InputMode, SessionSettings
from sketchgrid.geometry import CellAddress
from sketchgrid.messages import CATALOGS, cell_label, status


class TestGridConfig:
    def test_defaults(self):
        grid = GridConfig()
        assert grid.as_tuple() == (20, 20, 25.0)
        assert grid.width == 500.0
        assert grid.height == 500.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rows": 0},
            {"cols": -1},
            {"rows": 2.5},
            {"rows": True},
            {"cols": False},
            {"cell_size": 0},
            {"cell_size": math.inf},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GridConfig(**kwargs)

    def test_contains(self):
        grid = GridConfig(rows=2, cols=3, cell_size=1)
        assert grid.contains(CellAddress(1, 2))
        assert not grid.contains(CellAddress(2, 0))
        assert not grid.contains(CellAddress(0, -1))
        assert isinstance(grid.cell_size, float)


class TestCurveConfig:
    def test_alpha_bounds(self):
        assert CurveConfig(alpha=0).alpha == 0.0
        assert CurveConfig(alpha=1).alpha == 1.0
        with pytest.raises(ValueError):
            CurveConfig(alpha=1.5)
        with pytest.raises(ValueError):
            CurveConfig(alpha=-0.1)

    def test_precision(self):
        assert CurveConfig(precision=None).precision is None
        with pytest.raises(ValueError):
            CurveConfig(precision=-1)


class TestSessionSettings:
    def test_language_must_exist(self):
        assert SessionSettings(language="es").language == "es"
        with pytest.raises(ValueError):
            SessionSettings(language="xx")

    def test_mode_coerced(self):
        assert SessionSettings(initial_mode="continuous").initial_mode is InputMode.CONTINUOUS_PAINT


class TestMessages:
    def test_catalogs_share_keys(self):
        keys = {lang: set(catalog) for lang, catalog in CATALOGS.items()}
        assert keys["en"] == keys["es"]

    def test_cell_label_is_one_based(self):
        assert cell_label(CellAddress(0, 0)) == "Row 1, column 1"
        assert cell_label(CellAddress(4, 9), "es") == "Fila 5, columna 10"

    def test_status(self):
        assert status("canvas_reset", "es") == "Dibujo borrado."
        assert status("stroke_finished", count=3) == "Stroke finished, 3 points."

    def test_unknown_language_or_key(self):
        with pytest.raises(ValueError):
            status("canvas_reset", "fr")
        with pytest.raises(KeyError):
            status("nope")

    def test_spanish_session_announcements(self, grid):
        from sketchgrid.session import DrawingSession
        from sketchgrid.sinks import RecordingSink

        sink = RecordingSink()
        session = DrawingSession(settings=SessionSettings(grid=grid, language="es"), sink=sink)
        session.builder.start_stroke(CellAddress(1, 2))
        assert sink.announcements == ["Trazo iniciado. Fila 2, columna 3."]
