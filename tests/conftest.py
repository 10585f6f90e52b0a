"""Shared pytest fixtures for the sketchgrid test suite.

Fixtures:
    grid: 4x4 grid with 10 px cells
    sink: RecordingSink capturing every notification
    session: DrawingSession on ``grid`` reporting to ``sink``
    dispatcher: InputDispatcher bound to ``session``
    controller: SketchController with a RecordingSink attached
"""

import pytest

from sketchgrid.config import GridConfig, SessionSettings
from sketchgrid.controller import SketchController
from sketchgrid.dispatcher import InputDispatcher
from sketchgrid.session import DrawingSession
from sketchgrid.sinks import RecordingSink


@pytest.fixture
def grid():
    return GridConfig(rows=4, cols=4, cell_size=10.0)


@pytest.fixture
def settings(grid):
    return SessionSettings(grid=grid)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def session(settings, sink):
    return DrawingSession(settings=settings, sink=sink)


@pytest.fixture
def builder(session):
    return session.builder


@pytest.fixture
def dispatcher(session):
    return InputDispatcher(session)


@pytest.fixture
def controller(settings):
    ctrl = SketchController(settings=settings)
    ctrl.recorder = RecordingSink()
    ctrl.add_sink(ctrl.recorder)
    return ctrl
