"""High level orchestration for front-ends and scripts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import InputMode, SessionSettings
from .dispatcher import (
    Activate,
    ActivationKind,
    CursorMove,
    DragEnd,
    DragMove,
    DragStart,
    Event,
    Focus,
    InputDispatcher,
    Operation,
    Reset,
    ToggleMode,
)
from .geometry import CellAddress, Point
from .rendering import SketchRenderer, ink_length
from .session import DrawingSession
from .sinks import CompositeSink, NullSink


@dataclass
class SketchController:
    """Coordinate a session, its dispatcher, sinks and the renderer."""

    settings: SessionSettings = field(default_factory=SessionSettings)

    def __post_init__(self) -> None:
        self.sinks = CompositeSink()
        self.session = DrawingSession(settings=self.settings, sink=self.sinks)
        self.dispatcher = InputDispatcher(self.session)
        self.renderer = SketchRenderer(grid=self.settings.grid, curve=self.settings.curve)

    # ------------------------------------------------------------------
    # Sinks
    # ------------------------------------------------------------------
    def add_sink(self, sink: NullSink) -> None:
        self.sinks.add(sink)

    def remove_sink(self, sink: NullSink) -> None:
        self.sinks.remove(sink)

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------
    def dispatch(self, event: Event) -> Operation:
        return self.dispatcher.dispatch(event)

    def move(self, dr: int, dc: int) -> Operation:
        return self.dispatch(CursorMove(dr, dc))

    def focus(self, cell: CellAddress) -> Operation:
        return self.dispatch(Focus(cell))

    def activate(self, cell: Optional[CellAddress] = None) -> Operation:
        return self.dispatch(Activate(cell))

    def press_enter(self) -> Operation:
        return self.dispatch(Activate(kind=ActivationKind.ENTER))

    def press(self, x: float, y: float) -> Operation:
        return self.dispatch(DragStart(Point(float(x), float(y))))

    def drag(self, x: float, y: float) -> Operation:
        return self.dispatch(DragMove(Point(float(x), float(y))))

    def release(self) -> Operation:
        return self.dispatch(DragEnd())

    def toggle_mode(self, mode: Optional[InputMode] = None) -> Operation:
        return self.dispatch(ToggleMode(mode))

    def reset(self) -> Operation:
        return self.dispatch(Reset())

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def paths(self, alpha: Optional[float] = None) -> List[str]:
        return self.session.paths(alpha)

    def svg(self, alpha: Optional[float] = None) -> str:
        return self.renderer.render_svg(self.session, alpha)

    def summary(self) -> Dict[str, Any]:
        session = self.session
        active = session.builder.active
        return {
            "state": session.state.value,
            "mode": session.mode.value,
            "cursor": [session.cursor.row, session.cursor.col],
            "painted": len(session.painted),
            "strokes": len(session.strokes),
            "active_points": 0 if active is None else len(active.points),
            "ink_length": ink_length(session.strokes, self.settings.curve.alpha),
        }


__all__ = ["SketchController"]
