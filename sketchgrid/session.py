"""Explicit drawing session state.

A :class:`DrawingSession` bundles everything a drawing surface needs to keep
between events: the stroke builder (painted set, history, active stroke), the
keyboard cursor and the current input mode.  Nothing lives in module globals,
so several sessions can coexist (one per browser tab in the front-end).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import InputMode, SessionSettings
from .geometry import CellAddress, fit_smooth_curve, to_path_data
from .sinks.base import NullSink
from .strokes import CellOutOfRangeError, Stroke, StrokeBuilder, StrokeState


@dataclass
class DrawingSession:
    settings: SessionSettings = field(default_factory=SessionSettings)
    sink: NullSink = field(default_factory=NullSink)

    def __post_init__(self) -> None:
        self.builder = StrokeBuilder(self.settings.grid, sink=self.sink, language=self.settings.language)
        self.cursor = CellAddress(0, 0)
        self.mode = self.settings.initial_mode
        if self.continuous:
            # Painting starts under the cursor as if the mode had just been switched on.
            self.builder.start_stroke(self.cursor)

    # ------------------------------------------------------------------
    @property
    def grid(self):
        return self.settings.grid

    @property
    def language(self) -> str:
        return self.settings.language

    @property
    def state(self) -> StrokeState:
        return self.builder.state

    @property
    def painted(self):
        return self.builder.painted

    @property
    def strokes(self) -> List[Stroke]:
        return self.builder.history

    @property
    def continuous(self) -> bool:
        return self.mode is InputMode.CONTINUOUS_PAINT

    def set_cursor(self, cell: CellAddress) -> None:
        if not self.grid.contains(cell):
            raise CellOutOfRangeError(f"Cursor cell ({cell.row}, {cell.col}) is outside the grid")
        self.cursor = cell

    def reset(self) -> None:
        """Clear strokes and paint.  Cursor and mode are kept."""
        self.builder.reset()

    # ------------------------------------------------------------------
    def paths(self, alpha: Optional[float] = None, precision: Optional[int] = None) -> List[str]:
        """Path data for every renderable completed stroke."""
        curve = self.settings.curve
        alpha = curve.alpha if alpha is None else alpha
        precision = curve.precision if precision is None else precision
        return [
            to_path_data(fit_smooth_curve(stroke.points, alpha), precision)
            for stroke in self.builder.history
            if stroke.renderable
        ]

    def active_path(self, alpha: Optional[float] = None, precision: Optional[int] = None) -> str:
        active = self.builder.active
        if active is None:
            return ""
        curve = self.settings.curve
        return to_path_data(
            fit_smooth_curve(active.points, curve.alpha if alpha is None else alpha),
            curve.precision if precision is None else precision,
        )

    def snapshot(self) -> Dict[str, Any]:
        """Plain data view used by renderers and the controller summary."""
        active = self.builder.active
        return {
            "state": self.state.value,
            "mode": self.mode.value,
            "cursor": [self.cursor.row, self.cursor.col],
            "painted": sorted([c.row, c.col] for c in self.builder.painted),
            "strokes": [s.to_dict() for s in self.builder.history],
            "active": None if active is None else active.freeze().to_dict(),
        }


__all__ = ["DrawingSession"]
