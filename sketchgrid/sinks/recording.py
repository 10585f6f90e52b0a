"""In-memory sink used for development and unit tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

from ..geometry import CellAddress
from .base import NullSink

if TYPE_CHECKING:
    from ..strokes import Stroke


@dataclass
class RecordingSink(NullSink):
    """Remembers every notification in arrival order."""

    painted: List[CellAddress] = field(default_factory=list)
    strokes: List[Stroke] = field(default_factory=list)
    announcements: List[str] = field(default_factory=list)
    focus: List[CellAddress] = field(default_factory=list)
    calls: List[Tuple[str, object]] = field(default_factory=list)

    def on_painted_change(self, cell: CellAddress) -> None:
        self.painted.append(cell)
        self.calls.append(("painted", cell))

    def on_stroke_finalized(self, stroke: Stroke) -> None:
        self.strokes.append(stroke)
        self.calls.append(("stroke", stroke))

    def on_announce(self, message: str) -> None:
        self.announcements.append(message)
        self.calls.append(("announce", message))

    def on_focus_change(self, cell: CellAddress) -> None:
        self.focus.append(cell)
        self.calls.append(("focus", cell))

    def clear(self) -> None:
        self.painted.clear()
        self.strokes.clear()
        self.announcements.clear()
        self.focus.clear()
        self.calls.clear()
