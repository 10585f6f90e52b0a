"""Input normalisation.

Keyboard cursor stepping, assistive focus traversal, direct cell activation and
pointer drags all arrive as :data:`Event` values and leave as at most one
stroke builder operation.
Events are handled synchronously in arrival order; nothing is queued.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import InputMode
from .geometry import CellAddress, Point, cell_at
from .messages import status
from .session import DrawingSession

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class ActivationKind(str, Enum):
    """``SELECT`` covers click, double tap and space; ``ENTER`` toggles."""

    SELECT = "select"
    ENTER = "enter"


@dataclass(frozen=True)
class CursorMove:
    dr: int
    dc: int


@dataclass(frozen=True)
class Focus:
    """Focus landed on ``cell`` through assistive traversal (Tab, screen reader)."""

    cell: CellAddress


@dataclass(frozen=True)
class Activate:
    """Activate ``cell`` or, when omitted, the cell under the cursor."""

    cell: Optional[CellAddress] = None
    kind: ActivationKind = ActivationKind.SELECT


@dataclass(frozen=True)
class DragStart:
    point: Point


@dataclass(frozen=True)
class DragMove:
    point: Point


@dataclass(frozen=True)
class DragEnd:
    pass


@dataclass(frozen=True)
class ToggleMode:
    """Switch input mode; ``mode=None`` flips between the two modes."""

    mode: Optional[InputMode] = None


@dataclass(frozen=True)
class Reset:
    pass


Event = Union[CursorMove, Focus, Activate, DragStart, DragMove, DragEnd, ToggleMode, Reset]


class Operation(str, Enum):
    """Stroke builder operation triggered by an event."""

    NONE = "none"
    START = "start"
    EXTEND = "extend"
    FINISH = "finish"
    RESET = "reset"


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class InputDispatcher:
    """Single entry point that turns events into stroke operations."""

    def __init__(self, session: DrawingSession) -> None:
        self.session = session
        self._dragging = False

    @property
    def dragging(self) -> bool:
        return self._dragging

    def dispatch(self, event: Event) -> Operation:
        logger.debug("dispatch %r", event)
        if isinstance(event, CursorMove):
            return self._cursor_move(event)
        if isinstance(event, Focus):
            return self._focus(event)
        if isinstance(event, Activate):
            return self._activate(event)
        if isinstance(event, DragStart):
            return self._drag_start(event)
        if isinstance(event, DragMove):
            return self._drag_move(event)
        if isinstance(event, DragEnd):
            return self._drag_end()
        if isinstance(event, ToggleMode):
            return self._toggle_mode(event)
        if isinstance(event, Reset):
            return self._reset()
        raise TypeError(f"Unsupported event: {type(event)!r}")

    # ------------------------------------------------------------------
    def _start_or_extend(self, cell: CellAddress, point: Optional[Point] = None) -> Operation:
        builder = self.session.builder
        if builder.is_active:
            builder.extend_stroke(cell, point)
            return Operation.EXTEND
        builder.start_stroke(cell, point)
        return Operation.START

    def _finish(self) -> Operation:
        if self.session.builder.finish_stroke() is None:
            return Operation.NONE
        return Operation.FINISH

    def _cursor_move(self, event: CursorMove) -> Operation:
        session = self.session
        grid = session.grid
        cursor = CellAddress(
            (session.cursor.row + event.dr) % grid.rows,
            (session.cursor.col + event.dc) % grid.cols,
        )
        session.set_cursor(cursor)
        session.sink.on_focus_change(cursor)
        if session.continuous:
            return self._start_or_extend(cursor)
        return Operation.NONE

    def _focus(self, event: Focus) -> Operation:
        session = self.session
        if event.cell == session.cursor:
            return Operation.NONE
        session.set_cursor(event.cell)
        if session.continuous:
            return self._start_or_extend(event.cell)
        return Operation.NONE

    def _activate(self, event: Activate) -> Operation:
        session = self.session
        if event.cell is not None:
            session.set_cursor(event.cell)
        cell = session.cursor
        if event.kind is ActivationKind.ENTER and session.builder.is_active:
            return self._finish()
        return self._start_or_extend(cell)

    def _surface_cell(self, point: Point) -> Optional[CellAddress]:
        cell = cell_at(point, self.session.grid.cell_size)
        if not self.session.grid.contains(cell):
            logger.debug("Pointer sample %s outside the surface dropped", point)
            return None
        return cell

    def _drag_start(self, event: DragStart) -> Operation:
        cell = self._surface_cell(event.point)
        if cell is None:
            return Operation.NONE
        self._dragging = True
        self.session.set_cursor(cell)
        return self._start_or_extend(cell, event.point)

    def _drag_move(self, event: DragMove) -> Operation:
        if not self._dragging:
            logger.debug("Pointer move without press dropped")
            return Operation.NONE
        cell = self._surface_cell(event.point)
        if cell is None:
            return Operation.NONE
        self.session.set_cursor(cell)
        return self._start_or_extend(cell, event.point)

    def _drag_end(self) -> Operation:
        if not self._dragging:
            return Operation.NONE
        self._dragging = False
        return self._finish()

    def _toggle_mode(self, event: ToggleMode) -> Operation:
        session = self.session
        if event.mode is None:
            new_mode = InputMode.DIRECT_ACTIVATION if session.continuous else InputMode.CONTINUOUS_PAINT
        else:
            new_mode = InputMode(event.mode)
        if new_mode is session.mode:
            return Operation.NONE
        session.mode = new_mode
        logger.debug("Input mode -> %s", new_mode.value)
        builder = session.builder
        if new_mode is InputMode.DIRECT_ACTIVATION and builder.is_active:
            return self._finish()
        if new_mode is InputMode.CONTINUOUS_PAINT and not builder.is_active:
            builder.start_stroke(session.cursor)
            return Operation.START
        key = "paint_mode_on" if new_mode is InputMode.CONTINUOUS_PAINT else "paint_mode_off"
        session.sink.on_announce(status(key, session.language))
        return Operation.NONE

    def _reset(self) -> Operation:
        self._dragging = False
        self.session.reset()
        return Operation.RESET


__all__ = [
    "ActivationKind",
    "CursorMove",
    "Focus",
    "Activate",
    "DragStart",
    "DragMove",
    "DragEnd",
    "ToggleMode",
    "Reset",
    "Event",
    "Operation",
    "InputDispatcher",
]
