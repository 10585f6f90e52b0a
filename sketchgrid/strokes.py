"""Stroke capture state machine.

:class:`StrokeBuilder` accumulates samples into at most one active stroke,
promotes it into the immutable history on finish, and tracks every cell any
stroke has touched.  The builder has exactly two states, ``IDLE`` and
``ACTIVE``.  Starting while active or extending while idle is a programming
error in the caller and raises :class:`StrokeStateError`; finishing while idle
is tolerated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

from .config import GridConfig
from .geometry import CellAddress, Point, cell_center
from .messages import cell_label, status
from .sinks.base import NullSink

logger = logging.getLogger(__name__)


class StrokeStateError(RuntimeError):
    """Raised when a stroke operation is called in the wrong state."""


class CellOutOfRangeError(ValueError):
    """Raised when a cell address lies outside the configured grid."""


class StrokeState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class Stroke:
    """Completed stroke: ordered samples and the cells that produced them."""

    points: Tuple[Point, ...]
    cells: Tuple[CellAddress, ...]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def renderable(self) -> bool:
        return len(self.points) >= 2

    def to_dict(self) -> dict:
        return {
            "points": [[p.x, p.y] for p in self.points],
            "cells": [[c.row, c.col] for c in self.cells],
        }


@dataclass
class ActiveStroke:
    points: List[Point] = field(default_factory=list)
    cells: List[CellAddress] = field(default_factory=list)

    def append(self, cell: CellAddress, point: Point) -> None:
        self.cells.append(cell)
        self.points.append(point)

    def freeze(self) -> Stroke:
        return Stroke(points=tuple(self.points), cells=tuple(self.cells))


class StrokeBuilder:
    """Owns the painted set, the stroke history and the active stroke."""

    def __init__(
        self,
        grid: GridConfig,
        *,
        sink: Optional[NullSink] = None,
        language: str = "en",
    ) -> None:
        self.grid = grid
        self.sink = sink if sink is not None else NullSink()
        self.language = language
        self.painted: Set[CellAddress] = set()
        self.history: List[Stroke] = []
        self.active: Optional[ActiveStroke] = None

    # ------------------------------------------------------------------
    @property
    def state(self) -> StrokeState:
        return StrokeState.ACTIVE if self.active is not None else StrokeState.IDLE

    @property
    def is_active(self) -> bool:
        return self.active is not None

    # ------------------------------------------------------------------
    def start_stroke(self, cell: CellAddress, point: Optional[Point] = None) -> None:
        """Open a new stroke at ``cell``.

        ``point`` overrides the recorded sample; it defaults to the cell centre.
        """
        self._check_cell(cell)
        if self.active is not None:
            logger.warning("start_stroke(%s) while a stroke is active", cell)
            raise StrokeStateError("Cannot start a stroke while another stroke is active")
        self.active = ActiveStroke()
        self.active.append(cell, point if point is not None else self._center(cell))
        self._paint(cell)
        logger.debug("Stroke started at %s", cell)
        self._announce("stroke_started", cell=cell_label(cell, self.language))

    def extend_stroke(self, cell: CellAddress, point: Optional[Point] = None) -> None:
        self._check_cell(cell)
        if self.active is None:
            logger.warning("extend_stroke(%s) without an active stroke", cell)
            raise StrokeStateError("Cannot extend a stroke before one has been started")
        self.active.append(cell, point if point is not None else self._center(cell))
        self._paint(cell)
        logger.debug("Stroke extended to %s (%d points)", cell, len(self.active.points))
        self._announce("cell_painted", cell=cell_label(cell, self.language))

    def finish_stroke(self) -> Optional[Stroke]:
        """Move the active stroke into the history.

        Returns the completed stroke, or ``None`` when there was nothing to
        finish.
        """
        if self.active is None:
            logger.debug("finish_stroke ignored: no active stroke")
            return None
        stroke = self.active.freeze()
        self.active = None
        self.history.append(stroke)
        logger.debug("Stroke finished with %d points", len(stroke))
        self.sink.on_stroke_finalized(stroke)
        self._announce("stroke_finished", count=len(stroke))
        return stroke

    def reset(self) -> None:
        self.painted.clear()
        self.history.clear()
        self.active = None
        logger.debug("Builder reset")
        self._announce("canvas_reset")

    # ------------------------------------------------------------------
    def _center(self, cell: CellAddress) -> Point:
        return cell_center(cell, self.grid.cell_size)

    def _check_cell(self, cell: CellAddress) -> None:
        if not self.grid.contains(cell):
            raise CellOutOfRangeError(
                f"Cell ({cell.row}, {cell.col}) is outside the {self.grid.rows}x{self.grid.cols} grid"
            )

    def _paint(self, cell: CellAddress) -> None:
        if cell in self.painted:
            return
        self.painted.add(cell)
        self.sink.on_painted_change(cell)

    def _announce(self, key: str, **fields) -> None:
        self.sink.on_announce(status(key, self.language, **fields))


__all__ = [
    "StrokeStateError",
    "CellOutOfRangeError",
    "StrokeState",
    "Stroke",
    "ActiveStroke",
    "StrokeBuilder",
]
