"""Geometry primitives and curve fitting for the sketch grid.

Discrete grid addresses are mapped to continuous surface coordinates here, and
recorded point sequences are turned into smooth cubic Bezier paths using a
centripetal Catmull-Rom spline.  Everything in this module is pure: no session
state is read or written, so historical strokes can be re-fitted at will.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

XY = Tuple[float, float]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point:
    """Immutable sample in drawing-surface coordinates."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, order=True)
class CellAddress:
    """Discrete grid coordinate (zero based)."""

    row: int
    col: int


def cell_center(addr: CellAddress, cell_size: float) -> Point:
    """Centre of ``addr`` in surface coordinates."""
    half = cell_size / 2
    return Point(addr.col * cell_size + half, addr.row * cell_size + half)


def cell_at(point: Point, cell_size: float) -> CellAddress:
    """Cell containing ``point``.

    The result is not range checked; callers compare it against their grid.
    """
    return CellAddress(int(math.floor(point.y / cell_size)), int(math.floor(point.x / cell_size)))


# ---------------------------------------------------------------------------
# Path commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveTo:
    end: Point


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier segment from the current point to ``end``."""

    c1: Point
    c2: Point
    end: Point


PathCommand = Union[MoveTo, CurveTo]


def _weight(distance: float, alpha: float) -> float:
    # Coincident samples would collapse the parametrisation to zero.
    return (distance if distance > 0 else 1.0) ** alpha


def _guard(denominator: float) -> float:
    return denominator if denominator != 0 else 1.0


def _control_points(p0: Point, p1: Point, p2: Point, p3: Point, alpha: float) -> Tuple[Point, Point]:
    d1 = _weight(p0.distance_to(p1), alpha)
    d2 = _weight(p1.distance_to(p2), alpha)
    d3 = _weight(p2.distance_to(p3), alpha)
    d1_sq, d2_sq, d3_sq = d1 * d1, d2 * d2, d3 * d3

    a = 2 * d1_sq + 3 * d1 * d2 + d2_sq
    b = 2 * d3_sq + 3 * d3 * d2 + d2_sq
    n = _guard(3 * d1 * (d1 + d2))
    m = _guard(3 * d3 * (d3 + d2))

    c1 = Point(
        (-d2_sq * p0.x + a * p1.x + d1_sq * p2.x) / n,
        (-d2_sq * p0.y + a * p1.y + d1_sq * p2.y) / n,
    )
    c2 = Point(
        (d3_sq * p1.x + b * p2.x - d2_sq * p3.x) / m,
        (d3_sq * p1.y + b * p2.y - d2_sq * p3.y) / m,
    )
    return c1, c2


def fit_smooth_curve(points: Sequence[Point], alpha: float = 0.5) -> List[PathCommand]:
    """Fit a centripetal Catmull-Rom spline through ``points``.

    The spline is returned as a ``MoveTo`` followed by one ``CurveTo`` per
    consecutive pair of input points.  The first and last samples are repeated
    as phantom neighbours so every segment has four control vertices.  Fewer
    than two points produce an empty list; duplicate points are legal and yield
    finite output.
    """
    pts = list(points)
    if len(pts) < 2:
        return []
    padded = [pts[0]] + pts + [pts[-1]]
    commands: List[PathCommand] = [MoveTo(pts[0])]
    for i in range(1, len(padded) - 2):
        p0, p1, p2, p3 = padded[i - 1], padded[i], padded[i + 1], padded[i + 2]
        c1, c2 = _control_points(p0, p1, p2, p3, alpha)
        commands.append(CurveTo(c1, c2, p2))
    return commands


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def format_number(value: float, precision: Optional[int] = None) -> str:
    """Format a coordinate for path data.

    Trailing zeros are stripped and negative zero is written as ``0``.
    """
    value = float(value) + 0.0
    if precision is None:
        text = repr(value)
    else:
        text = f"{value:.{precision}f}"
    if "." in text and "e" not in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def to_path_data(commands: Sequence[PathCommand], precision: Optional[int] = None) -> str:
    """Render commands as an SVG path ``d`` string (``M x y C ...``)."""
    def fmt(v: float) -> str:
        return format_number(v, precision)

    parts: List[str] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {fmt(cmd.end.x)} {fmt(cmd.end.y)}")
        elif isinstance(cmd, CurveTo):
            parts.append(
                "C {} {} {} {} {} {}".format(
                    fmt(cmd.c1.x), fmt(cmd.c1.y), fmt(cmd.c2.x), fmt(cmd.c2.y), fmt(cmd.end.x), fmt(cmd.end.y)
                )
            )
        else:
            raise TypeError(f"Unsupported path command: {type(cmd)!r}")
    return " ".join(parts)


def smooth_path(points: Sequence[Point], alpha: float = 0.5, precision: Optional[int] = None) -> str:
    """Shorthand for ``to_path_data(fit_smooth_curve(points, alpha), precision)``."""
    return to_path_data(fit_smooth_curve(points, alpha), precision)


__all__ = [
    "XY",
    "Point",
    "CellAddress",
    "cell_center",
    "cell_at",
    "MoveTo",
    "CurveTo",
    "PathCommand",
    "fit_smooth_curve",
    "format_number",
    "to_path_data",
    "smooth_path",
]
