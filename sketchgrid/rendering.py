"""Vector surface rendering for a :class:`~sketchgrid.session.DrawingSession`.

The renderer reads a session and produces SVG markup: painted cells as
rectangles, every stroke as a smoothed cubic path, and the keyboard cursor as
an outline.  Fitted paths are also converted to :mod:`svgpathtools` objects so
callers can measure ink length, bounds, or sample a polyline for devices that
cannot draw curves.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from svgpathtools import CubicBezier, Path as SVGPath

from .config import CurveConfig, GridConfig
from .geometry import XY, CurveTo, MoveTo, PathCommand, Point, fit_smooth_curve, format_number, to_path_data
from .session import DrawingSession
from .strokes import Stroke


def _c(p: Point) -> complex:
    return complex(p.x, p.y)


def to_svg_path(commands: Sequence[PathCommand]) -> SVGPath:
    """Convert fitted commands into an svgpathtools ``Path``."""
    segments = []
    current: Optional[Point] = None
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            current = cmd.end
        elif isinstance(cmd, CurveTo):
            if current is None:
                raise ValueError("Path data must start with a move command")
            segments.append(CubicBezier(_c(current), _c(cmd.c1), _c(cmd.c2), _c(cmd.end)))
            current = cmd.end
        else:
            raise TypeError(f"Unsupported path command: {type(cmd)!r}")
    return SVGPath(*segments)


def _length(path: SVGPath) -> float:
    return float(sum(segment.length() for segment in path))


def sample_curve(commands: Sequence[PathCommand], tolerance: float = 0.5) -> List[XY]:
    """Approximate fitted commands as a polyline with ``tolerance`` spacing."""
    if not commands:
        return []
    path = to_svg_path(commands)
    length = _length(path)
    if length <= 0:
        start = commands[0].end
        return [(start.x, start.y)]
    steps = max(int(length / max(tolerance, 1e-3)), 1)
    points: List[XY] = []
    for i in range(steps + 1):
        point = path.point(i / steps)
        points.append((float(point.real), float(point.imag)))
    return points


def ink_length(strokes: Iterable[Stroke], alpha: float = 0.5) -> float:
    """Total arc length of the smoothed strokes."""
    total = 0.0
    for stroke in strokes:
        if not stroke.renderable:
            continue
        total += _length(to_svg_path(fit_smooth_curve(stroke.points, alpha)))
    return total


def ink_bounds(strokes: Iterable[Stroke], alpha: float = 0.5) -> Optional[Tuple[float, float, float, float]]:
    """``(xmin, xmax, ymin, ymax)`` of the smoothed strokes, ``None`` if empty."""
    bounds = None
    for stroke in strokes:
        if not stroke.renderable:
            continue
        xmin, xmax, ymin, ymax = to_svg_path(fit_smooth_curve(stroke.points, alpha)).bbox()
        if bounds is None:
            bounds = (float(xmin), float(xmax), float(ymin), float(ymax))
        else:
            bounds = (
                min(bounds[0], xmin),
                max(bounds[1], xmax),
                min(bounds[2], ymin),
                max(bounds[3], ymax),
            )
    return bounds


@dataclass
class RenderStyle:
    background: str = "#ffffff"
    grid_line: str = "#d0d0d0"
    paint: str = "#000000"
    stroke: str = "#1d4ed8"
    active_stroke: str = "#dc2626"
    stroke_width: float = 2.0
    cursor: str = "#f59e0b"
    show_grid: bool = True


@dataclass
class SketchRenderer:
    """Render sessions as standalone SVG documents."""

    grid: GridConfig = field(default_factory=GridConfig)
    curve: CurveConfig = field(default_factory=CurveConfig)
    style: RenderStyle = field(default_factory=RenderStyle)

    def stroke_paths(self, strokes: Iterable[Stroke], alpha: Optional[float] = None) -> List[str]:
        """Path data per renderable stroke; re-fits for any ``alpha``."""
        alpha = self.curve.alpha if alpha is None else alpha
        return [
            to_path_data(fit_smooth_curve(stroke.points, alpha), self.curve.precision)
            for stroke in strokes
            if stroke.renderable
        ]

    def render_elements(self, session: DrawingSession, alpha: Optional[float] = None) -> str:
        """SVG body without the surrounding ``<svg>`` element."""
        style = self.style
        size = self.grid.cell_size
        fmt = format_number
        elements = [
            f'<rect x="0" y="0" width="{fmt(self.grid.width)}" height="{fmt(self.grid.height)}" '
            f'fill="{style.background}" />'
        ]
        for cell in sorted(session.painted):
            elements.append(
                f'<rect x="{fmt(cell.col * size)}" y="{fmt(cell.row * size)}" width="{fmt(size)}" '
                f'height="{fmt(size)}" fill="{style.paint}" fill-opacity="0.25" />'
            )
        if style.show_grid:
            for r in range(self.grid.rows + 1):
                y = fmt(r * size)
                elements.append(
                    f'<line x1="0" y1="{y}" x2="{fmt(self.grid.width)}" y2="{y}" '
                    f'stroke="{style.grid_line}" stroke-width="0.5" />'
                )
            for c in range(self.grid.cols + 1):
                x = fmt(c * size)
                elements.append(
                    f'<line x1="{x}" y1="0" x2="{x}" y2="{fmt(self.grid.height)}" '
                    f'stroke="{style.grid_line}" stroke-width="0.5" />'
                )
        for d in self.stroke_paths(session.strokes, alpha):
            elements.append(self._path_element(d, style.stroke))
        active = session.builder.active
        if active is not None and len(active.points) >= 2:
            d = to_path_data(
                fit_smooth_curve(active.points, self.curve.alpha if alpha is None else alpha),
                self.curve.precision,
            )
            elements.append(self._path_element(d, style.active_stroke))
        cursor = session.cursor
        elements.append(
            f'<rect x="{fmt(cursor.col * size)}" y="{fmt(cursor.row * size)}" width="{fmt(size)}" '
            f'height="{fmt(size)}" fill="none" stroke="{style.cursor}" stroke-width="2" />'
        )
        return "".join(elements)

    def render_svg(self, session: DrawingSession, alpha: Optional[float] = None) -> str:
        width = format_number(self.grid.width)
        height = format_number(self.grid.height)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
            f'width="{width}" height="{height}">' + self.render_elements(session, alpha) + "</svg>"
        )

    def _path_element(self, d: str, color: str) -> str:
        return (
            f'<path d="{d}" fill="none" stroke="{color}" stroke-width="{format_number(self.style.stroke_width)}" '
            f'stroke-linecap="round" stroke-linejoin="round" />'
        )


__all__ = [
    "to_svg_path",
    "sample_curve",
    "ink_length",
    "ink_bounds",
    "RenderStyle",
    "SketchRenderer",
]
