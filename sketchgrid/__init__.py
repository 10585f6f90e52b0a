"""Top-level package for the accessible sketch grid.

The package turns discrete input (grid cell activation, arrow-key cursor
movement, pointer drags) into strokes and renders them as smooth centripetal
Catmull-Rom curves.  The NiceGUI front-end lives in :mod:`sketchgrid.app` and
is not imported here so the core stays usable without a UI.
"""

from .config import CurveConfig, GridConfig, InputMode, SessionSettings
from .controller import SketchController
from .dispatcher import InputDispatcher, Operation
from .geometry import CellAddress, Point, cell_center, fit_smooth_curve, to_path_data
from .session import DrawingSession
from .strokes import CellOutOfRangeError, Stroke, StrokeBuilder, StrokeState, StrokeStateError

__all__ = [
    "CurveConfig",
    "GridConfig",
    "InputMode",
    "SessionSettings",
    "SketchController",
    "InputDispatcher",
    "Operation",
    "CellAddress",
    "Point",
    "cell_center",
    "fit_smooth_curve",
    "to_path_data",
    "DrawingSession",
    "Stroke",
    "StrokeBuilder",
    "StrokeState",
    "StrokeStateError",
    "CellOutOfRangeError",
]
