"""Configuration models for the sketch grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .messages import CATALOGS


class InputMode(str, Enum):
    """How traversal events relate to the active stroke."""

    DIRECT_ACTIVATION = "direct"
    CONTINUOUS_PAINT = "continuous"


@dataclass(frozen=True)
class GridConfig:
    """Dimensions of the drawing grid.

    Defaults give a 20 x 20 grid of 25 px cells.  The grid is fixed for the
    lifetime of a session.
    """

    rows: int = 20
    cols: int = 20
    cell_size: float = 25.0

    def __post_init__(self) -> None:
        if isinstance(self.rows, bool) or not isinstance(self.rows, int) or self.rows <= 0:
            raise ValueError(f"rows must be a positive integer, got {self.rows!r}")
        if isinstance(self.cols, bool) or not isinstance(self.cols, int) or self.cols <= 0:
            raise ValueError(f"cols must be a positive integer, got {self.cols!r}")
        size = float(self.cell_size)
        if not math.isfinite(size) or size <= 0:
            raise ValueError(f"cell_size must be a positive number, got {self.cell_size!r}")
        object.__setattr__(self, "cell_size", size)

    @property
    def width(self) -> float:
        return self.cols * self.cell_size

    @property
    def height(self) -> float:
        return self.rows * self.cell_size

    def contains(self, addr) -> bool:
        return 0 <= addr.row < self.rows and 0 <= addr.col < self.cols

    def as_tuple(self) -> Tuple[int, int, float]:
        return self.rows, self.cols, self.cell_size


@dataclass(frozen=True)
class CurveConfig:
    """Curve fitting parameters.

    ``alpha`` selects the Catmull-Rom parametrisation (0 uniform, 0.5
    centripetal, 1 chordal).  ``precision`` is the number of decimals written to
    path data; ``None`` keeps the shortest round-tripping representation.
    """

    alpha: float = 0.5
    precision: Optional[int] = 2

    def __post_init__(self) -> None:
        alpha = float(self.alpha)
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be within [0, 1], got {self.alpha!r}")
        object.__setattr__(self, "alpha", alpha)
        if self.precision is not None and (not isinstance(self.precision, int) or self.precision < 0):
            raise ValueError(f"precision must be a non-negative integer or None, got {self.precision!r}")


@dataclass
class SessionSettings:
    """Aggregate settings for a drawing session."""

    grid: GridConfig = field(default_factory=GridConfig)
    curve: CurveConfig = field(default_factory=CurveConfig)
    language: str = "en"
    initial_mode: InputMode = InputMode.DIRECT_ACTIVATION

    def __post_init__(self) -> None:
        if self.language not in CATALOGS:
            raise ValueError(
                f"Unsupported language {self.language!r}; expected one of {sorted(CATALOGS)}"
            )
        self.initial_mode = InputMode(self.initial_mode)
