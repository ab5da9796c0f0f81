"""
Shared type definitions for grid geometry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from convert import widen


# (row, col), row increasing downward
Point = tuple[int, int]


class Direction(Enum):
    """Cardinal direction on the grid."""

    # Values are positions in the cyclic order used for turning.
    UP = 0  # Decreasing row
    LEFT = 1  # Decreasing col
    DOWN = 2  # Increasing row
    RIGHT = 3  # Increasing col


class Rotation(Enum):
    """Sense of a quarter turn."""

    CCW = "ccw"  # Counter-clockwise
    CW = "cw"  # Clockwise


# Must stay aligned with the Direction values.
FACINGS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)

DIRNS: tuple[Point, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


# =============================================================================
# Grid Bounds
# =============================================================================


@dataclass(frozen=True)
class Clipped:
    """Grid clipped to [0, rows) x [0, cols)."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        rows = widen(self.rows)
        cols = widen(self.cols)
        if rows < 0 or cols < 0:
            raise ValueError(
                f"Invalid grid bound: {rows}x{cols}\n"
                f"  Rows and columns must be non-negative"
            )
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)


@dataclass(frozen=True)
class Unbounded:
    """Grid with no bottom or right edge. Negative coordinates are still clipped."""

    pass


GridBound = Clipped | Unbounded


def grid_bound(rows: int, cols: int) -> Clipped:
    """Create a clipped bound of the given size."""
    return Clipped(rows, cols)


def unbounded() -> Unbounded:
    """Create an unbounded grid (clipped only at row 0 and col 0)."""
    return Unbounded()
