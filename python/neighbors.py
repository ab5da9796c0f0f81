"""
Clipped neighborhoods and beams on a 2D grid.

Build a bound with grid_bound() or unbounded(), then ask it for coordinate
sequences:

    bound = grid_bound(4, 4)
    sorted(neighbors(bound, (2, 0), 1))
    # [(1, 0), (1, 1), (2, 1), (3, 0), (3, 1)]

Coordinates go in as any ints in the i64 range and come back as the IntType
given by `kind`.
"""

from __future__ import annotations

import logging
from typing import Iterator

from convert import I64, IntType, convert, widen
from grid_types import DIRNS, Clipped, GridBound, Point, Unbounded, grid_bound, unbounded  # noqa: F401

logger = logging.getLogger(__name__)


# =============================================================================
# Clipping
# =============================================================================


def _clip(bound: GridBound, r: int, c: int) -> bool:
    """True if (r, c) lies inside the bound."""
    if r < 0 or c < 0:
        return False
    match bound:
        case Clipped(rows=rows, cols=cols):
            return r < rows and c < cols
        case Unbounded():
            return True
        case _:
            raise ValueError(f"Unknown grid bound: {bound}")


def offset_clip(
    bound: GridBound,
    point: Point,
    offset: Point,
    kind: IntType = I64,
) -> Point | None:
    """
    Return point moved by offset iff the result is in bounds, else None.

    Unlike neighbors(), the source point itself may lie anywhere, which makes
    this suitable for "manual" clipping.
    """
    nr = widen(point[0]) + widen(offset[0])
    nc = widen(point[1]) + widen(offset[1])
    if not _clip(bound, nr, nc):
        return None
    return (convert(nr, kind), convert(nc, kind))


def in_bounds(bound: GridBound, point: Point) -> bool:
    """True if point lies inside the bound."""
    return offset_clip(bound, point, (0, 0)) is not None


# =============================================================================
# Neighbors
# =============================================================================


class Neighbors:
    """
    Iterator over the square neighborhood of a point, clipped to a bound.

    Points come out in row-major order and the origin is skipped. Single pass:
    once exhausted it stays exhausted.
    """

    def __init__(self, bound: GridBound, origin: Point, radius: int, kind: IntType = I64):
        if radius <= 0:
            raise ValueError(f"Neighbor radius must be positive, got {radius}")
        r, c = origin
        self.bound = bound
        self.kind = kind
        self._origin = origin
        self._start = (max(0, r - radius), max(0, c - radius))
        match bound:
            case Clipped(rows=rows, cols=cols):
                self._end = (min(rows, r + radius + 1), min(cols, c + radius + 1))
            case _:
                self._end = (r + radius + 1, c + radius + 1)
        self._loc = self._start

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        while True:
            row, col = self._loc
            if self._loc == self._origin:
                self._loc = (row, col + 1)
                continue
            if row >= self._end[0]:
                raise StopIteration
            if col >= self._end[1]:
                self._loc = (row + 1, self._start[1])
                continue
            self._loc = (row, col + 1)
            return (convert(row, self.kind), convert(col, self.kind))


def neighbors(
    bound: GridBound,
    point: Point,
    radius: int = 1,
    kind: IntType = I64,
) -> Neighbors:
    """
    Iterate over every point within Chebyshev distance radius of point,
    excluding point itself, clipped to the bound.

    The origin must be a valid grid location: non-negative, and inside the
    bound when it is clipped.

    Raises:
        ValueError: radius is not positive, or the origin is off the grid
    """
    r = widen(point[0])
    c = widen(point[1])
    dist = widen(radius)

    if r < 0 or c < 0:
        raise ValueError(
            f"Neighbor origin {point} is off the grid\n"
            f"  Coordinates must be non-negative"
        )
    if isinstance(bound, Clipped) and not (r < bound.rows and c < bound.cols):
        raise ValueError(
            f"Neighbor origin {point} is off the grid\n"
            f"  Bound: {bound.rows} rows x {bound.cols} cols"
        )

    result = Neighbors(bound, (r, c), dist, kind)
    logger.debug(
        "neighbors: origin=%s radius=%d window=%s..%s",
        (r, c),
        dist,
        result._start,
        result._end,
    )
    return result


# =============================================================================
# Beams
# =============================================================================


class Beam:
    """
    Iterator stepping from a point by a fixed offset until the bound clips.

    The starting point is not produced. Infinite on an unbounded grid unless
    the step eventually drives a coordinate negative.
    """

    def __init__(self, bound: GridBound, start: Point, step: Point, kind: IntType = I64):
        if step == (0, 0):
            raise ValueError("Beam step must be non-zero")
        self.bound = bound
        self.kind = kind
        self._loc: Point | None = start
        self._step = step

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        if self._loc is None:
            raise StopIteration
        self._loc = offset_clip(self.bound, self._loc, self._step)
        if self._loc is None:
            raise StopIteration
        return (convert(self._loc[0], self.kind), convert(self._loc[1], self.kind))


def beam(
    bound: GridBound,
    point: Point,
    step: Point,
    kind: IntType = I64,
) -> Beam:
    """
    Iterate over point + step, point + 2*step, ... until leaving the bound.

    Raises:
        ValueError: step is (0, 0)
    """
    start = (widen(point[0]), widen(point[1]))
    delta = (widen(step[0]), widen(step[1]))
    result = Beam(bound, start, delta, kind)
    logger.debug("beam: start=%s step=%s bound=%s", start, delta, bound)
    return result


# =============================================================================
# Offsets and Distances
# =============================================================================


def axis_offsets(kind: IntType = I64) -> Iterator[Point]:
    """The four unit displacements, in UP, LEFT, DOWN, RIGHT order."""
    return ((convert(dr, kind), convert(dc, kind)) for dr, dc in DIRNS)


def chebyshev_offsets(radius: int = 1, kind: IntType = I64) -> Iterator[Point]:
    """
    All non-zero offsets within the square of the given radius, row-major.

    Raises:
        ValueError: radius is not positive
    """
    dist = widen(radius)
    if dist <= 0:
        raise ValueError(f"Offset radius must be positive, got {radius}")
    span = range(-dist, dist + 1)
    return (
        (convert(dr, kind), convert(dc, kind))
        for dr in span
        for dc in span
        if (dr, dc) != (0, 0)
    )


def manhattan_distance(p1: Point, p2: Point, kind: IntType = I64) -> int:
    """
    The Manhattan (taxicab) distance between two points.

    See http://en.wikipedia.org/wiki/Taxicab_geometry
    """
    r1, c1 = widen(p1[0]), widen(p1[1])
    r2, c2 = widen(p2[0]), widen(p2[1])
    return convert(abs(r1 - r2) + abs(c1 - c2), kind)
