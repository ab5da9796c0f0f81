"""
Direction and rotation arithmetic on the grid.
"""

from __future__ import annotations

from convert import I64, IntType, convert, widen
from grid_types import DIRNS, FACINGS, Direction, Point, Rotation


def displacement(direction: Direction, kind: IntType = I64) -> Point:
    """Unit displacement (dr, dc) for a step in the given direction."""
    dr, dc = DIRNS[direction.value]
    return (convert(dr, kind), convert(dc, kind))


def displace(
    direction: Direction,
    point: Point,
    distance: int,
    kind: IntType = I64,
) -> Point:
    """
    Move a point the given distance along a direction.

    The distance may be negative (moves the opposite way). No clipping is
    applied; use offset_clip for that.

    Args:
        direction: Direction of travel
        point: Starting (row, col)
        distance: Number of steps
        kind: Integer type of the result

    Returns:
        The displaced (row, col)
    """
    dr, dc = displacement(direction)
    r = widen(point[0])
    c = widen(point[1])
    dist = widen(distance)
    r += dist * dr
    c += dist * dc
    return (convert(r, kind), convert(c, kind))


def turn(direction: Direction, rotation: Rotation, count: int) -> Direction:
    """
    Direction resulting from count quarter turns in the given rotation sense.

    Negative counts turn the other way. Clockwise is counter-clockwise run
    backward through the four-cycle, so CW takes 3 CCW steps per turn.
    """
    steps = widen(count)
    if steps < 0:
        steps = (4 - -steps % 4) % 4

    nfacings = len(FACINGS)
    match rotation:
        case Rotation.CCW:
            offset = steps % nfacings
        case Rotation.CW:
            offset = ((nfacings - 1) * steps) % nfacings
        case _:
            raise ValueError(f"Unknown rotation: {rotation}")

    return FACINGS[(direction.value + offset) % nfacings]


def reverse(direction: Direction) -> Direction:
    """The opposite direction."""
    return turn(direction, Rotation.CCW, 2)


def facing_of(delta: Point) -> Direction:
    """Direction whose unit displacement is delta."""
    key = (widen(delta[0]), widen(delta[1]))
    for facing, disp in zip(FACINGS, DIRNS):
        if disp == key:
            return facing
    raise ValueError(
        f"Not a unit displacement: {delta}\n"
        f"  Valid displacements: {', '.join(str(d) for d in DIRNS)}"
    )
