"""
Demonstration scripts for the grid geometry utilities.
"""

import logging
from itertools import islice

from ascii_render import RenderOptions, render
from convert import U8
from dirns import turn
from grid_types import FACINGS, Rotation, grid_bound, unbounded
from neighbors import beam, chebyshev_offsets, manhattan_distance, neighbors


def demo() -> None:
    """Demonstrate neighborhoods, beams and rotations."""
    bound = grid_bound(4, 4)

    print("Neighbors of (2, 0), radius 1, on a 4x4 grid:")
    points = list(neighbors(bound, (2, 0), 1))
    print(points)
    print(render(bound, points, origin=(2, 0)))
    print()

    print("Neighbors of the corner (3, 3):")
    points = list(neighbors(bound, (3, 3), 1))
    print(points)
    print(render(bound, points, origin=(3, 3)))
    print()

    big = grid_bound(6, 6)
    print("Beam from (3, 2) stepping (1, -1) on a 6x6 grid:")
    points = list(beam(big, (3, 2), (1, -1), kind=U8))
    print(points)
    print(render(big, points, origin=(3, 2), options=RenderOptions(cell_width=3)))
    print()

    grid = unbounded()
    print("First four beam points from (5, 2) stepping (1, 1), unbounded:")
    points = list(islice(beam(grid, (5, 2), (1, 1)), 4))
    print(points)
    print(render(grid, points, origin=(5, 2)))
    print()

    print("Beam from (5, 2) stepping (1, -1), unbounded (stops at column 0):")
    print(list(beam(grid, (5, 2), (1, -1))))
    print()

    print("Chebyshev offsets, radius 1:")
    print(list(chebyshev_offsets(1)))
    print()

    print("Manhattan distance (0, 0) -> (3, 4):", manhattan_distance((0, 0), (3, 4)))
    print()

    print("Rotations:")
    for facing in FACINGS:
        ccw = turn(facing, Rotation.CCW, 1)
        cw = turn(facing, Rotation.CW, 1)
        back = turn(facing, Rotation.CW, -9)
        print(f"  {facing.name:5}  CCW -> {ccw.name:5}  CW -> {cw.name:5}  CW x -9 -> {back.name}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    demo()
