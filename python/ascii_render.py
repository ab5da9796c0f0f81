"""
ASCII rendering for grid bounds and the coordinates computed on them.

Draws a bordered window of the grid with an origin (optionally showing its
facing) and a set of marked points, colored with simple_chalk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from convert import widen
from grid_types import Clipped, Direction, GridBound, Point, Unbounded

logger = logging.getLogger(__name__)


FACING_ARROWS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.LEFT: "<",
    Direction.DOWN: "v",
    Direction.RIGHT: ">",
}


@dataclass(frozen=True)
class RenderOptions:
    """Options governing how a grid window is drawn."""

    cell_width: int = 1
    empty_char: str = "."
    point_char: str = "*"
    origin_char: str = "@"
    window: tuple[int, int] | None = None  # (rows, cols); needed only for unbounded grids


def _window_size(
    bound: GridBound,
    points: list[Point],
    origin: Point | None,
    options: RenderOptions,
) -> tuple[int, int]:
    """Rows and columns of the drawn window."""
    match bound:
        case Clipped(rows=rows, cols=cols):
            return (rows, cols)
        case Unbounded():
            if options.window is not None:
                return options.window
            marked = points + ([origin] if origin is not None else [])
            rows = max((r for r, _ in marked), default=0) + 1
            cols = max((c for _, c in marked), default=0) + 1
            return (max(rows, 1), max(cols, 1))
        case _:
            raise ValueError(f"Unknown grid bound: {bound}")


def _title(bound: GridBound) -> str:
    match bound:
        case Clipped(rows=rows, cols=cols):
            return f" {rows}x{cols} "
        case _:
            return " unbounded "


def render_lines(
    bound: GridBound,
    points: Iterable[Point] = (),
    origin: Point | None = None,
    facing: Direction | None = None,
    options: RenderOptions | None = None,
) -> list[str]:
    """
    Render a grid window as a list of lines.

    Args:
        bound: The grid bound to draw
        points: Points to mark (e.g. a neighborhood or a beam)
        origin: Optional origin cell, drawn highlighted
        facing: Optional facing of the origin, drawn as an arrow
        options: Drawing options (defaults to RenderOptions())

    Returns:
        List of strings representing the rendered window
    """
    if options is None:
        options = RenderOptions()

    marked = [(widen(r), widen(c)) for r, c in points]
    if origin is not None:
        origin = (widen(origin[0]), widen(origin[1]))

    rows, cols = _window_size(bound, marked, origin, options)
    logger.info("render: window=%dx%d, points=%d", rows, cols, len(marked))

    visible = {p for p in marked if 0 <= p[0] < rows and 0 <= p[1] < cols}
    skipped = len(set(marked)) - len(visible)
    if skipped:
        logger.debug("render: %d point(s) outside the window skipped", skipped)

    colorize: Callable[[str], str] = chalk.cyan
    cell_width = options.cell_width
    title = _title(bound)
    grid_width = cols * cell_width + 2  # +2 for borders

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if len(title) <= grid_width - 2:
        title_start = (grid_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (grid_width - title_start - len(title) - 1) +
            "┐"
        )
    lines.append(colorize(title_line))

    for r_idx in range(rows):
        line_parts = [colorize("│")]

        for c_idx in range(cols):
            pos = (r_idx, c_idx)
            if pos == origin:
                char = FACING_ARROWS[facing] if facing is not None else options.origin_char
            elif pos in visible:
                char = options.point_char
            else:
                char = options.empty_char

            content = char if cell_width == 1 else char.center(cell_width)

            if pos == origin:
                content = chalk.bgWhite.black(content)
            elif pos in visible:
                content = chalk.yellow(content)
            else:
                content = chalk.white(content)

            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    # Bottom border
    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    return lines


def render(
    bound: GridBound,
    points: Iterable[Point] = (),
    origin: Point | None = None,
    facing: Direction | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render a grid window as a single string."""
    return "\n".join(render_lines(bound, points, origin, facing, options))
