"""
Interactive demo for grid geometry.
Move and turn a cursor on a grid and watch its neighborhood or beam.
"""

import logging

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderOptions, render
from dirns import displacement, turn
from grid_types import Direction, GridBound, Point, Rotation, Unbounded, grid_bound, unbounded
from neighbors import beam, in_bounds, neighbors, offset_clip


class InteractiveDemo:
    """Interactive demo for neighbor and beam queries."""

    def __init__(self, bound: GridBound, origin: Point, facing: Direction = Direction.RIGHT) -> None:
        if not in_bounds(bound, origin):
            raise ValueError(f"Demo origin {origin} is off the grid {bound}")
        self.bound = bound
        self.original_origin = origin
        self.original_facing = facing
        self.origin = origin
        self.facing = facing
        self.show_beam = True
        self.show_neighbors = False
        self.radius = 1
        self.console = Console()
        self.status_message = "Ready"
        window = (12, 24) if isinstance(bound, Unbounded) else None
        self.options = RenderOptions(cell_width=2, window=window)

    def marked_points(self) -> list[Point]:
        """Points currently highlighted around the cursor."""
        points: list[Point] = []
        if self.show_neighbors:
            points.extend(neighbors(self.bound, self.origin, self.radius))
        if self.show_beam:
            step = displacement(self.facing)
            window = self.options.window
            for p in beam(self.bound, self.origin, step):
                # An unbounded beam never ends; stop at the drawn window
                if window is not None and not (p[0] < window[0] and p[1] < window[1]):
                    break
                points.append(p)
        return points

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        grid_text = render(
            self.bound,
            self.marked_points(),
            origin=self.origin,
            facing=self.facing,
            options=self.options,
        )

        status = Text()
        status.append("Cursor: ", style="bold")
        status.append(f"({self.origin[0]}, {self.origin[1]}) facing {self.facing.name}\n")
        status.append("Radius: ", style="bold")
        status.append(f"{self.radius}\n\n")

        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move up/left/down/right\n")
        status.append("  Q/E     - Turn counter-clockwise/clockwise\n")
        status.append("  B       - Toggle beam\n")
        status.append("  N       - Toggle neighbors\n")
        status.append("  +/-     - Change neighbor radius\n")
        status.append("  R       - Reset\n")
        status.append("  X       - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Grid Geometry Demo", border_style="green", width=80)

    def attempt_move(self, direction: Direction) -> None:
        """Move the cursor one step, if the grid allows it."""
        moved = offset_clip(self.bound, self.origin, displacement(direction))
        if moved is None:
            self.status_message = f"✗ Can't move {direction.name}: edge of grid"
        else:
            self.origin = moved
            self.status_message = f"✓ Moved {direction.name} to ({moved[0]}, {moved[1]})"

    def attempt_turn(self, rotation: Rotation) -> None:
        self.facing = turn(self.facing, rotation, 1)
        self.status_message = f"✓ Turned {rotation.name}, now facing {self.facing.name}"

    def change_radius(self, delta: int) -> None:
        self.radius = max(1, self.radius + delta)
        self.status_message = f"Neighbor radius {self.radius}"

    def reset(self) -> None:
        """Reset the cursor to its starting state."""
        self.origin = self.original_origin
        self.facing = self.original_facing
        self.radius = 1
        self.status_message = "Cursor reset"

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False when the demo should stop."""
        key = key.lower()
        moves = {
            "w": Direction.UP,
            "a": Direction.LEFT,
            "s": Direction.DOWN,
            "d": Direction.RIGHT,
        }
        if key == "x":
            self.status_message = "Quitting..."
            return False
        elif key in moves:
            self.attempt_move(moves[key])
        elif key == "q":
            self.attempt_turn(Rotation.CCW)
        elif key == "e":
            self.attempt_turn(Rotation.CW)
        elif key == "b":
            self.show_beam = not self.show_beam
            self.status_message = f"Beam {'on' if self.show_beam else 'off'}"
        elif key == "n":
            self.show_neighbors = not self.show_neighbors
            self.status_message = f"Neighbors {'on' if self.show_neighbors else 'off'}"
        elif key in ("+", "="):
            self.change_radius(1)
        elif key == "-":
            self.change_radius(-1)
        elif key == "r":
            self.reset()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey()
                    if not self.handle_key(key):
                        live.update(self.generate_display())
                        break

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    small = dict(bound=grid_bound(8, 16), origin=(3, 4)),
    large = dict(bound=grid_bound(16, 32), origin=(8, 16)),
    open = dict(bound=unbounded(), origin=(2, 2)),
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'static':
        # Not attached to a terminal - just render the initial state
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        layout = LAYOUTS[sys.argv[2] if len(sys.argv) > 2 else 'small']
        demo = InteractiveDemo(layout['bound'], layout['origin'])
        demo.show_neighbors = True
        demo.console.print(demo.generate_display())
    else:
        layout = LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'small']
        InteractiveDemo(layout['bound'], layout['origin']).run()
