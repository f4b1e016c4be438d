"""Tkinter viewer for the seeded Game of Life."""

import argparse
import sys
import tkinter as tk
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.grid import Grid
from ..core.game import LifeSimulation

Rectangle = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ViewerConfig:
    """Display settings for the viewer window."""

    window_width: int = 800
    window_height: int = 600
    scale: int = 8
    frame_rate: int = 10
    title: str = "Conway's Game of Life"
    background: str = "black"
    cell_color: str = "purple"

    @property
    def cols(self) -> int:
        return self.window_width // self.scale

    @property
    def rows(self) -> int:
        return self.window_height // self.scale

    @property
    def update_interval(self) -> int:
        """Milliseconds between frames."""
        return max(1, 1000 // self.frame_rate)


def cell_rectangle(x: int, y: int, scale: int) -> Rectangle:
    """Canvas rectangle covering the cell at (x, y)."""
    x1 = x * scale
    y1 = y * scale
    return (x1, y1, x1 + scale, y1 + scale)


def frame_rectangles(grid: Grid, scale: int) -> List[Rectangle]:
    """Rectangles to fill for every living cell of the grid."""
    rectangles = []
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get_cell(x, y):
                rectangles.append(cell_rectangle(x, y, scale))
    return rectangles


class TkinterLifeViewer:
    """Tkinter window that seeds a grid and animates it."""

    def __init__(self, master: tk.Tk, config: Optional[ViewerConfig] = None) -> None:
        """Initialize the viewer.

        Args:
            master: Root Tkinter window
            config: Display settings (defaults to ViewerConfig())
        """
        self.master = master
        self.config = config or ViewerConfig()
        self.master.title(self.config.title)
        self.master.configure(bg="#333333")

        self.grid = Grid(self.config.cols, self.config.rows)
        self.simulation = LifeSimulation(self.grid)

        self.running = True
        self._after_id: Optional[str] = None

        self.setup_ui()
        self.redraw_all_cells()
        self.update_status()

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg="#333333")
        control_frame.pack(pady=5)
        self._create_control_buttons(control_frame)

        self.canvas = tk.Canvas(
            self.master,
            width=self.config.window_width,
            height=self.config.window_height,
            bg=self.config.background,
            highlightthickness=0,
        )
        self.canvas.pack()

        self.status_label = tk.Label(self.master, text="", bg="#333333", fg="white", font=("Arial", 9))
        self.status_label.pack(anchor="w", padx=5, pady=(2, 5))

    def _create_control_buttons(self, parent: tk.Frame) -> None:
        """Create the run/step buttons."""
        self.toggle_btn = tk.Button(
            parent,
            text="Pause",
            command=self.toggle_running,
            bg="#555555",
            fg="white",
            font=("Arial", 9),
        )
        self.toggle_btn.pack(side=tk.LEFT, padx=3)

        self.step_btn = tk.Button(
            parent,
            text="Step",
            command=self.step_once,
            bg="#444444",
            fg="white",
            font=("Arial", 9),
        )
        self.step_btn.pack(side=tk.LEFT, padx=3)

    def toggle_running(self) -> None:
        """Toggle the running state."""
        self.running = not self.running
        self.toggle_btn.config(text="Pause" if self.running else "Run")
        self.update_status()

    def step_once(self) -> None:
        """Advance a single frame while paused."""
        self.simulation.tick()
        self.redraw_all_cells()
        self.update_status()

    def redraw_all_cells(self) -> None:
        """Redraw all living cells on the canvas."""
        self.canvas.delete("all")
        for x1, y1, x2, y2 in frame_rectangles(self.grid, self.config.scale):
            self.canvas.create_rectangle(x1, y1, x2, y2, fill=self.config.cell_color, outline="")

    def update_status(self) -> None:
        """Update the status line."""
        state = "Running" if self.running else "Paused"
        self.status_label.config(
            text=f"{state} | Generation: {self.simulation.generation} | Population: {self.simulation.population}"
        )

    def update_loop(self) -> None:
        """Advance one frame if running and schedule the next one."""
        if self.running:
            self.simulation.tick()
            self.redraw_all_cells()
            self.update_status()

        self._after_id = self.master.after(self.config.update_interval, self.update_loop)

    def stop(self) -> None:
        """Cancel the scheduled frame, if any."""
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the viewer."""
    defaults = ViewerConfig()
    parser = argparse.ArgumentParser(description="Watch Conway's Game of Life seeded with classic organisms")
    parser.add_argument(
        "--scale",
        type=int,
        default=defaults.scale,
        help=f"Pixels per cell (default: {defaults.scale})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=defaults.frame_rate,
        help=f"Frames per second (default: {defaults.frame_rate})",
    )
    parser.add_argument("--test", action="store_true", help="Run for 3 seconds and exit")
    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate viewer arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    defaults = ViewerConfig()
    errors = []

    if args.scale <= 0:
        errors.append("Scale must be positive")
    elif args.scale > min(defaults.window_width, defaults.window_height):
        errors.append("Scale must leave at least one cell in the window")

    if args.fps <= 0:
        errors.append("Frame rate must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the Tkinter viewer."""
    args = create_parser().parse_args(argv)
    if not validate_args(args):
        return 1

    config = ViewerConfig(scale=args.scale, frame_rate=args.fps)

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterLifeViewer(root, config)
    app.update_loop()

    if args.test:
        print("Running in test mode...")

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.simulation.generation} generations.")
            app.stop()
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
