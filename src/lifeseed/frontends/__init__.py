"""Frontend interfaces for the seeded Game of Life.

The Tkinter viewer lives in ``lifeseed.frontends.tkinter_gui`` and is not
imported here, so the CLI works on interpreters built without Tk.
"""

from .cli import CLILifeSeed

__all__ = ["CLILifeSeed"]
