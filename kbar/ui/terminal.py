"""
Terminal adapter — the only place kbar touches cursor state.

Wraps a rich Console so callers can inject their own (a StringIO-backed
console in tests, stderr for tools that keep stdout clean). Nothing here
is module-global: two Terminal objects over two consoles never interfere.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.control import Control
from rich.text import Text

from kbar.errors import TerminalError

log = logging.getLogger(__name__)


class Terminal:
    """Cursor placement, visibility and clearing over a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    @property
    def is_interactive(self) -> bool:
        return self.console.is_terminal

    @property
    def emits_color(self) -> bool:
        """False when the console strips color (pipe, NO_COLOR)."""
        return not self.console.no_color and self.console.color_system is not None

    # ── Cursor ────────────────────────────────────────────────────────────────

    def move_to(self, x: int, y: int) -> None:
        """
        Place the cursor at column x, row y (0, 0 is the top-left cell).

        Raises TerminalError when output is not an interactive terminal;
        absolute positions are meaningless in a pipe or a file.
        """
        if x < 0 or y < 0:
            raise TerminalError(f"Cursor position must be non-negative, got ({x}, {y})")
        if not self.is_interactive:
            raise TerminalError("Cannot move the cursor: output is not a terminal")
        self.console.control(Control.move_to(x, y))

    def carriage_return(self) -> None:
        """
        Return to the start of the current line.

        rich drops control codes on non-terminals, so the \\r goes
        straight to the file.
        """
        self.console.file.write("\r")
        self.console.file.flush()

    def hide_cursor(self) -> None:
        """No-op on non-terminals."""
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def clear(self) -> None:
        """Clear the whole screen and home the cursor."""
        log.debug("Clearing terminal")
        self.console.clear(home=True)

    # ── Output ────────────────────────────────────────────────────────────────

    def write(self, line: Text | str) -> None:
        """Write one line of output without a trailing newline."""
        self.console.print(line, end="", soft_wrap=True, highlight=False, markup=False)

    def newline(self) -> None:
        self.console.print()
