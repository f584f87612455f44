"""
ProgressLine — a BarRenderer drawn through a Terminal.

Usage:
    with ProgressLine(BarConfig(style=BarStyle.SPINNER)) as line:
        for i in range(steps):
            line.update(i * 100 // (steps - 1))
            line.draw()

Unpositioned lines redraw in place with a carriage return. Positioned
lines (position=(x, y)) jump to an absolute cell first, so several of them
can share one screen.
"""

from __future__ import annotations

from kbar.bar import BarConfig, BarRenderer, BarStyle
from kbar.ui.terminal import Terminal


class ProgressLine:
    """
    Context manager for one redrawable progress line.

    The cursor is hidden while the line is live and shown again on exit,
    even when the body raises.
    """

    def __init__(
        self,
        config: BarConfig,
        terminal: Terminal | None = None,
        position: tuple[int, int] | None = None,
    ) -> None:
        self.renderer = BarRenderer(config)
        self.terminal = terminal or Terminal()
        self.position = position

    @classmethod
    def default(cls, terminal: Terminal | None = None) -> "ProgressLine":
        """Bracketed, colored, 20 cells wide, with percentage."""
        config = BarConfig(
            style=BarStyle.FILLED_BRACKETED,
            colorize=True,
            show_percent=True,
            length=20,
        )
        return cls(config, terminal=terminal)

    # ── Context manager ───────────────────────────────────────────────────────

    def __enter__(self) -> "ProgressLine":
        self.terminal.hide_cursor()
        return self

    def __exit__(self, *args) -> None:
        if self.position is None:
            self.terminal.newline()
        self.terminal.show_cursor()

    # ── Public API ────────────────────────────────────────────────────────────

    def update(self, percent: int) -> None:
        self.renderer.update(percent)

    def is_complete(self) -> bool:
        return self.renderer.is_complete()

    def draw(self) -> None:
        """
        Redraw the line at its place.

        TerminalError from the adapter propagates to the caller.
        """
        if self.position is not None:
            self.terminal.move_to(*self.position)
        else:
            self.terminal.carriage_return()
        self.terminal.write(self.renderer.render_text(emits_color=self.terminal.emits_color))

    def clear_screen(self) -> None:
        self.terminal.clear()
