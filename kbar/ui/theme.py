"""
kbar visual design system.

All glyphs, colors and styles as named constants.
Import from here — never hardcode glyphs or color values in other modules.

Colors are rich Style objects, so the renderer never touches escape codes.
Conversion to ANSI happens once, at the edge, in to_ansi().
"""

from io import StringIO

from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.text import Text


# ── Glyphs ────────────────────────────────────────────────────────────────────

GLYPH_FILLED = "█"
GLYPH_EMPTY_PLAIN = "="         # uncompleted cell, no color
GLYPH_EMPTY_COLOR = "█"         # uncompleted cell, drawn in STYLE_REMAINING

BRACKET_OPEN = "["
BRACKET_CLOSE = "]"

DOTS_FRAMES: tuple[str, ...] = (".  ", ".. ", "...")
SPINNER_FRAMES: tuple[str, ...] = ("|", "/", "-", "\\")


# ── Fixed styles ──────────────────────────────────────────────────────────────

STYLE_BRACKET   = Style(color="white")
STYLE_REMAINING = Style(color="bright_black")
STYLE_SUFFIX    = Style(color="white")      # the "%" after the number


# ── Completion gradient ───────────────────────────────────────────────────────
# Linear red → green ramp; blue stays fixed.

GRADIENT_SPAN = 200
GRADIENT_BLUE = 25


def completion_color(percent: int) -> Color:
    """
    Color for a completion value in [0, 100].

      0%   → rgb(255, 0, 25)
      50%  → rgb(155, 100, 25)
      100% → rgb(55, 200, 25)
    """
    step = round(percent / 100 * GRADIENT_SPAN)
    return Color.from_rgb(255 - step, step, GRADIENT_BLUE)


def completion_style(percent: int) -> Style:
    return Style(color=completion_color(percent))


# ── ANSI export ───────────────────────────────────────────────────────────────

def to_ansi(text: Text) -> str:
    """
    Render a Text to a truecolor ANSI string.

    Every styled span is closed with a reset, so the returned string
    always ends in a neutral state.
    """
    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        emoji=False,
        width=max(80, text.cell_len + 1),
        legacy_windows=False,
        no_color=False,
    )
    console.print(text, end="", soft_wrap=True)
    return buf.getvalue()
