"""
Core progress bar model for kbar.

BarStyle    — the four bar variants.
Animation   — how the dots/spinner phase advances.
BarConfig   — immutable, validated bar settings.
BarRenderer — percent + animation phase → one line of output.

The renderer never performs I/O. It produces a rich Text (render_text)
or a plain / ANSI string (render); writing it somewhere, moving the cursor
and flushing belong to kbar.ui.display.

Output:
  FILLED_BRACKETED   [█████=====] 50%
  FILLED_RAW         █████ 50%
  DOTS               ..  50%
  SPINNER            / 50%
"""

import logging
from dataclasses import dataclass
from enum import Enum

from rich.text import Text

from kbar.errors import ConfigurationError, DomainError
from kbar.ui.theme import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    DOTS_FRAMES,
    GLYPH_EMPTY_COLOR,
    GLYPH_EMPTY_PLAIN,
    GLYPH_FILLED,
    SPINNER_FRAMES,
    STYLE_BRACKET,
    STYLE_REMAINING,
    STYLE_SUFFIX,
    completion_style,
    to_ansi,
)

log = logging.getLogger(__name__)


MIN_LENGTH = 1
MAX_LENGTH = 100


# ── Data model ────────────────────────────────────────────────────────────────

class BarStyle(Enum):
    FILLED_BRACKETED = "bracketed"     # [██████====]
    FILLED_RAW = "raw"                 # ██████
    DOTS = "dots"                      # .  / .. / ...
    SPINNER = "spinner"                # | / - \

    @property
    def frames(self) -> tuple[str, ...]:
        """Animation cycle for DOTS/SPINNER, empty for the filled styles."""
        return _FRAMES.get(self, ())

    @property
    def is_animated(self) -> bool:
        return bool(self.frames)


_FRAMES: dict[BarStyle, tuple[str, ...]] = {
    BarStyle.DOTS: DOTS_FRAMES,
    BarStyle.SPINNER: SPINNER_FRAMES,
}


class Animation(Enum):
    PARITY = "parity"   # advance on each render while percent is even
    FRAME = "frame"     # advance on every render


@dataclass(frozen=True)
class BarConfig:
    style: BarStyle = BarStyle.FILLED_BRACKETED
    colorize: bool = True
    show_percent: bool = True
    length: int = 20                    # cells; filled styles only
    animation: Animation = Animation.PARITY

    def __post_init__(self) -> None:
        if not isinstance(self.style, BarStyle):
            raise ConfigurationError(f"Unknown bar style: {self.style!r}")
        if not isinstance(self.animation, Animation):
            raise ConfigurationError(f"Unknown animation: {self.animation!r}")
        # bool is an int subclass; True would silently become a 1-cell bar
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ConfigurationError(
                f"Bar length must be an integer, got {type(self.length).__name__}"
            )
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ConfigurationError(
                f"Bar length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}"
            )

    @property
    def chunk_weight(self) -> int:
        """Percentage span covered by one cell."""
        return 100 // self.length


# ── Renderer ──────────────────────────────────────────────────────────────────

class BarRenderer:
    """
    Stateful renderer for one progress line.

    State is the clamped percent and, for DOTS/SPINNER, the animation phase.
    Every render of an animated style may advance the phase, so render()
    and render_text() are not idempotent for those styles.
    """

    def __init__(self, config: BarConfig) -> None:
        self._config = config
        self._percent = 0
        self._phase = 0
        log.debug("BarRenderer created: %s", config)

    # ── Public API ────────────────────────────────────────────────────────────

    @property
    def config(self) -> BarConfig:
        return self._config

    @property
    def percent(self) -> int:
        return self._percent

    @property
    def phase(self) -> int:
        return self._phase

    def update(self, percent: int) -> None:
        """
        Set the completion value.

        Values above 100 are clamped to 100. Negative or non-integer
        values raise DomainError.
        """
        if isinstance(percent, bool) or not isinstance(percent, int):
            raise DomainError(f"Percent must be an integer, got {type(percent).__name__}")
        if percent < 0:
            raise DomainError(f"Percent must not be negative, got {percent}")
        if percent > 100:
            log.debug("Percent %d clamped to 100", percent)
            percent = 100
        self._percent = percent

    def is_complete(self) -> bool:
        return self._percent == 100

    def render(self) -> str:
        """
        Return the next line of output.

        No trailing newline and no cursor movement. When colorize is set
        the line carries truecolor escapes and ends with a reset.
        """
        text = self.render_text()
        if self._config.colorize:
            return to_ansi(text)
        return text.plain

    def render_text(self, emits_color: bool = True) -> Text:
        """
        Return the next line of output as a styled rich Text.

        emits_color=False means the destination drops color (a pipe, NO_COLOR),
        so the bracketed remainder falls back to the plain '=' glyph.
        """
        style = self._config.style
        if style.is_animated:
            line = self._render_frame()
        elif style is BarStyle.FILLED_BRACKETED:
            line = self._render_bracketed(emits_color)
        else:
            line = self._render_raw()

        if self._config.show_percent:
            self._append_percent(line)
        return line

    # ── Internal rendering ────────────────────────────────────────────────────

    def _cell_counts(self) -> tuple[int, int]:
        """
        (filled, empty) cell counts for the bracketed bar.

        Integer chunk weights do not divide 100 evenly for most lengths,
        so the two truncated counts can sum to more or less than length.
        The remainder is absorbed by the empty segment.
        """
        filled = self._filled_count()
        empty = (100 - self._percent) // self._config.chunk_weight

        empty += self._config.length - (filled + empty)
        return filled, empty

    def _filled_count(self) -> int:
        # 100 // chunk can exceed length when chunk does not divide 100
        return min(self._percent // self._config.chunk_weight, self._config.length)

    def _render_bracketed(self, emits_color: bool = True) -> Text:
        """
        [██████████░░░░░░░░░░]

        Uncolored bars draw the remainder with '='; colored bars draw it
        with full blocks in a dim gray, unless the gray will not show.
        """
        filled, empty = self._cell_counts()
        t = Text()
        if self._config.colorize:
            t.append(BRACKET_OPEN, style=STYLE_BRACKET)
            t.append(GLYPH_FILLED * filled, style=completion_style(self._percent))
            remainder = GLYPH_EMPTY_COLOR if emits_color else GLYPH_EMPTY_PLAIN
            t.append(remainder * empty, style=STYLE_REMAINING)
            t.append(BRACKET_CLOSE, style=STYLE_BRACKET)
        else:
            t.append(BRACKET_OPEN)
            t.append(GLYPH_FILLED * filled)
            t.append(GLYPH_EMPTY_PLAIN * empty)
            t.append(BRACKET_CLOSE)
        return t

    def _render_raw(self) -> Text:
        filled = self._filled_count()
        style = completion_style(self._percent) if self._config.colorize else None
        return Text(GLYPH_FILLED * filled, style=style or "")

    def _render_frame(self) -> Text:
        """Advance the phase (if due) and return the glyph for it."""
        frames = self._config.style.frames
        if self._should_advance():
            self._phase = (self._phase + 1) % len(frames)
        return Text(frames[self._phase])

    def _should_advance(self) -> bool:
        if self._config.animation is Animation.FRAME:
            return True
        return self._percent % 2 == 0

    def _append_percent(self, t: Text) -> None:
        """Append ' 62%'. Colored: digits in the gradient color, '%' in white."""
        t.append(" ")
        if self._config.colorize:
            t.append(str(self._percent), style=completion_style(self._percent))
            t.append("%", style=STYLE_SUFFIX)
        else:
            t.append(f"{self._percent}%")
