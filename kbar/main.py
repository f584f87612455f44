"""
kbar — entry point.

CLI flags, config resolution, and a 0 → 100% sweep of one progress line.
"""

import logging
import time
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from kbar import __version__
from kbar.bar import Animation, BarStyle
from kbar.config import bar_config_from, load_config
from kbar.errors import ConfigurationError, TerminalError
from kbar.logging import configure_logging
from kbar.ui.display import ProgressLine
from kbar.ui.terminal import Terminal

log = logging.getLogger(__name__)


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(highlight=False)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="kbar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="kbar")
# Bar shape
@click.option(
    "--style",
    type=click.Choice([s.value for s in BarStyle], case_sensitive=False),
    default=None,
    help="Bar style (default: bracketed).",
)
@click.option(
    "--length",
    type=int,
    default=None,
    help="Bar width in cells, 1-100 (default: 20).",
)
@click.option("--color/--no-color", "colorize", default=None, help="Colorize the bar.")
@click.option("--percent/--no-percent", "show_percent", default=None,
              help="Show the numeric percentage after the bar.")
@click.option(
    "--animation",
    type=click.Choice([a.value for a in Animation], case_sensitive=False),
    default=None,
    help="Dots/spinner: advance on even percentages (parity) or on every frame.",
)
# Sweep
@click.option("--steps", type=click.IntRange(min=1), default=1000, show_default=True,
              help="Number of frames from 0% to 100%.")
@click.option("--delay", type=click.FloatRange(min=0), default=0.01, show_default=True,
              help="Seconds between frames.")
# Placement
@click.option("--at", "at", metavar="X,Y", default=None,
              help="Draw at an absolute cell instead of the current line.")
@click.option("--clear", is_flag=True, default=False, help="Clear the screen first.")
# Config / logging
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/kbar/config.toml).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging on stderr.")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only log warnings.")
def cli(
    style: Optional[str],
    length: Optional[int],
    colorize: Optional[bool],
    show_percent: Optional[bool],
    animation: Optional[str],
    steps: int,
    delay: float,
    at: Optional[str],
    clear: bool,
    config_path: Optional[Path],
    verbose: bool,
    quiet: bool,
) -> None:
    """Draw a progress bar sweeping from 0% to 100%.

    Options not given here fall back to the [bar] table of the config
    file, then to the built-in defaults.

    \b
    Environment variables:
      NO_COLOR=1   Disable all colour output.
    """
    configure_logging("verbose" if verbose else "quiet" if quiet else "normal")

    # ── Resolve configuration ─────────────────────────────────────────────────
    settings = load_config(config_path)
    if settings:
        log.info("Loaded %d setting(s) from the config file", len(settings))
    log.debug("Config file settings: %s", settings)
    try:
        config = bar_config_from(
            settings,
            style=style,
            length=length,
            colorize=colorize,
            show_percent=show_percent,
            animation=animation,
        )
        position = _parse_position(at) if at else None
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    # ── Sweep ─────────────────────────────────────────────────────────────────
    line = ProgressLine(config, terminal=Terminal(console), position=position)
    try:
        with line:
            if clear:
                line.clear_screen()
            _sweep(line, steps, delay)
    except TerminalError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("  [dim]Cancelled.[/dim]")
        return

    log.debug("Sweep finished after %d frames", steps)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _sweep(line: ProgressLine, steps: int, delay: float) -> None:
    """Draw steps frames, the last one at exactly 100%."""
    for i in range(steps):
        percent = int(i / (steps - 1) * 100) if steps > 1 else 100
        line.update(percent)
        line.draw()
        if delay:
            time.sleep(delay)


def _parse_position(value: str) -> tuple[int, int]:
    """'3,5' → (3, 5)."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ConfigurationError(f"--at expects X,Y, got {value!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise ConfigurationError(f"--at expects integers, got {value!r}") from None
    if x < 0 or y < 0:
        raise ConfigurationError(f"--at expects non-negative coordinates, got {value!r}")
    return x, y


if __name__ == "__main__":
    cli()
