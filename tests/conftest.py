"""
Shared pytest fixtures.
"""
import logging
from io import StringIO

import pytest
from rich.console import Console

from kbar import config as config_mod
from kbar.ui.terminal import Terminal


@pytest.fixture(autouse=True)
def isolate_config_file(tmp_path, monkeypatch):
    """Never read the developer's real ~/.config/kbar/config.toml."""
    monkeypatch.setattr(config_mod, "_CONFIG_PATH", tmp_path / "no-such-config.toml")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """configure_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _terminal(**console_kwargs) -> tuple[Terminal, StringIO]:
    buf = StringIO()
    kwargs = dict(file=buf, color_system=None, highlight=False, width=200)
    kwargs.update(console_kwargs)
    return Terminal(Console(**kwargs)), buf


@pytest.fixture
def pipe_terminal() -> tuple[Terminal, StringIO]:
    """Terminal over a plain buffer — behaves like output piped to a file."""
    return _terminal(force_terminal=False)


@pytest.fixture
def tty_terminal() -> tuple[Terminal, StringIO]:
    """Terminal that believes it is interactive, so cursor codes are emitted."""
    return _terminal(force_terminal=True)


@pytest.fixture
def color_terminal() -> tuple[Terminal, StringIO]:
    """Interactive truecolor terminal."""
    return _terminal(force_terminal=True, color_system="truecolor", no_color=False)


@pytest.fixture
def no_color_terminal() -> tuple[Terminal, StringIO]:
    """Interactive truecolor terminal with NO_COLOR in effect."""
    return _terminal(force_terminal=True, color_system="truecolor", no_color=True)
