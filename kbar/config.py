"""
Config file loading for kbar.

Reads ~/.config/kbar/config.toml and returns the [bar] table as a dict.
load_config() never raises — unusable keys are dropped, the rest is kept.

Example:
    [bar]
    style = "spinner"
    length = 30
    colorize = false
    show_percent = true
    animation = "frame"
"""

import logging
from pathlib import Path
from typing import Any

from kbar.bar import Animation, BarConfig, BarStyle
from kbar.errors import ConfigurationError

log = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "kbar" / "config.toml"

# key → accepted Python type; bools never count as ints
_KEY_TYPES: dict[str, type] = {
    "style": str,
    "animation": str,
    "length": int,
    "colorize": bool,
    "show_percent": bool,
}


def load_config(path: Path | None = None) -> dict:
    """
    Load bar defaults from a TOML file.

    Returns a dict containing only the keys that were present and of the
    right type. Missing file, read errors and parse errors return {}.
    """
    config_path = path or _CONFIG_PATH

    if not config_path.is_file():
        return {}

    try:
        raw = config_path.read_bytes()
    except OSError as e:
        log.debug("Cannot read %s: %s", config_path, e)
        return {}

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return {}

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception as e:
        log.debug("Ignoring malformed config %s: %s", config_path, e)
        return {}

    table = data.get("bar")
    if not isinstance(table, dict):
        return {}

    settings: dict[str, Any] = {}
    for key, expected in _KEY_TYPES.items():
        if key not in table:
            continue
        value = table[key]
        if expected is int and isinstance(value, bool):
            continue
        if not isinstance(value, expected):
            log.debug("Ignoring config key %r: expected %s", key, expected.__name__)
            continue
        settings[key] = value
    return settings


def bar_config_from(settings: dict, **overrides: Any) -> BarConfig:
    """
    Build a BarConfig from loaded settings plus explicit overrides.

    Overrides whose value is None are ignored, so CLI options that were
    not given fall through to the file. Raises ConfigurationError for an
    unknown style or animation name, or an out-of-range length.
    """
    merged = dict(settings)
    merged.update({k: v for k, v in overrides.items() if v is not None})

    kwargs: dict[str, Any] = {}
    if "style" in merged:
        kwargs["style"] = _parse_enum(BarStyle, merged["style"], "style")
    if "animation" in merged:
        kwargs["animation"] = _parse_enum(Animation, merged["animation"], "animation")
    for key in ("length", "colorize", "show_percent"):
        if key in merged:
            kwargs[key] = merged[key]

    return BarConfig(**kwargs)


def _parse_enum(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(f"Unknown {label} {value!r} (choose from: {choices})") from None
