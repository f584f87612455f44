"""
Tests for kbar.config — config file loading and BarConfig construction.
"""

import pytest

from kbar.bar import Animation, BarConfig, BarStyle
from kbar.config import bar_config_from, load_config
from kbar.errors import ConfigurationError


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(path=tmp_path / "nonexistent" / "config.toml") == {}

    def test_full_bar_table(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            "[bar]\n"
            'style = "spinner"\n'
            "length = 30\n"
            "colorize = false\n"
            "show_percent = true\n"
            'animation = "frame"\n'
        )
        assert load_config(path=cfg) == {
            "style": "spinner",
            "length": 30,
            "colorize": False,
            "show_percent": True,
            "animation": "frame",
        }

    def test_partial_table(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("[bar]\nlength = 12\n")
        assert load_config(path=cfg) == {"length": 12}

    def test_malformed_toml_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("[bar\nlength = \n")
        assert load_config(path=cfg) == {}

    def test_missing_bar_table_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('title = "my config"\n')
        assert load_config(path=cfg) == {}

    def test_bar_not_a_table_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('bar = "spinner"\n')
        assert load_config(path=cfg) == {}

    def test_wrongly_typed_keys_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            "[bar]\n"
            'length = "wide"\n'
            'colorize = "yes"\n'
            "style = 3\n"
            "show_percent = false\n"
        )
        assert load_config(path=cfg) == {"show_percent": False}

    def test_bool_length_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("[bar]\nlength = true\n")
        assert load_config(path=cfg) == {}

    def test_unknown_keys_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("[bar]\nlength = 8\nfancy = true\n")
        assert load_config(path=cfg) == {"length": 8}

    def test_unreadable_file_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("[bar]\nlength = 8\n")
        cfg.chmod(0o000)
        try:
            result = load_config(path=cfg)
        finally:
            cfg.chmod(0o644)  # restore for cleanup
        # root can still read the file; either way nothing raises
        assert result in ({}, {"length": 8})

    def test_default_path_used(self, tmp_path, monkeypatch):
        from kbar import config as config_mod
        cfg = tmp_path / "config.toml"
        cfg.write_text('[bar]\nstyle = "dots"\n')
        monkeypatch.setattr(config_mod, "_CONFIG_PATH", cfg)
        assert load_config() == {"style": "dots"}


class TestBarConfigFrom:
    def test_empty_settings_give_defaults(self):
        assert bar_config_from({}) == BarConfig()

    def test_settings_applied(self):
        cfg = bar_config_from({"style": "raw", "length": 40, "colorize": False})
        assert cfg.style is BarStyle.FILLED_RAW
        assert cfg.length == 40
        assert cfg.colorize is False

    def test_overrides_win(self):
        cfg = bar_config_from({"style": "raw", "length": 40}, style="dots", length=5)
        assert cfg.style is BarStyle.DOTS
        assert cfg.length == 5

    def test_none_overrides_fall_through(self):
        cfg = bar_config_from({"length": 40, "show_percent": False}, length=None, show_percent=None)
        assert cfg.length == 40
        assert cfg.show_percent is False

    def test_false_override_is_kept(self):
        cfg = bar_config_from({"colorize": True}, colorize=False)
        assert cfg.colorize is False

    def test_style_names_case_insensitive(self):
        assert bar_config_from({"style": " Spinner "}).style is BarStyle.SPINNER

    def test_animation_parsed(self):
        assert bar_config_from({"animation": "frame"}).animation is Animation.FRAME

    def test_enum_values_pass_through(self):
        cfg = bar_config_from({}, style=BarStyle.DOTS, animation=Animation.FRAME)
        assert cfg.style is BarStyle.DOTS
        assert cfg.animation is Animation.FRAME

    def test_unknown_style_raises(self):
        with pytest.raises(ConfigurationError, match="bracketed"):
            bar_config_from({"style": "rainbow"})

    def test_unknown_animation_raises(self):
        with pytest.raises(ConfigurationError):
            bar_config_from({"animation": "smooth"})

    def test_out_of_range_length_raises(self):
        with pytest.raises(ConfigurationError):
            bar_config_from({"length": 0})
