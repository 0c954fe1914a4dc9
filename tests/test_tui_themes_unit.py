#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from prompt_toolkit.styles import Style

from core.desktop.devtools.interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_theme_structure(self):
        required_keys = {
            "",
            "text",
            "text.dim",
            "text.done",
            "checkbox.open",
            "checkbox.done",
            "selected",
            "selected.done",
            "selected.open",
            "header",
            "border",
        }
        for theme_name, theme_dict in THEMES.items():
            missing = required_keys - set(theme_dict.keys())
            assert not missing, f"Theme {theme_name} missing keys: {missing}"


class TestGetThemePalette:
    def test_unknown_theme_falls_back_to_default(self):
        assert get_theme_palette("non-existent") == THEMES[DEFAULT_THEME]

    def test_returns_copy(self):
        palette = get_theme_palette(DEFAULT_THEME)
        palette["text"] = "#000000"
        assert THEMES[DEFAULT_THEME]["text"] != "#000000"


def test_build_style_returns_style():
    assert isinstance(build_style("light"), Style)
