#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.done": "#6d717a",
        "checkbox.open": "#e5c07b bold",
        "checkbox.done": "#9ad974 bold",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.done": "bg:#3b3b3b #9ad974 bold",
        "selected.open": "bg:#3b3b3b #f0c674 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.done": "#6f757d",
        "checkbox.open": "#f0c674 bold",
        "checkbox.done": "#b8f171 bold",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.done": "bg:#3d4047 #b8f171 bold",
        "selected.open": "bg:#3d4047 #f0c674 bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
    },
    "light": {
        "": "#000000",
        "text": "#000000",
        "text.dim": "#555555",
        "text.done": "#8a8a8a",
        "checkbox.open": "#000000",
        "checkbox.done": "#2e7d32 bold",
        "selected": "bg:#90ee90 #000000 bold",
        "selected.done": "bg:#90ee90 #1b5e20 bold",
        "selected.open": "bg:#90ee90 #000000 bold",
        "header": "#000000 bold",
        "border": "#777777",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
