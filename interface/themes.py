#!/usr/bin/env python3
"""CLI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "default": {
        "table.border": "#6d717a",
        "table.header": "ansicyan bold",
        "number": "#97a0a9",
        "status.done": "ansigreen",
        "status.todo": "ansired",
        "outline.connector": "#6d717a",
        "outline.root": "ansicyan underline",
        "outline.done": "#97a0a9",
        "message": "",
        "message.error": "ansired bold",
    },
    "mono": {
        "table.border": "",
        "table.header": "bold",
        "number": "",
        "status.done": "bold",
        "status.todo": "",
        "outline.connector": "",
        "outline.root": "underline",
        "outline.done": "italic",
        "message": "",
        "message.error": "bold",
    },
}

DEFAULT_THEME = "default"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))
