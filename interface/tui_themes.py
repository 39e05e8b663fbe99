#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style

from config import DEFAULT_THEME


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "query": "#e8eaec bold",
        "query.hint": "#6d717a italic",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "status.todo": "#97a0a9",
        "status.progress": "#e5c07b bold",
        "status.done": "#9ad974 bold",
        "status.archived": "#6d717a",
        "priority.high": "#e06c75 bold",
        "priority.mid": "#e5c07b",
        "priority.low": "#7a7f85",
        "field.label": "#97a0a9",
        "field.focus": "bg:#3b3b3b #ffb347 bold",
        "field.error": "#e06c75 bold",
        "message": "#9ad974",
        "dirty": "#f9ac60 bold",
        "confirm": "#ff5156 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "query": "#ffffff bold",
        "query.hint": "#6f757d italic",
        "selected": "bg:#3d4047 #e8eaec bold",
        "status.todo": "#a7b0ba",
        "status.progress": "#f0c674 bold",
        "status.done": "#b8f171 bold",
        "status.archived": "#6f757d",
        "priority.high": "#ff6b6b bold",
        "priority.mid": "#f0c674",
        "priority.low": "#8a9097",
        "field.label": "#a7b0ba",
        "field.focus": "bg:#3d4047 #ffb347 bold",
        "field.error": "#ff6b6b bold",
        "message": "#b8f171",
        "dirty": "#f9ac60 bold",
        "confirm": "#ff5156 bold",
    },
}


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))


def priority_style(rank: int) -> str:
    if rank <= 1:
        return "class:priority.high"
    if rank <= 3:
        return "class:priority.mid"
    return "class:priority.low"


__all__ = ["THEMES", "get_theme_palette", "build_style", "priority_style"]
