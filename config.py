from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

USER_CONFIG_PATH = Path.home() / ".todo_config.yaml"

DEFAULT_THEME = "dark-olive"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class UiConfig:
    """Immutable UI settings, built once at startup and passed explicitly."""

    theme: str = DEFAULT_THEME
    lang: str = "en"
    autosave: bool = True
    show_scores: bool = False
    page_size: int = 10


def load_ui_config(**overrides: Any) -> UiConfig:
    data = _load_config()
    values: Dict[str, Any] = {
        "theme": str(data.get("theme") or DEFAULT_THEME),
        "lang": os.getenv("TODO_LANG") or str(data.get("lang") or "en"),
        "autosave": _as_bool(data.get("autosave"), True),
        "show_scores": _as_bool(data.get("show_scores"), False),
    }
    try:
        values["page_size"] = max(1, int(data.get("page_size", 10)))
    except (TypeError, ValueError):
        values["page_size"] = 10
    values.update({k: v for k, v in overrides.items() if v is not None})
    return UiConfig(**values)
