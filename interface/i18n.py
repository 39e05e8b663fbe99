"""UI strings lookup: ``LANG_PACK`` entries with English as the fallback."""

import os
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from config import get_user_lang
from interface.constants import LANG_PACK

BASE_LANG = "en"

# every language table carries every key; gaps are filled from English
_TABLES: Mapping[str, Mapping[str, str]] = {
    lang: MappingProxyType({**LANG_PACK[BASE_LANG], **values}) for lang, values in LANG_PACK.items()
}


def available_languages() -> Tuple[str, ...]:
    return tuple(_TABLES)


def translation_table(lang: str) -> Mapping[str, str]:
    return _TABLES.get(lang, _TABLES[BASE_LANG])


def effective_lang(preferred: Optional[str] = None) -> str:
    """TODO_LANG wins; under pytest the default is English so output is stable."""
    env_lang = os.getenv("TODO_LANG")
    if env_lang:
        return env_lang if env_lang in _TABLES else BASE_LANG
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    candidate = preferred or get_user_lang()
    return candidate if candidate in _TABLES else BASE_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Format the ``key`` template; unknown keys come back as the key itself."""
    template = translation_table(effective_lang(lang)).get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["BASE_LANG", "available_languages", "translation_table", "effective_lang", "translate"]
