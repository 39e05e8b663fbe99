"""Abstract key events consumed by the session and editor state machines.

The state machines never see prompt_toolkit objects; the TUI translates its
key presses through ``from_prompt_toolkit`` and tests build events directly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Key(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    CLEAR = "clear"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    HOME = "home"
    END = "end"
    TAB = "tab"
    BACKTAB = "backtab"
    ENTER = "enter"
    ESCAPE = "escape"
    NEW_TASK = "new"
    RAISE_PRIORITY = "priority_up"
    LOWER_PRIORITY = "priority_down"
    ARCHIVE = "archive"
    MARK_DONE = "done"
    SAVE = "save"
    EXIT = "exit"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def text(cls, char: str) -> "KeyEvent":
        return cls(Key.CHAR, char)

    @property
    def is_char(self) -> bool:
        return self.key == Key.CHAR


def chars(text: str):
    """Key events typing ``text`` one character at a time."""
    return [KeyEvent.text(ch) for ch in text]


# prompt_toolkit key names -> abstract keys
PROMPT_TOOLKIT_KEYS: Dict[str, Key] = {
    "backspace": Key.BACKSPACE,
    "c-h": Key.BACKSPACE,
    "c-u": Key.CLEAR,
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "tab": Key.TAB,
    "c-i": Key.TAB,
    "s-tab": Key.BACKTAB,
    "enter": Key.ENTER,
    "c-m": Key.ENTER,
    "escape": Key.ESCAPE,
    "c-a": Key.NEW_TASK,
    "c-up": Key.RAISE_PRIORITY,
    "c-down": Key.LOWER_PRIORITY,
    "c-r": Key.ARCHIVE,
    "c-d": Key.MARK_DONE,
    "c-s": Key.SAVE,
    "c-x": Key.EXIT,
    "c-c": Key.EXIT,
}


def from_prompt_toolkit(key_name: str, data: str = "") -> Optional[KeyEvent]:
    """Translate a prompt_toolkit key press; printable characters become CHAR."""
    mapped = PROMPT_TOOLKIT_KEYS.get(key_name)
    if mapped is not None:
        return KeyEvent(mapped)
    text = data or key_name
    if len(text) == 1 and text.isprintable():
        return KeyEvent.text(text)
    return None


__all__ = ["Key", "KeyEvent", "chars", "PROMPT_TOOLKIT_KEYS", "from_prompt_toolkit"]
