"""Text width helpers with proper Unicode width handling."""

from typing import List

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    return sum(_char_width(ch) for ch in text)


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed ``width``."""
    acc = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def ellipsize(text: str, width: int) -> str:
    """Trim to ``width`` and mark the cut with an ellipsis."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    return trim_display(text, width - 1) + "…"


def pad_display(text: str, width: int) -> str:
    """Ellipsize and pad with spaces to exact visible width."""
    trimmed = ellipsize(text, width)
    gap = width - display_width(trimmed)
    return trimmed + " " * gap if gap > 0 else trimmed


def wrap_display(text: str, width: int) -> List[str]:
    """Wrap text into lines of at most ``width`` visible columns."""
    lines: List[str] = []
    for raw in text.splitlines() or [""]:
        current = ""
        used = 0
        for ch in raw:
            w = _char_width(ch)
            if used + w > width and current:
                lines.append(current)
                current, used = ch, w
            else:
                current += ch
                used += w
        lines.append(current)
    return lines


__all__ = ["display_width", "trim_display", "ellipsize", "pad_display", "wrap_display"]
