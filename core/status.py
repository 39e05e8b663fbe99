from enum import Enum
from typing import Final, Mapping

from .errors import ValidationError


class Status(Enum):
    TODO = ("Todo", "status.todo", "T")
    IN_PROGRESS = ("InProgress", "status.progress", "W")
    DONE = ("Done", "status.done", "D")
    ARCHIVED = ("Archived", "status.archived", "A")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    @property
    def is_active(self) -> bool:
        return self in (Status.TODO, Status.IN_PROGRESS)

    @classmethod
    def from_string(cls, value: str) -> "Status":
        code = normalize_task_status(value)
        return _BY_CODE[code]


_ALIASES: Final[Mapping[str, str]] = {
    "todo": "todo",
    "inprogress": "inprogress",
    "in-progress": "inprogress",
    "in_progress": "inprogress",
    "done": "done",
    "archived": "archived",
}

_BY_CODE: Final[Mapping[str, Status]] = {
    "todo": Status.TODO,
    "inprogress": Status.IN_PROGRESS,
    "done": Status.DONE,
    "archived": Status.ARCHIVED,
}


def normalize_task_status(value: str) -> str:
    """Normalize status input to an internal code (todo/inprogress/done/archived).

    Accepts the persisted labels (``InProgress``) as well as the CLI spellings
    (``in-progress``, ``in_progress``), case-insensitively.
    """
    token = (value or "").strip().lower()
    code = _ALIASES.get(token)
    if code is None:
        raise ValidationError(
            f"Invalid status: {value}. Valid values: todo, inprogress, done, archived",
            field="status",
        )
    return code


def try_parse_status(value: str):
    """Return the matching Status or None (used where bad input must degrade)."""
    code = _ALIASES.get((value or "").strip().lower())
    return _BY_CODE[code] if code else None


__all__ = ["Status", "normalize_task_status", "try_parse_status"]
