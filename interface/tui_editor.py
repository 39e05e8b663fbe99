"""Editor sub-session: a field-focus state machine for one task record.

The editor is an immutable value; every operation returns a new editor.
Invalid input never raises: it is rejected and recorded as a field error.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from core import Priority, Status, Task, ValidationError, now_local
from core.task import (
    CATEGORY_MAX,
    NOTES_MAX,
    PROJECT_MAX,
    TITLE_MAX,
    parse_tags,
    validate_category,
    validate_notes,
    validate_project,
    validate_title,
)
from interface.tui_keys import Key, KeyEvent


class EditorField(Enum):
    TITLE = "title"
    PRIORITY = "priority"
    STATUS = "status"
    CATEGORY = "category"
    PROJECT = "project"
    TAGS = "tags"
    NOTES = "notes"

    @property
    def is_enum(self) -> bool:
        return self in (EditorField.PRIORITY, EditorField.STATUS)


FIELD_ORDER: Tuple[EditorField, ...] = tuple(EditorField)

_TEXT_LIMITS = {
    EditorField.TITLE: TITLE_MAX,
    EditorField.CATEGORY: CATEGORY_MAX,
    EditorField.PROJECT: PROJECT_MAX,
    EditorField.NOTES: NOTES_MAX,
}


@dataclass(frozen=True)
class Finished:
    task: Task
    is_new: bool


@dataclass(frozen=True)
class Cancelled:
    pass


EditorOutcome = Union[Finished, Cancelled]


@dataclass(frozen=True)
class EditorSession:
    original: Optional[Task] = None
    title: str = ""
    priority: Priority = Priority.P2
    status: Status = Status.TODO
    category: str = ""
    project: str = ""
    tags: str = ""
    notes: str = ""
    focus: int = 0
    errors: Dict[EditorField, str] = field(default_factory=dict)

    @classmethod
    def for_task(cls, task: Task) -> "EditorSession":
        return cls(
            original=task,
            title=task.title,
            priority=task.priority,
            status=task.status,
            category=task.category or "",
            project=task.project or "",
            tags=",".join(task.tags),
            notes=task.notes or "",
        )

    @classmethod
    def blank(cls) -> "EditorSession":
        return cls()

    @property
    def is_new(self) -> bool:
        return self.original is None

    @property
    def focused_field(self) -> EditorField:
        return FIELD_ORDER[self.focus]

    def value_of(self, target: EditorField) -> str:
        value = getattr(self, target.value)
        if isinstance(value, (Priority, Status)):
            return value.label
        return value

    # -- contract operations -------------------------------------------------

    def advance_focus(self, direction: int) -> "EditorSession":
        step = 1 if direction >= 0 else -1
        return replace(self, focus=(self.focus + step) % len(FIELD_ORDER))

    def apply_text(self, target: EditorField, text: str) -> "EditorSession":
        """Set a field from raw text, rejecting values that break its limits."""
        if target.is_enum:
            try:
                parsed = Priority.from_string(text) if target == EditorField.PRIORITY else Status.from_string(text)
            except ValidationError as exc:
                return self._with_error(target, exc.message)
            return self.set_enum(target, parsed)
        limit = _TEXT_LIMITS.get(target)
        if limit is not None and len(text.strip()) > limit:
            return self._with_error(target, f"{target.value.capitalize()} cannot exceed {limit} characters")
        if target == EditorField.TAGS:
            try:
                parse_tags(text)
            except ValidationError as exc:
                return self._with_error(target, exc.message)
        return replace(self, errors=self._errors_without(target), **{target.value: text})

    def set_enum(self, target: EditorField, value: Union[Priority, Status]) -> "EditorSession":
        if target == EditorField.PRIORITY and isinstance(value, Priority):
            return replace(self, priority=value, errors=self._errors_without(target))
        if target == EditorField.STATUS and isinstance(value, Status):
            return replace(self, status=value, errors=self._errors_without(target))
        raise ValueError(f"{target.value} does not accept {value!r}")

    def cycle_enum(self, target: EditorField, step: int) -> "EditorSession":
        options = list(Priority) if target == EditorField.PRIORITY else list(Status)
        current = options.index(getattr(self, target.value))
        return self.set_enum(target, options[(current + step) % len(options)])

    def assemble(self, now: Optional[datetime] = None) -> Task:
        """Build the edited task; raises ValidationError naming the bad field."""
        stamp = now or now_local()
        title = validate_title(self.title)
        category = validate_category(self.category)
        project = validate_project(self.project)
        notes = validate_notes(self.notes)
        tags = parse_tags(self.tags)
        base = self.original or Task(id=0, title=title, created_at=stamp)
        task = replace(
            base,
            title=title,
            priority=self.priority,
            tags=tags,
            category=category,
            project=project,
            notes=notes,
        )
        return task.with_status(self.status, stamp)

    def finish(self, now: Optional[datetime] = None) -> Tuple["EditorSession", Optional[Finished]]:
        try:
            task = self.assemble(now)
        except ValidationError as exc:
            target = EditorField(exc.field) if exc.field in {f.value for f in EditorField} else EditorField.TITLE
            return self._with_error(target, exc.message), None
        return replace(self, errors={}), Finished(task=task, is_new=self.is_new)

    def cancel(self) -> Tuple["EditorSession", Cancelled]:
        return self, Cancelled()

    def quick_archive(self, now: Optional[datetime] = None) -> Tuple["EditorSession", Optional[Finished]]:
        return self.set_enum(EditorField.STATUS, Status.ARCHIVED).finish(now)

    # -- key handling ------------------------------------------------------------

    def handle_key(
        self, event: KeyEvent, now: Optional[datetime] = None
    ) -> Tuple["EditorSession", Optional[EditorOutcome]]:
        target = self.focused_field
        key = event.key
        if key == Key.ESCAPE:
            return self.cancel()
        if key in (Key.SAVE, Key.EXIT):
            return self.finish(now)
        if key == Key.ARCHIVE:
            return self.quick_archive(now)
        if key in (Key.TAB, Key.DOWN):
            return self.advance_focus(1), None
        if key in (Key.BACKTAB, Key.UP):
            return self.advance_focus(-1), None
        if key == Key.ENTER:
            if target == EditorField.NOTES:
                return self.apply_text(target, self.notes + "\n"), None
            return self.finish(now)
        if target.is_enum:
            return self._handle_enum_key(target, event), None
        current = self.value_of(target)
        if key == Key.CHAR:
            return self.apply_text(target, current + event.char), None
        if key == Key.BACKSPACE:
            return self.apply_text(target, current[:-1]), None
        if key == Key.CLEAR:
            return self.apply_text(target, ""), None
        return self, None

    def _handle_enum_key(self, target: EditorField, event: KeyEvent) -> "EditorSession":
        if event.key == Key.RIGHT or (event.key == Key.CHAR and event.char == " "):
            return self.cycle_enum(target, 1)
        if event.key == Key.LEFT:
            return self.cycle_enum(target, -1)
        if event.key == Key.CHAR and target == EditorField.PRIORITY and event.char and event.char in "012345":
            return self.apply_text(target, f"P{event.char}")
        return self

    def _errors_without(self, target: EditorField) -> Dict[EditorField, str]:
        return {k: v for k, v in self.errors.items() if k != target}

    def _with_error(self, target: EditorField, message: str) -> "EditorSession":
        errors = dict(self.errors)
        errors[target] = message
        return replace(self, errors=errors)


__all__ = [
    "EditorField",
    "FIELD_ORDER",
    "EditorSession",
    "EditorOutcome",
    "Finished",
    "Cancelled",
]
