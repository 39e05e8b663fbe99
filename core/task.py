"""Task and TaskList domain models.

Tasks are immutable values; every mutation produces a new Task through
``dataclasses.replace`` so ranked snapshots never change underneath the UI.
The TaskList aggregate is owned by the store (see application.task_manager).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import ValidationError
from .priority import Priority
from .status import Status

TITLE_MAX = 200
CATEGORY_MAX = 50
PROJECT_MAX = 100
NOTES_MAX = 2000
TAG_MAX = 30


def now_local() -> datetime:
    return datetime.now().astimezone()


def as_aware(value: datetime) -> datetime:
    """Naive timestamps are taken as local time."""
    return value if value.tzinfo is not None else value.astimezone()


def validate_title(title: str) -> str:
    trimmed = (title or "").strip()
    if not trimmed:
        raise ValidationError("Title cannot be empty", field="title")
    if len(trimmed) > TITLE_MAX:
        raise ValidationError(
            f"Title cannot exceed {TITLE_MAX} characters (current: {len(trimmed)})", field="title"
        )
    return trimmed


def _validate_optional(value: Optional[str], limit: int, name: str) -> Optional[str]:
    if value is None:
        return None
    if len(value) > limit:
        raise ValidationError(
            f"{name.capitalize()} cannot exceed {limit} characters (current: {len(value)})", field=name
        )
    trimmed = value.strip()
    return trimmed or None


def validate_category(category: Optional[str]) -> Optional[str]:
    return _validate_optional(category, CATEGORY_MAX, "category")


def validate_project(project: Optional[str]) -> Optional[str]:
    return _validate_optional(project, PROJECT_MAX, "project")


def validate_notes(notes: Optional[str]) -> Optional[str]:
    return _validate_optional(notes, NOTES_MAX, "notes")


def normalize_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Lowercase, replace inner spaces with underscores, drop empties and duplicates."""
    seen: List[str] = []
    for raw in tags:
        tag = (raw or "").strip().lower().replace(" ", "_")
        if not tag:
            continue
        if len(tag) > TAG_MAX:
            raise ValidationError(f"Tag '{tag}' cannot exceed {TAG_MAX} characters", field="tags")
        if tag not in seen:
            seen.append(tag)
    return tuple(seen)


def parse_tags(text: str) -> Tuple[str, ...]:
    """Parse comma-separated tag input as typed in the editor or CLI."""
    return normalize_tags((text or "").split(","))


def update_tags(tags: Iterable[str], spec: str) -> Tuple[str, ...]:
    """Apply ``+tag`` / ``-tag`` edits (comma-separated) to an existing tag list."""
    result = list(tags)
    for part in (spec or "").split(","):
        part = part.strip()
        if part.startswith("+"):
            for tag in normalize_tags([part[1:]]):
                if tag not in result:
                    result.append(tag)
        elif part.startswith("-"):
            drop = part[1:].strip().lower()
            result = [t for t in result if t != drop]
    return tuple(result)


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    priority: Priority = Priority.P2
    status: Status = Status.TODO
    tags: Tuple[str, ...] = ()
    category: Optional[str] = None
    project: Optional[str] = None
    created_at: datetime = field(default_factory=now_local)
    finished_at: Optional[datetime] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", as_aware(self.created_at))
        if self.finished_at is not None:
            object.__setattr__(self, "finished_at", as_aware(self.finished_at))

    @classmethod
    def new(
        cls,
        title: str,
        *,
        priority: Priority = Priority.P2,
        status: Status = Status.TODO,
        tags: Iterable[str] = (),
        category: Optional[str] = None,
        project: Optional[str] = None,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Task":
        """Validated constructor; the store assigns the id on insert."""
        created = now or now_local()
        task = cls(
            id=0,
            title=validate_title(title),
            priority=priority,
            status=Status.TODO,
            tags=normalize_tags(tags),
            category=validate_category(category),
            project=validate_project(project),
            created_at=created,
            notes=validate_notes(notes),
        )
        return task.with_status(status, created)

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    def with_status(self, status: Status, now: Optional[datetime] = None) -> "Task":
        """Change status applying the finished_at transition rule."""
        if status == self.status:
            return self
        if status == Status.DONE:
            stamp = as_aware(now) if now else now_local()
            if stamp < self.created_at:
                stamp = self.created_at
            return replace(self, status=status, finished_at=stamp)
        return replace(self, status=status, finished_at=None)

    def with_priority(self, priority: Priority) -> "Task":
        return replace(self, priority=priority)

    def to_record(self) -> Dict[str, Any]:
        """Persisted record shape; absent optionals are written as null."""
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority.label,
            "status": self.status.label,
            "tags": list(self.tags),
            "category": self.category,
            "project": self.project,
            "created_date": self.created_at.isoformat(),
            "finished_date": self.finished_at.isoformat() if self.finished_at else None,
            "notes": self.notes,
        }


@dataclass
class TaskList:
    next_id: int = 1
    todos: List[Task] = field(default_factory=list)

    def snapshot(self) -> "TaskList":
        return TaskList(next_id=self.next_id, todos=list(self.todos))

    def find(self, task_id: int) -> Optional[Task]:
        for task in self.todos:
            if task.id == task_id:
                return task
        return None

    def index_of(self, task_id: int) -> Optional[int]:
        for idx, task in enumerate(self.todos):
            if task.id == task_id:
                return idx
        return None

    def to_document(self) -> Dict[str, Any]:
        return {"next_id": self.next_id, "todos": [t.to_record() for t in self.todos]}


__all__ = [
    "Task",
    "TaskList",
    "now_local",
    "validate_title",
    "validate_category",
    "validate_project",
    "validate_notes",
    "normalize_tags",
    "parse_tags",
    "update_tags",
    "TITLE_MAX",
    "CATEGORY_MAX",
    "PROJECT_MAX",
    "NOTES_MAX",
    "TAG_MAX",
]
