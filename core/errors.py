"""Domain errors shared by the store, editor and CLI."""

from typing import Optional


class TodoError(Exception):
    """Base class for recoverable task-tracker errors."""


class ValidationError(TodoError):
    """A field constraint was violated (title empty, field too long, bad enum)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(TodoError):
    """An operation referenced a task id absent from the store."""

    def __init__(self, task_id: int):
        super().__init__(f"TODO with ID {task_id} not found")
        self.task_id = task_id


class StorageError(TodoError):
    """The task file exists but cannot be read or parsed."""


__all__ = ["TodoError", "ValidationError", "NotFoundError", "StorageError"]
