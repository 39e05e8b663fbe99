from .errors import TodoError, ValidationError, NotFoundError, StorageError
from .priority import Priority
from .status import Status
from .task import Task, TaskList, now_local
from .query import Query, parse_query
from .ranking import RankedTask, Overview, rank, default_overview, filter_tasks, task_stats
from .commands import (
    SetPriority,
    SetStatus,
    InsertTask,
    UpdateTask,
    DeleteTask,
    StoreCommand,
    apply_command,
)

__all__ = [
    "TodoError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "Priority",
    "Status",
    "Task",
    "TaskList",
    "now_local",
    # Query engine
    "Query",
    "parse_query",
    "RankedTask",
    "Overview",
    "rank",
    "default_overview",
    "filter_tasks",
    "task_stats",
    # Store commands
    "SetPriority",
    "SetStatus",
    "InsertTask",
    "UpdateTask",
    "DeleteTask",
    "StoreCommand",
    "apply_command",
]
