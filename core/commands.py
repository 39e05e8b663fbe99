"""Store mutation commands.

The interactive session never mutates the task list it ranks. It emits these
commands; the store executes them in place (TaskManager.execute) and the
session re-ranks a copy-on-write snapshot produced by ``apply_command``.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Union

from .errors import NotFoundError
from .priority import Priority
from .status import Status
from .task import Task, TaskList, now_local


@dataclass(frozen=True)
class SetPriority:
    task_id: int
    priority: Priority


@dataclass(frozen=True)
class SetStatus:
    task_id: int
    status: Status


@dataclass(frozen=True)
class InsertTask:
    task: Task


@dataclass(frozen=True)
class UpdateTask:
    task: Task


@dataclass(frozen=True)
class DeleteTask:
    task_id: int


StoreCommand = Union[SetPriority, SetStatus, InsertTask, UpdateTask, DeleteTask]


def apply_command(task_list: TaskList, command: StoreCommand, now: Optional[datetime] = None) -> TaskList:
    """Return a new TaskList with ``command`` applied; ``task_list`` is untouched.

    Inserts take ``task_list.next_id`` so the id predicted here matches the one
    the store assigns when it executes the same command.
    """
    result = task_list.snapshot()
    if isinstance(command, InsertTask):
        result.todos.append(replace(command.task, id=result.next_id))
        result.next_id += 1
        return result

    task_id = command.task.id if isinstance(command, UpdateTask) else command.task_id
    idx = result.index_of(task_id)
    if idx is None:
        raise NotFoundError(task_id)
    if isinstance(command, DeleteTask):
        del result.todos[idx]
        return result
    current = result.todos[idx]
    if isinstance(command, SetPriority):
        result.todos[idx] = current.with_priority(command.priority)
    elif isinstance(command, SetStatus):
        result.todos[idx] = current.with_status(command.status, now or now_local())
    else:
        result.todos[idx] = replace(command.task, id=current.id, created_at=current.created_at)
    return result


__all__ = [
    "SetPriority",
    "SetStatus",
    "InsertTask",
    "UpdateTask",
    "DeleteTask",
    "StoreCommand",
    "apply_command",
]
