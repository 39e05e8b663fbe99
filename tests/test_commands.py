from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from application.task_manager import TaskManager
from core import (
    DeleteTask,
    InsertTask,
    NotFoundError,
    Priority,
    SetPriority,
    SetStatus,
    Status,
    Task,
    TaskList,
    UpdateTask,
    apply_command,
)

T0 = datetime(2024, 2, 2, 10, 0, tzinfo=timezone.utc)
LATER = T0 + timedelta(hours=3)


def _list():
    return TaskList(
        next_id=3,
        todos=[
            Task(id=1, title="one", created_at=T0),
            Task(id=2, title="two", priority=Priority.P4, created_at=T0),
        ],
    )


def _manager(task_list):
    repo = SimpleNamespace(load=lambda: task_list, save=lambda tl: None)
    manager = TaskManager(repository=repo)
    manager.load()
    return manager


@pytest.mark.parametrize(
    "command",
    [
        SetPriority(1, Priority.P0),
        SetStatus(2, Status.DONE),
        InsertTask(Task(id=0, title="three", created_at=T0)),
        UpdateTask(Task(id=2, title="renamed", created_at=LATER)),
        DeleteTask(1),
    ],
)
def test_pure_and_in_place_application_agree(command):
    original = _list()
    predicted = apply_command(original, command, LATER)
    manager = _manager(_list())
    manager.execute(command, LATER)
    assert predicted == manager.task_list
    assert original == _list()


def test_insert_takes_next_id_and_bumps_counter():
    result = apply_command(_list(), InsertTask(Task(id=0, title="new", created_at=T0)))
    assert result.todos[-1].id == 3
    assert result.next_id == 4


def test_update_keeps_id_and_created_at():
    result = apply_command(_list(), UpdateTask(Task(id=1, title="renamed", created_at=LATER)))
    task = result.find(1)
    assert task.title == "renamed"
    assert task.created_at == T0


def test_set_status_done_stamps_finished_at():
    result = apply_command(_list(), SetStatus(1, Status.DONE), LATER)
    assert result.find(1).finished_at == LATER


def test_missing_id_raises_not_found():
    with pytest.raises(NotFoundError) as exc:
        apply_command(_list(), SetPriority(42, Priority.P1))
    assert exc.value.task_id == 42
    with pytest.raises(NotFoundError):
        _manager(_list()).execute(DeleteTask(42))
