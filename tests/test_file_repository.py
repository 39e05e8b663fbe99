from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from core import Priority, Status, StorageError, Task, TaskList
from infrastructure.file_repository import YamlTaskRepository
from infrastructure.task_file_parser import TaskFileParser
from infrastructure.todo_file_resolver import resolve_todo_file

T0 = datetime(2024, 6, 1, 9, 15, 30, tzinfo=timezone(timedelta(hours=2)))


def _sample_list() -> TaskList:
    return TaskList(
        next_id=5,
        todos=[
            Task(
                id=1,
                title="Repository roundtrip sample",
                priority=Priority.P1,
                status=Status.DONE,
                tags=("repo", "yaml"),
                category="work",
                project="tracker",
                created_at=T0,
                finished_at=T0 + timedelta(hours=1),
                notes="multi\nline notes, ünïcode",
            ),
            Task(id=4, title="Bare task", created_at=T0),
        ],
    )


def test_file_repository_roundtrip(tmp_path: Path):
    repo = YamlTaskRepository(tmp_path / "nested" / "todo.yaml")
    repo.save(_sample_list())
    loaded = repo.load()
    assert loaded == _sample_list()


def test_naive_timestamps_survive_save_and_reload(tmp_path: Path):
    task = Task(
        id=1,
        title="naive",
        status=Status.DONE,
        created_at=datetime(2024, 1, 1, 9),
        finished_at=datetime(2024, 1, 2, 9),
    )
    repo = YamlTaskRepository(tmp_path / "todo.yaml")
    repo.save(TaskList(next_id=2, todos=[task]))
    loaded = repo.load().find(1)
    assert loaded == task
    assert loaded.created_at.utcoffset() == task.created_at.utcoffset()


def test_saved_document_shape(tmp_path: Path):
    path = tmp_path / "todo.yaml"
    YamlTaskRepository(path).save(_sample_list())
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data["next_id"] == 5
    bare = data["todos"][1]
    assert bare["category"] is None and bare["finished_date"] is None and bare["notes"] is None
    assert data["todos"][0]["status"] == "Done"
    assert list(path.parent.glob(".todo-*")) == []


def test_missing_or_blank_file_is_empty_list(tmp_path: Path):
    path = tmp_path / "todo.yaml"
    assert YamlTaskRepository(path).load() == TaskList()
    path.write_text("  \n", encoding="utf-8")
    assert YamlTaskRepository(path).load() == TaskList()


def test_missing_keys_mean_absent_and_next_id_is_repaired():
    content = """
next_id: 2
todos:
  - id: 7
    title: Legacy record
    priority: P3
    status: InProgress
    created_date: 2024-01-02T03:04:05.123456789Z
"""
    task_list = TaskFileParser.parse_document(content)
    assert task_list.next_id == 8
    task = task_list.todos[0]
    assert task.tags == () and task.category is None and task.finished_at is None
    assert task.status == Status.IN_PROGRESS
    assert task.created_at == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)


def test_corrupt_file_raises_storage_error(tmp_path: Path):
    path = tmp_path / "todo.yaml"
    path.write_text("todos: [ {id: 1, title: x, status: Bogus} ]", encoding="utf-8")
    with pytest.raises(StorageError):
        YamlTaskRepository(path).load()
    path.write_text("todos: [unclosed", encoding="utf-8")
    with pytest.raises(StorageError):
        YamlTaskRepository(path).load()


def test_resolver_prefers_env_then_local_file(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("TODO_FILE", str(tmp_path / "env.yaml"))
    assert resolve_todo_file(tmp_path) == (tmp_path / "env.yaml").resolve()

    monkeypatch.delenv("TODO_FILE")
    (tmp_path / "todo.yml").write_text("", encoding="utf-8")
    assert resolve_todo_file(tmp_path) == (tmp_path / "todo.yml").resolve()
    (tmp_path / "TODO.yaml").write_text("", encoding="utf-8")
    assert resolve_todo_file(tmp_path) == (tmp_path / "TODO.yaml").resolve()


def test_resolver_falls_back_to_data_dir(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    resolved = resolve_todo_file(tmp_path / "empty")
    assert resolved.parts[-3:] == ("guidebook", "guidebook-todo", "todo.yaml")
