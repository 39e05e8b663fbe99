"""Application-level task store: owns the TaskList for one session."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

import yaml

from application.ports import TaskRepository
from core import (
    DeleteTask,
    InsertTask,
    NotFoundError,
    SetPriority,
    SetStatus,
    StoreCommand,
    Task,
    TaskList,
    UpdateTask,
    now_local,
)
from infrastructure.file_repository import YamlTaskRepository

logger = logging.getLogger("todo.store")


class TaskManager:
    """Loaded once per session, mutated in place, saved on demand."""

    def __init__(self, repository: Optional[TaskRepository] = None):
        self.repository: TaskRepository = repository or YamlTaskRepository()
        self.task_list: TaskList = TaskList()
        self.loaded = False

    def load(self) -> TaskList:
        self.task_list = self.repository.load()
        self.loaded = True
        logger.debug("loaded %d tasks (next_id=%d)", len(self.task_list.todos), self.task_list.next_id)
        return self.task_list

    def save(self) -> bool:
        """Persist the list; failures are logged and reported as False."""
        try:
            self.repository.save(self.task_list)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Saving task list failed: %s", exc)
            return False
        return True

    def snapshot(self) -> TaskList:
        return self.task_list.snapshot()

    def next_id(self) -> int:
        return self.task_list.next_id

    def list_tasks(self) -> List[Task]:
        return list(self.task_list.todos)

    def get(self, task_id: int) -> Task:
        task = self.task_list.find(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def insert(self, task: Task) -> Task:
        """Append ``task`` under the next id; ids are never reused."""
        stored = replace(task, id=self.task_list.next_id)
        self.task_list.todos.append(stored)
        self.task_list.next_id += 1
        return stored

    def update(self, task: Task) -> Task:
        idx = self.task_list.index_of(task.id)
        if idx is None:
            raise NotFoundError(task.id)
        current = self.task_list.todos[idx]
        stored = replace(task, created_at=current.created_at)
        self.task_list.todos[idx] = stored
        return stored

    def delete(self, task_id: int) -> Task:
        idx = self.task_list.index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id)
        return self.task_list.todos.pop(idx)

    def execute(self, command: StoreCommand, now: Optional[datetime] = None) -> Task:
        """Apply a session command in place; returns the affected task."""
        if isinstance(command, InsertTask):
            return self.insert(command.task)
        if isinstance(command, UpdateTask):
            return self.update(command.task)
        if isinstance(command, DeleteTask):
            return self.delete(command.task_id)
        current = self.get(command.task_id)
        if isinstance(command, SetPriority):
            return self.update(current.with_priority(command.priority))
        if isinstance(command, SetStatus):
            return self.update(current.with_status(command.status, now or now_local()))
        raise TypeError(f"Unknown store command: {command!r}")


__all__ = ["TaskManager"]
