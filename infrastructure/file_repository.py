import os
import tempfile
from pathlib import Path

import yaml

from core import StorageError, TaskList, ValidationError
from application.ports import TaskRepository
from infrastructure.task_file_parser import TaskFileParser


class YamlTaskRepository(TaskRepository):
    def __init__(self, path: Path | None = None):
        if path is None:
            # TODO_FILE env, then a project-local TODO.yaml, then the global data dir
            from infrastructure.todo_file_resolver import resolve_todo_file
            self.path = resolve_todo_file()
        else:
            self.path = Path(path)

    def load(self) -> TaskList:
        """Read the task list; a missing or blank file is an empty list."""
        if not self.path.exists():
            return TaskList()
        content = self.path.read_text(encoding="utf-8")
        try:
            return TaskFileParser.parse_document(content)
        except (yaml.YAMLError, ValidationError, KeyError, TypeError, ValueError, AttributeError) as exc:
            raise StorageError(f"Cannot parse {self.path}: {exc}") from exc

    def save(self, task_list: TaskList) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = TaskFileParser.dump_document(task_list)
        # write-then-rename so a crash never leaves a truncated file
        fd, tmp_name = tempfile.mkstemp(prefix=".todo-", suffix=".yaml", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


__all__ = ["YamlTaskRepository"]
