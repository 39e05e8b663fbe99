from pathlib import Path
import os

LOCAL_FILE_NAMES = ("TODO.yaml", "TODO.yml", "todo.yaml", "todo.yml")


def get_data_dir() -> Path:
    """Global data directory (~/.local/share/guidebook)."""
    return Path.home() / ".local" / "share" / "guidebook"


def resolve_todo_file(cwd: Path | None = None) -> Path:
    """Unified resolver for the task list file.

    Priority:
    1. TODO_FILE env variable (for tests and scripting).
    2. A project-local TODO.yaml / TODO.yml / todo.yaml / todo.yml in cwd.
    3. Global ~/.local/share/guidebook/guidebook-todo/todo.yaml.
    """
    env_file = os.environ.get("TODO_FILE")
    if env_file:
        return Path(env_file).expanduser().resolve()

    base = Path(cwd) if cwd else Path.cwd()
    for name in LOCAL_FILE_NAMES:
        candidate = base / name
        if candidate.exists():
            return candidate.resolve()

    return (get_data_dir() / "guidebook-todo" / "todo.yaml").resolve()


__all__ = ["resolve_todo_file", "get_data_dir", "LOCAL_FILE_NAMES"]
