import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from application.task_manager import TaskManager
from core import (
    Priority,
    Status,
    Task,
    default_overview,
    filter_tasks,
    task_stats,
)
from core.task import parse_tags, update_tags, validate_category, validate_notes, validate_project
from interface.cli_display import format_detail, format_list, format_overview, format_stats
from interface.cli_io import emit, fail
from interface.serializers import overview_to_dict, task_to_dict

logger = logging.getLogger("todo.cli")

TaskManagerFactory = Callable[[], TaskManager]
Translate = Callable[..., str]


@dataclass
class CliDeps:
    manager_factory: TaskManagerFactory
    translate: Translate
    rng_factory: Callable[[], random.Random] = random.Random


def _load(deps: CliDeps) -> TaskManager:
    manager = deps.manager_factory()
    if not manager.loaded:
        manager.load()
    return manager


def _save_or_fail(args, command: str, manager: TaskManager, deps: CliDeps) -> Optional[int]:
    if manager.save():
        return None
    return fail(args, command, deps.translate("ERR_SAVE_FAILED", path=getattr(manager.repository, "path", "")))


def cmd_overview(args, deps: CliDeps) -> int:
    manager = _load(deps)
    tasks = manager.list_tasks()
    overview = default_overview(tasks, deps.rng_factory())
    counts = {
        "active": sum(1 for t in tasks if t.is_active),
        "done": sum(1 for t in tasks if t.status == Status.DONE),
        "archived": sum(1 for t in tasks if t.status == Status.ARCHIVED),
    }
    return emit(
        args,
        "overview",
        payload={**overview_to_dict(overview), "counts": counts},
        lines=format_overview(overview, counts),
    )


def cmd_add(args, deps: CliDeps) -> int:
    manager = _load(deps)
    task = Task.new(
        args.title,
        priority=Priority.from_string(args.priority) if getattr(args, "priority", None) else Priority.default(),
        status=Status.from_string(args.status) if getattr(args, "status", None) else Status.TODO,
        tags=parse_tags(getattr(args, "tags", None) or ""),
        category=getattr(args, "category", None),
        project=getattr(args, "project", None),
        notes=getattr(args, "notes", None),
    )
    stored = manager.insert(task)
    failed = _save_or_fail(args, "add", manager, deps)
    if failed is not None:
        return failed
    logger.info("added task %d", stored.id)
    return emit(
        args,
        "add",
        message=deps.translate("MSG_ADDED", task_id=stored.id, title=stored.title),
        payload={"task": task_to_dict(stored)},
    )


def cmd_list(args, deps: CliDeps) -> int:
    manager = _load(deps)
    status = Status.from_string(args.status) if getattr(args, "status", None) else None
    priority = Priority.from_string(args.priority) if getattr(args, "priority", None) else None
    tags = parse_tags(getattr(args, "tags", None) or "")
    include_all = bool(getattr(args, "all", False))
    tasks: List[Task] = filter_tasks(
        manager.list_tasks(),
        status=status,
        category=getattr(args, "category", None),
        priority=priority,
        tags=tags,
        include_archived=include_all,
    )
    payload = {
        "total": len(tasks),
        "filters": {
            "status": status.label if status else "",
            "category": getattr(args, "category", None) or "",
            "priority": priority.label if priority else "",
            "tags": list(tags),
            "all": include_all,
        },
        "tasks": [task_to_dict(t) for t in tasks],
    }
    message = deps.translate("MSG_LIST_COUNT", count=len(tasks)) if tasks else ""
    return emit(args, "list", message=message, payload=payload, lines=format_list(tasks))


def cmd_show(args, deps: CliDeps) -> int:
    manager = _load(deps)
    task = manager.get(args.task_id)
    return emit(
        args,
        "show",
        payload={"task": task_to_dict(task)},
        lines=format_detail(task),
        summary=f"{task.id}: {task.title}",
    )


def cmd_update(args, deps: CliDeps) -> int:
    manager = _load(deps)
    current = manager.get(args.task_id)
    updated = current
    if getattr(args, "priority", None):
        updated = updated.with_priority(Priority.from_string(args.priority))
    if getattr(args, "tags", None):
        updated = replace(updated, tags=update_tags(updated.tags, args.tags))
    # an empty string clears the optional field
    if getattr(args, "category", None) is not None:
        updated = replace(updated, category=validate_category(args.category))
    if getattr(args, "project", None) is not None:
        updated = replace(updated, project=validate_project(args.project))
    if getattr(args, "notes", None) is not None:
        updated = replace(updated, notes=validate_notes(args.notes))
    if getattr(args, "status", None):
        updated = updated.with_status(Status.from_string(args.status))
    stored = manager.update(updated)
    failed = _save_or_fail(args, "update", manager, deps)
    if failed is not None:
        return failed
    return emit(
        args,
        "update",
        message=deps.translate("MSG_UPDATED", task_id=stored.id),
        payload={"task": task_to_dict(stored)},
    )


def cmd_delete(args, deps: CliDeps) -> int:
    manager = _load(deps)
    task_id = getattr(args, "task_id", None)
    category = getattr(args, "category", None)
    status_arg = getattr(args, "status", None)
    if task_id is not None:
        targets = [manager.get(task_id)]
    elif category:
        wanted = category.strip().lower()
        targets = [t for t in manager.list_tasks() if (t.category or "").lower() == wanted]
    elif status_arg:
        status = Status.from_string(status_arg)
        targets = [t for t in manager.list_tasks() if t.status == status]
    else:
        return fail(args, "delete", deps.translate("ERR_DELETE_TARGET"))
    for task in targets:
        manager.delete(task.id)
    failed = _save_or_fail(args, "delete", manager, deps)
    if failed is not None:
        return failed
    if task_id is not None:
        message = deps.translate("MSG_DELETED", task_id=task_id)
    else:
        message = deps.translate("MSG_DELETED_MANY", count=len(targets))
    return emit(args, "delete", message=message, payload={"deleted": [t.id for t in targets]})


def cmd_stats(args, deps: CliDeps) -> int:
    manager = _load(deps)
    stats = task_stats(manager.list_tasks())
    return emit(args, "stats", payload=stats, lines=format_stats(stats))


__all__ = [
    "CliDeps",
    "cmd_overview",
    "cmd_add",
    "cmd_list",
    "cmd_show",
    "cmd_update",
    "cmd_delete",
    "cmd_stats",
]
