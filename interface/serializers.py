"""JSON contract for tasks in ``--json`` CLI output."""

from typing import Any, Dict, Optional

from core import Overview, Task


def task_to_dict(task: Task, *, score: Optional[int] = None) -> Dict[str, Any]:
    """Serialize a task; same keys as the persisted record, plus the score when ranked."""
    data = task.to_record()
    data["active"] = task.is_active
    if score is not None:
        data["score"] = score
    return data


def overview_to_dict(overview: Overview) -> Dict[str, Any]:
    return {
        "priority": [task_to_dict(t) for t in overview.priority_set],
        "discovery": [task_to_dict(t) for t in overview.discovery_set],
    }


__all__ = ["task_to_dict", "overview_to_dict"]
