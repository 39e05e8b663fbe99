"""Plain-text formatting for the non-interactive commands."""

from typing import Dict, List, Sequence

from core import Overview, Task
from interface.constants import TIMESTAMP_FORMAT
from interface.i18n import translate
from util.text_width import pad_display

_SEP = " │ "
_COLUMNS = (("ID", 4), ("PRI", 3), ("S", 1), ("Category", 10), ("Title", 40), ("Tags", 15))


def _row(cells: Sequence[str]) -> str:
    return _SEP.join(pad_display(cell, width) for cell, (_, width) in zip(cells, _COLUMNS)).rstrip()


def format_list(tasks: Sequence[Task]) -> List[str]:
    if not tasks:
        return [translate("MSG_NO_RESULTS")]
    lines = [_row([name for name, _ in _COLUMNS]), "─" * 80]
    for task in tasks:
        lines.append(
            _row(
                [
                    str(task.id),
                    task.priority.label,
                    task.status.icon,
                    task.category or "-",
                    task.title,
                    ",".join(task.tags) or "-",
                ]
            )
        )
    return lines


def format_detail(task: Task) -> List[str]:
    lines = [
        f"TODO #{task.id}",
        f"Title: {task.title}",
        f"Status: {task.status.label}",
        f"Priority: {task.priority.label} ({task.priority.description})",
    ]
    if task.category:
        lines.append(f"Category: {task.category}")
    if task.project:
        lines.append(f"Project: {task.project}")
    if task.tags:
        lines.append(f"Tags: {', '.join(task.tags)}")
    lines.append(f"Created: {task.created_at.strftime(TIMESTAMP_FORMAT)}")
    lines.append(f"Finished: {task.finished_at.strftime(TIMESTAMP_FORMAT) if task.finished_at else '-'}")
    if task.notes:
        lines.append("Notes:")
        lines.extend(f"  {line}" for line in task.notes.splitlines())
    return lines


def _overview_line(task: Task) -> str:
    category = f" @{task.category}" if task.category else ""
    return f"  {task.priority.label} #{task.id:<4} {task.title}{category}"


def format_overview(overview: Overview, counts: Dict[str, int]) -> List[str]:
    if not overview.priority_set:
        return [translate("OVERVIEW_TITLE"), "", translate("OVERVIEW_EMPTY")]
    lines = [translate("OVERVIEW_TITLE"), "", translate("OVERVIEW_PRIORITY")]
    lines.extend(_overview_line(t) for t in overview.priority_set)
    if overview.discovery_set:
        lines.extend(["", translate("OVERVIEW_DISCOVERY")])
        lines.extend(_overview_line(t) for t in overview.discovery_set)
    lines.extend(["", translate("OVERVIEW_TOTALS", **counts)])
    return lines


def format_stats(stats: Dict[str, Dict[str, int]]) -> List[str]:
    lines = ["TODO Statistics", "==================", f"Total TODOs: {stats['total']['count']}", ""]
    for title, key in (("By Status:", "status"), ("By Priority:", "priority"), ("By Category:", "category")):
        if not stats[key]:
            continue
        lines.append(title)
        lines.extend(f"  {name}: {count}" for name, count in stats[key].items())
        lines.append("")
    return lines[:-1] if lines[-1] == "" else lines


__all__ = ["format_list", "format_detail", "format_overview", "format_stats"]
