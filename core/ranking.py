"""Ranking engine: hard predicate filter, free-text scoring, deterministic order.

Also hosts the default overview selector and the non-interactive list filter,
which share the predicate and default-exclusion logic.
"""

import random
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .priority import Priority
from .query import Query
from .status import Status
from .task import Task

TITLE_WORD_START_SCORE = 3
TITLE_SCORE = 2
TAGS_CATEGORY_SCORE = 2
NOTES_SCORE = 1

PRIORITY_SET_SIZE = 4
DISCOVERY_SET_SIZE = 3


@dataclass(frozen=True)
class RankedTask:
    task: Task
    score: int


@dataclass(frozen=True)
class Overview:
    priority_set: Tuple[Task, ...]
    discovery_set: Tuple[Task, ...]


def passes_predicates(task: Task, query: Query) -> bool:
    """Structured gate; Archived tasks fail unless the query asks for a status."""
    if query.status is None:
        if task.status == Status.ARCHIVED:
            return False
    elif task.status != query.status:
        return False
    if query.priority is not None and task.priority != query.priority:
        return False
    if query.tag is not None and query.tag not in task.tags:
        return False
    if query.category is not None:
        if task.category is None or task.category.lower() != query.category:
            return False
    return True


def _at_word_start(text: str, term: str) -> bool:
    start = text.find(term)
    while start != -1:
        if start == 0 or not text[start - 1].isalnum():
            return True
        start = text.find(term, start + 1)
    return False


def term_score(task: Task, term: str) -> int:
    """Score one lowercase term against a task; 0 means the term matched nowhere."""
    score = 0
    title = task.title.lower()
    if term in title:
        score += TITLE_WORD_START_SCORE if _at_word_start(title, term) else TITLE_SCORE
    tags_text = " ".join(task.tags).lower()
    category = (task.category or "").lower()
    if term in tags_text or term in category:
        score += TAGS_CATEGORY_SCORE
    if task.notes and term in task.notes.lower():
        score += NOTES_SCORE
    return score


def score_task(task: Task, terms: Sequence[str]) -> Optional[int]:
    """Sum of term scores, or None when some term matches no field."""
    total = 0
    for term in terms:
        score = term_score(task, term)
        if score == 0:
            return None
        total += score
    return total


def _order_key(item: RankedTask) -> Tuple[int, int, int]:
    return (-item.score, item.task.priority.rank, item.task.id)


def rank(tasks: Iterable[Task], query: Query) -> List[RankedTask]:
    """Rank tasks against a parsed query. Pure; never mutates ``tasks``."""
    ranked: List[RankedTask] = []
    for task in tasks:
        if not passes_predicates(task, query):
            continue
        score = score_task(task, query.terms)
        if score is None:
            continue
        ranked.append(RankedTask(task=task, score=score))
    ranked.sort(key=_order_key)
    return ranked


def default_overview(tasks: Iterable[Task], rng: Optional[random.Random] = None) -> Overview:
    """Top active tasks by urgency plus a random sample of the remaining active ones."""
    active = [t for t in tasks if t.is_active]
    priority_set = sort_by_priority(active)[:PRIORITY_SET_SIZE]
    chosen = {t.id for t in priority_set}
    remaining = sorted((t for t in active if t.id not in chosen), key=lambda t: t.id)
    picker = rng if rng is not None else random.Random()
    discovery = picker.sample(remaining, min(DISCOVERY_SET_SIZE, len(remaining)))
    return Overview(priority_set=tuple(priority_set), discovery_set=tuple(discovery))


def filter_tasks(
    tasks: Iterable[Task],
    *,
    status: Optional[Status] = None,
    category: Optional[str] = None,
    priority: Optional[Priority] = None,
    tags: Sequence[str] = (),
    include_archived: bool = False,
) -> List[Task]:
    """Non-interactive list filter: case-insensitive category, all tags required."""
    result: List[Task] = []
    for task in tasks:
        if not include_archived and status is None and task.status == Status.ARCHIVED:
            continue
        if status is not None and task.status != status:
            continue
        if category is not None and (task.category or "").lower() != category.strip().lower():
            continue
        if priority is not None and task.priority != priority:
            continue
        if any(tag not in task.tags for tag in tags):
            continue
        result.append(task)
    return result


def sort_by_priority(tasks: Iterable[Task]) -> List[Task]:
    """Priority ascending, newest first within a priority."""
    ordered = sorted(tasks, key=lambda t: t.created_at, reverse=True)
    ordered.sort(key=lambda t: t.priority.rank)
    return ordered


def task_stats(tasks: Iterable[Task]) -> Dict[str, Dict[str, int]]:
    items = list(tasks)
    by_status = Counter(t.status.label for t in items)
    by_priority = Counter(t.priority.label for t in items)
    by_category = Counter(t.category for t in items if t.category)
    return {
        "total": {"count": len(items)},
        "status": {s.label: by_status.get(s.label, 0) for s in Status},
        "priority": {p.label: by_priority.get(p.label, 0) for p in Priority},
        "category": dict(sorted(by_category.items())),
    }


__all__ = [
    "RankedTask",
    "Overview",
    "passes_predicates",
    "term_score",
    "score_task",
    "rank",
    "default_overview",
    "filter_tasks",
    "sort_by_priority",
    "task_stats",
]
