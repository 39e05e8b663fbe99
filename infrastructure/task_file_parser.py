import re
from datetime import date, datetime, time
from typing import Any, Dict, Optional

import yaml

from core import Priority, Status, Task, TaskList
from core.task import as_aware, normalize_tags


class TaskFileParser:
    """YAML document codec for the task list (``next_id`` + ``todos``)."""

    _FRACTION = re.compile(r"(\.\d{6})\d+")

    @classmethod
    def _coerce_timestamp(cls, value: Any) -> Optional[datetime]:
        """Normalize YAML timestamps to aware datetimes.

        YAML loaders may already parse ISO-8601 values into datetime/date
        objects; strings may carry nanosecond fractions which are truncated.
        Naive values are taken as local time.
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time())
        else:
            raw = cls._FRACTION.sub(r"\1", str(value).strip())
            if raw.endswith("Z"):
                raw = raw[:-1] + "+00:00"
            parsed = datetime.fromisoformat(raw)
        return as_aware(parsed)

    @staticmethod
    def _optional_text(value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value)
        return text if text.strip() else None

    @classmethod
    def parse_record(cls, record: Dict[str, Any]) -> Task:
        created = cls._coerce_timestamp(record.get("created_date"))
        status = Status.from_string(str(record.get("status") or "Todo"))
        finished = cls._coerce_timestamp(record.get("finished_date"))
        return Task(
            id=int(record["id"]),
            title=str(record.get("title") or ""),
            priority=Priority.from_string(str(record.get("priority") or "P2")),
            status=status,
            tags=normalize_tags(str(t) for t in (record.get("tags") or [])),
            category=cls._optional_text(record.get("category")),
            project=cls._optional_text(record.get("project")),
            created_at=created or datetime.now().astimezone(),
            finished_at=finished,
            notes=cls._optional_text(record.get("notes")),
        )

    @classmethod
    def parse_document(cls, content: str) -> TaskList:
        if not content.strip():
            return TaskList()
        data = yaml.safe_load(content) or {}
        todos = [cls.parse_record(item) for item in (data.get("todos") or [])]
        next_id = int(data.get("next_id") or 1)
        highest = max((t.id for t in todos), default=0)
        return TaskList(next_id=max(next_id, highest + 1), todos=todos)

    @staticmethod
    def dump_document(task_list: TaskList) -> str:
        return yaml.safe_dump(task_list.to_document(), allow_unicode=True, sort_keys=False)


__all__ = ["TaskFileParser"]
