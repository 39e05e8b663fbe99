from datetime import datetime, timedelta, timezone

import pytest

from core import Priority, Status, Task, TaskList, ValidationError
from core.task import normalize_tags, parse_tags, update_tags

T0 = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)


def test_priority_parsing_and_saturation():
    assert Priority.from_string("p3") == Priority.P3
    assert Priority.from_string(" P0 ") == Priority.P0
    assert Priority.default() == Priority.P2
    assert Priority.P0.raise_() == Priority.P0
    assert Priority.P5.lower() == Priority.P5
    assert Priority.P2.raise_() == Priority.P1
    with pytest.raises(ValidationError) as exc:
        Priority.from_string("urgent")
    assert exc.value.field == "priority"


def test_status_parsing():
    assert Status.from_string("InProgress") == Status.IN_PROGRESS
    assert Status.from_string("in-progress") == Status.IN_PROGRESS
    assert Status.from_string("DONE") == Status.DONE
    with pytest.raises(ValidationError):
        Status.from_string("blocked")
    assert Status.TODO.is_active and Status.IN_PROGRESS.is_active
    assert not Status.DONE.is_active and not Status.ARCHIVED.is_active


def test_new_task_validates_fields():
    task = Task.new("  Buy milk  ", tags=["Errand", "errand", "two words"], category=" home ", now=T0)
    assert task.id == 0
    assert task.title == "Buy milk"
    assert task.tags == ("errand", "two_words")
    assert task.category == "home"
    assert task.created_at == T0
    with pytest.raises(ValidationError):
        Task.new("   ")
    with pytest.raises(ValidationError):
        Task.new("x" * 201)
    with pytest.raises(ValidationError):
        Task.new("ok", category="c" * 51)
    with pytest.raises(ValidationError):
        Task.new("ok", tags=["t" * 31])


def test_new_task_created_done_is_stamped():
    task = Task.new("Already done", status=Status.DONE, now=T0)
    assert task.status == Status.DONE
    assert task.finished_at == T0


def test_finished_at_transition_rule():
    task = Task(id=1, title="t", created_at=T0)
    later = T0 + timedelta(hours=2)
    done = task.with_status(Status.DONE, later)
    assert done.finished_at == later
    assert done.with_status(Status.DONE, later + timedelta(hours=1)).finished_at == later
    reopened = done.with_status(Status.IN_PROGRESS, later)
    assert reopened.finished_at is None
    archived = done.with_status(Status.ARCHIVED, later)
    assert archived.finished_at is None


def test_finished_at_never_precedes_created_at():
    task = Task(id=1, title="t", created_at=T0)
    assert task.with_status(Status.DONE, T0 - timedelta(days=1)).finished_at == T0


def test_tag_helpers():
    assert parse_tags("a, B ,,a") == ("a", "b")
    assert normalize_tags(["", "  "]) == ()
    assert update_tags(("a", "b"), "+c,-a,+b") == ("b", "c")


def test_to_record_writes_null_for_absent_optionals():
    record = Task(id=7, title="t", created_at=T0).to_record()
    assert record == {
        "id": 7,
        "title": "t",
        "priority": "P2",
        "status": "Todo",
        "tags": [],
        "category": None,
        "project": None,
        "created_date": T0.isoformat(),
        "finished_date": None,
        "notes": None,
    }


def test_task_list_snapshot_is_independent():
    original = TaskList(next_id=2, todos=[Task(id=1, title="a", created_at=T0)])
    copy = original.snapshot()
    copy.todos.append(Task(id=2, title="b", created_at=T0))
    copy.next_id = 3
    assert len(original.todos) == 1 and original.next_id == 2
    assert original.find(1) is copy.find(1)
    assert original.index_of(5) is None


def test_naive_timestamps_are_taken_as_local_time():
    naive = datetime(2024, 1, 1, 9)
    task = Task(id=1, title="naive", created_at=naive, finished_at=naive)
    assert task.created_at.tzinfo is not None
    assert task.created_at == naive.astimezone()
    assert task.finished_at == task.created_at

    reopened = task.with_status(Status.TODO)
    done = reopened.with_status(Status.DONE, datetime(2024, 1, 1, 10))
    assert done.finished_at.tzinfo is not None
    assert done.finished_at > done.created_at
