from datetime import datetime, timezone
from pathlib import Path

from application.task_manager import TaskManager
from config import UiConfig
from core import Priority, Status, Task, TaskList
from infrastructure.file_repository import YamlTaskRepository
from interface.tui_driver import SessionDriver
from interface.tui_keys import Key, KeyEvent, chars
from interface.tui_session import Mode

NOW = datetime(2024, 8, 8, 8, 0, tzinfo=timezone.utc)
T0 = datetime(2024, 8, 1, 8, 0, tzinfo=timezone.utc)


class RecordingSink:
    def __init__(self):
        self.views = []

    def draw(self, view):
        self.views.append(view)


class FlakyRepo:
    def __init__(self, task_list, fail=False):
        self.task_list = task_list
        self.fail = fail
        self.saves = 0

    def load(self):
        return self.task_list.snapshot()

    def save(self, task_list):
        if self.fail:
            raise OSError("read-only file system")
        self.saves += 1
        self.task_list = task_list.snapshot()


def _seed():
    return TaskList(
        next_id=3,
        todos=[
            Task(id=1, title="Call plumber", priority=Priority.P1, created_at=T0),
            Task(id=2, title="Water plants", priority=Priority.P3, created_at=T0),
        ],
    )


def _seeded_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.yaml"
    YamlTaskRepository(path).save(_seed())
    return path


def _driver(repo, config=None, **kwargs):
    sink = RecordingSink()
    driver = SessionDriver(TaskManager(repo), config=config, sink=sink, clock=lambda: NOW, **kwargs)
    return driver, sink


def test_scripted_session_persists_changes(tmp_path: Path):
    path = _seeded_file(tmp_path)
    driver, sink = _driver(YamlTaskRepository(path))
    events = [KeyEvent(Key.MARK_DONE), KeyEvent(Key.NEW_TASK), *chars("Buy soil"), KeyEvent(Key.ENTER), KeyEvent(Key.EXIT)]
    state = driver.run(events)
    assert state.mode == Mode.CLOSED
    assert driver.closed
    assert len(sink.views) == len(events) + 1

    stored = YamlTaskRepository(path).load()
    assert stored.find(1).status == Status.DONE
    assert stored.find(1).finished_at == NOW
    assert stored.find(3).title == "Buy soil"
    assert stored.next_id == 4


def test_exhausted_events_close_and_save(tmp_path: Path):
    path = _seeded_file(tmp_path)
    driver, _ = _driver(YamlTaskRepository(path), config=UiConfig(autosave=False))
    driver.run([KeyEvent(Key.DOWN), KeyEvent(Key.RAISE_PRIORITY)])
    assert driver.closed
    assert not driver.state.dirty
    assert YamlTaskRepository(path).load().find(2).priority == Priority.P2


def test_close_flushes_open_editor(tmp_path: Path):
    path = _seeded_file(tmp_path)
    driver, _ = _driver(YamlTaskRepository(path), edit_id=2)
    assert driver.state.mode == Mode.EDITING
    for event in [KeyEvent(Key.CLEAR), *chars("Water the ferns")]:
        driver.feed(event)
    driver.close()
    assert YamlTaskRepository(path).load().find(2).title == "Water the ferns"


def test_failed_save_keeps_session_dirty_and_open():
    repo = FlakyRepo(_seed(), fail=True)
    driver, sink = _driver(repo)
    driver.feed(KeyEvent(Key.MARK_DONE))
    assert driver.state.dirty
    assert driver.state.message == "STATUS_SAVE_FAILED"
    assert sink.views[-1].message.startswith("Save failed")

    driver.feed(KeyEvent(Key.EXIT))
    driver.feed(KeyEvent.text("y"))
    assert driver.state.mode == Mode.CONFIRM_EXIT
    assert not driver.closed

    repo.fail = False
    driver.feed(KeyEvent(Key.SAVE))
    assert driver.closed
    assert repo.task_list.find(1).status == Status.DONE


def test_discard_on_exit_skips_save():
    repo = FlakyRepo(_seed())
    driver, _ = _driver(repo, config=UiConfig(autosave=False))
    driver.feed(KeyEvent(Key.ARCHIVE))
    driver.feed(KeyEvent(Key.EXIT))
    driver.feed(KeyEvent.text("n"))
    assert driver.closed
    assert repo.saves == 0
    driver.close()
    assert repo.saves == 0


def test_task_removed_behind_the_session_resyncs(caplog):
    repo = FlakyRepo(_seed())
    driver, _ = _driver(repo)
    driver.manager.delete(1)
    with caplog.at_level("WARNING", logger="todo.session"):
        driver.feed(KeyEvent(Key.MARK_DONE))
    assert "Resyncing" in caplog.text
    assert driver.state.message == "STATUS_NOT_FOUND"
    assert driver.state.message_args == {"task_id": 1}
    assert [r.task.id for r in driver.state.results] == [2]
    assert not driver.closed


def test_feed_after_close_is_ignored():
    driver, sink = _driver(FlakyRepo(_seed()))
    driver.feed(KeyEvent(Key.EXIT))
    drawn = len(sink.views)
    driver.feed(KeyEvent(Key.NEW_TASK))
    assert len(sink.views) == drawn
    assert driver.state.mode == Mode.CLOSED


def test_one_timestamp_per_event_for_view_and_store():
    ticks = iter(datetime(2024, 8, 8, 8, 0, second, tzinfo=timezone.utc) for second in range(1, 60))
    repo = FlakyRepo(_seed())
    driver = SessionDriver(TaskManager(repo), sink=RecordingSink(), clock=lambda: next(ticks))
    driver.feed(KeyEvent(Key.MARK_DONE))
    shown = driver.state.selected_task
    stored = driver.manager.task_list.find(1)
    assert shown.id == 1
    assert shown.finished_at == stored.finished_at
    assert repo.task_list.find(1).finished_at == stored.finished_at

    driver.feed(KeyEvent(Key.LOWER_PRIORITY))
    assert driver.manager.task_list.find(1).finished_at == stored.finished_at
    assert driver.state.selected_task == driver.manager.task_list.find(1)
