"""Interactive search session as an explicit state machine.

``step`` is pure: it takes the current state, one key event and a read-only
view of the task list, and returns the next state plus a tuple of effects.
Effects are store commands (executed by the store, never here), save
requests and the close signal. Re-ranking after a mutation runs against a
copy-on-write snapshot with the same command applied, so UI state and
durable data stay separately owned.

Modes: BROWSING <-> EDITING, BROWSING -> CONFIRM_EXIT -> CLOSED.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from config import UiConfig
from core import (
    InsertTask,
    NotFoundError,
    Query,
    RankedTask,
    SetPriority,
    SetStatus,
    Status,
    StoreCommand,
    Task,
    TaskList,
    UpdateTask,
    apply_command,
    now_local,
    parse_query,
    rank,
)
from interface.tui_editor import Cancelled, EditorSession, Finished
from interface.tui_keys import Key, KeyEvent


class Mode(Enum):
    BROWSING = "browsing"
    EDITING = "editing"
    CONFIRM_EXIT = "confirm_exit"
    CLOSED = "closed"


@dataclass(frozen=True)
class SaveRequested:
    pass


@dataclass(frozen=True)
class SessionClosed:
    pass


Effect = Union[StoreCommand, SaveRequested, SessionClosed]


@dataclass(frozen=True)
class SessionState:
    mode: Mode = Mode.BROWSING
    query_text: str = ""
    query: Query = field(default_factory=Query)
    results: Tuple[RankedTask, ...] = ()
    selected: Optional[int] = None
    dirty: bool = False
    editor: Optional[EditorSession] = None
    message: str = ""
    message_args: Dict[str, Any] = field(default_factory=dict)
    pending_close: bool = False

    @property
    def selected_task(self) -> Optional[Task]:
        if self.selected is None or not self.results:
            return None
        return self.results[self.selected].task


@dataclass(frozen=True)
class Transition:
    state: SessionState
    effects: Tuple[Effect, ...] = ()


def _reselect(results: Tuple[RankedTask, ...], focus_id: Optional[int], fallback: Optional[int]) -> Optional[int]:
    if not results:
        return None
    if focus_id is not None:
        for idx, item in enumerate(results):
            if item.task.id == focus_id:
                return idx
    return max(0, min(fallback or 0, len(results) - 1))


def _ranked(state: SessionState, task_list: TaskList, focus_id: Optional[int] = None) -> SessionState:
    results = tuple(rank(task_list.todos, state.query))
    return replace(state, results=results, selected=_reselect(results, focus_id, state.selected))


def _say(state: SessionState, key: str, **args: Any) -> SessionState:
    return replace(state, message=key, message_args=args)


def start_session(task_list: TaskList, query_text: str = "", edit_id: Optional[int] = None) -> SessionState:
    """Initial Browsing state; with ``edit_id`` the editor opens on that task.

    Raises NotFoundError when ``edit_id`` is not in the list.
    """
    state = SessionState(query_text=query_text, query=parse_query(query_text))
    if edit_id is not None:
        task = task_list.find(edit_id)
        if task is None:
            raise NotFoundError(edit_id)
        state = replace(state, mode=Mode.EDITING, editor=EditorSession.for_task(task))
    results = tuple(rank(task_list.todos, state.query))
    return replace(state, results=results, selected=_reselect(results, edit_id, 0))


def _requery(state: SessionState, text: str, task_list: TaskList) -> Transition:
    state = replace(state, query_text=text, query=parse_query(text), selected=0, message="", message_args={})
    return Transition(_ranked(state, task_list))


def _move(state: SessionState, delta: int) -> Transition:
    if not state.results:
        return Transition(replace(state, selected=None))
    current = state.selected or 0
    target = max(0, min(current + delta, len(state.results) - 1))
    return Transition(replace(state, selected=target))


def _mutate(
    state: SessionState,
    task_list: TaskList,
    command: StoreCommand,
    config: UiConfig,
    now: datetime,
    *,
    focus_id: Optional[int],
    message: str,
    **message_args: Any,
) -> Transition:
    snapshot = apply_command(task_list, command, now)
    state = _ranked(replace(state, dirty=True), snapshot, focus_id=focus_id)
    state = _say(state, message, **message_args)
    effects: Tuple[Effect, ...] = (command,)
    if config.autosave:
        effects += (SaveRequested(),)
    return Transition(state, effects)


def _exit(state: SessionState) -> Transition:
    if state.dirty:
        return Transition(replace(state, mode=Mode.CONFIRM_EXIT, message="CONFIRM_EXIT", message_args={}))
    return Transition(replace(state, mode=Mode.CLOSED), (SessionClosed(),))


def _browse(state: SessionState, event: KeyEvent, task_list: TaskList, config: UiConfig, now: datetime) -> Transition:
    key = event.key
    if key == Key.CHAR:
        return _requery(state, state.query_text + event.char, task_list)
    if key == Key.BACKSPACE:
        return _requery(state, state.query_text[:-1], task_list)
    if key == Key.CLEAR:
        return _requery(state, "", task_list)
    if key == Key.UP:
        return _move(state, -1)
    if key == Key.DOWN:
        return _move(state, 1)
    if key == Key.PAGE_UP:
        return _move(state, -config.page_size)
    if key == Key.PAGE_DOWN:
        return _move(state, config.page_size)
    if key == Key.HOME:
        return _move(state, -len(state.results))
    if key == Key.END:
        return _move(state, len(state.results))
    if key == Key.NEW_TASK:
        return Transition(replace(state, mode=Mode.EDITING, editor=EditorSession.blank(), message=""))
    if key == Key.SAVE:
        if state.dirty:
            return Transition(state, (SaveRequested(),))
        return Transition(_say(state, "STATUS_NOTHING_TO_SAVE"))
    if key == Key.EXIT:
        return _exit(state)
    if key == Key.ESCAPE:
        if state.query_text:
            return _requery(state, "", task_list)
        return _exit(state)

    task = state.selected_task
    if task is None:
        return Transition(state)
    if key == Key.ENTER:
        return Transition(replace(state, mode=Mode.EDITING, editor=EditorSession.for_task(task), message=""))
    if key in (Key.RAISE_PRIORITY, Key.LOWER_PRIORITY):
        priority = task.priority.raise_() if key == Key.RAISE_PRIORITY else task.priority.lower()
        if priority == task.priority:
            return Transition(state)
        return _mutate(
            state, task_list, SetPriority(task.id, priority), config, now,
            focus_id=task.id, message="STATUS_PRIORITY", task_id=task.id, priority=priority.label,
        )
    if key == Key.ARCHIVE:
        if task.status == Status.ARCHIVED:
            return Transition(state)
        # no focus id: the archived task usually drops out, keep the row index
        return _mutate(
            state, task_list, SetStatus(task.id, Status.ARCHIVED), config, now,
            focus_id=None, message="STATUS_ARCHIVED", task_id=task.id,
        )
    if key == Key.MARK_DONE:
        if task.status == Status.DONE:
            return Transition(state)
        return _mutate(
            state, task_list, SetStatus(task.id, Status.DONE), config, now,
            focus_id=task.id, message="STATUS_DONE", task_id=task.id,
        )
    return Transition(state)


def _finish_editing(
    state: SessionState, finished: Finished, task_list: TaskList, config: UiConfig, now: datetime
) -> Transition:
    back = replace(state, mode=Mode.BROWSING, editor=None)
    if finished.is_new:
        return _mutate(
            back, task_list, InsertTask(finished.task), config, now,
            focus_id=task_list.next_id, message="STATUS_CREATED", task_id=task_list.next_id,
        )
    return _mutate(
        back, task_list, UpdateTask(finished.task), config, now,
        focus_id=finished.task.id, message="STATUS_UPDATED", task_id=finished.task.id,
    )


def _edit(state: SessionState, event: KeyEvent, task_list: TaskList, config: UiConfig, now: datetime) -> Transition:
    editor = state.editor or EditorSession.blank()
    editor, outcome = editor.handle_key(event, now)
    if outcome is None:
        message = "STATUS_FIX_ERRORS" if editor.errors else ""
        return Transition(replace(state, editor=editor, message=message, message_args={}))
    if isinstance(outcome, Cancelled):
        back = replace(state, mode=Mode.BROWSING, editor=None)
        focus_id = editor.original.id if editor.original else None
        return Transition(_say(_ranked(back, task_list, focus_id=focus_id), "STATUS_EDIT_CANCELLED"))
    return _finish_editing(state, outcome, task_list, config, now)


def _confirm(state: SessionState, event: KeyEvent) -> Transition:
    key, char = event.key, event.char.lower()
    if key in (Key.SAVE, Key.ENTER) or (key == Key.CHAR and char == "y"):
        return Transition(replace(state, pending_close=True), (SaveRequested(),))
    if key == Key.CHAR and char == "n":
        return Transition(replace(state, mode=Mode.CLOSED, dirty=False), (SessionClosed(),))
    if key in (Key.ESCAPE, Key.EXIT):
        return Transition(replace(state, mode=Mode.BROWSING, pending_close=False, message="", message_args={}))
    return Transition(state)


def step(
    state: SessionState,
    event: KeyEvent,
    task_list: TaskList,
    config: Optional[UiConfig] = None,
    now: Optional[datetime] = None,
) -> Transition:
    """Advance the session by one key event."""
    cfg = config or UiConfig()
    stamp = now or now_local()
    if state.mode == Mode.BROWSING:
        return _browse(state, event, task_list, cfg, stamp)
    if state.mode == Mode.EDITING:
        return _edit(state, event, task_list, cfg, stamp)
    if state.mode == Mode.CONFIRM_EXIT:
        return _confirm(state, event)
    return Transition(state)


def on_save_result(state: SessionState, ok: bool) -> Transition:
    """Fold the store's save outcome back into the session."""
    if not ok:
        return Transition(replace(_say(state, "STATUS_SAVE_FAILED"), dirty=True, pending_close=False))
    saved = replace(_say(state, "STATUS_SAVED"), dirty=False)
    if saved.pending_close:
        return Transition(replace(saved, mode=Mode.CLOSED, pending_close=False), (SessionClosed(),))
    return Transition(saved)


def refresh(state: SessionState, task_list: TaskList) -> SessionState:
    """Re-rank against the store after an out-of-band change, keeping the selection."""
    current = state.selected_task
    return _ranked(state, task_list, focus_id=current.id if current else None)


def teardown(
    state: SessionState, task_list: TaskList, config: Optional[UiConfig] = None, now: Optional[datetime] = None
) -> Transition:
    """Close from any mode, flushing a valid in-progress edit as a store command."""
    if state.mode == Mode.CLOSED:
        return Transition(state)
    effects: Tuple[Effect, ...] = ()
    if state.mode == Mode.EDITING and state.editor is not None:
        _, finished = state.editor.finish(now)
        if finished is not None:
            cfg = replace(config or UiConfig(), autosave=False)
            transition = _finish_editing(state, finished, task_list, cfg, now or now_local())
            state, effects = transition.state, transition.effects
    closed = replace(state, mode=Mode.CLOSED, editor=None, pending_close=False)
    return Transition(closed, effects + (SessionClosed(),))


__all__ = [
    "Mode",
    "SaveRequested",
    "SessionClosed",
    "Effect",
    "SessionState",
    "Transition",
    "start_session",
    "step",
    "on_save_result",
    "refresh",
    "teardown",
]
