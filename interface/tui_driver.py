"""Runs the session state machine against the task store.

The driver is the only place where session effects meet the store: store
commands go to ``TaskManager.execute``, save requests go to
``TaskManager.save`` and their outcome is folded back via
``on_save_result``. Rendering goes to whatever sink was passed in.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from application.ports import EventSource, RenderSink
from application.task_manager import TaskManager
from config import UiConfig
from core import NotFoundError, now_local
from interface.tui_keys import KeyEvent
from interface.tui_render import describe
from interface.tui_session import (
    Mode,
    SaveRequested,
    SessionClosed,
    SessionState,
    Transition,
    on_save_result,
    refresh,
    start_session,
    step,
    teardown,
)

logger = logging.getLogger("todo.session")


class SessionDriver:
    """Feeds key events through ``step`` and executes the resulting effects."""

    def __init__(
        self,
        manager: TaskManager,
        config: Optional[UiConfig] = None,
        sink: Optional[RenderSink] = None,
        query_text: str = "",
        clock: Callable[[], datetime] = now_local,
        edit_id: Optional[int] = None,
    ):
        self.manager = manager
        self.config = config or UiConfig()
        self.sink = sink
        self.clock = clock
        if not manager.loaded:
            manager.load()
        self.state: SessionState = start_session(manager.task_list, query_text, edit_id)
        self.closed = False

    def draw(self) -> None:
        if self.sink is not None:
            self.sink.draw(describe(self.state, self.config))

    def feed(self, event: KeyEvent) -> SessionState:
        if self.closed:
            return self.state
        # one clock reading per event, shared by step and the store
        now = self.clock()
        try:
            transition = step(self.state, event, self.manager.task_list, self.config, now)
        except NotFoundError as exc:
            self._resync(exc)
        else:
            self._apply(transition, now)
        self.draw()
        return self.state

    def run(self, events: EventSource) -> SessionState:
        self.draw()
        for event in events:
            self.feed(event)
            if self.closed:
                break
        else:
            self.close()
        return self.state

    def close(self) -> SessionState:
        """Tear down from any mode; a pending edit and unsaved changes are flushed."""
        if self.closed:
            return self.state
        now = self.clock()
        self._apply(teardown(self.state, self.manager.task_list, self.config, now), now)
        if self.state.dirty:
            self.state = on_save_result(self.state, self.manager.save()).state
        return self.state

    def _apply(self, transition: Transition, now: datetime) -> None:
        self.state = transition.state
        for effect in transition.effects:
            if isinstance(effect, SaveRequested):
                ok = self.manager.save()
                follow = on_save_result(self.state, ok)
                self.state = follow.state
                if any(isinstance(extra, SessionClosed) for extra in follow.effects):
                    self._closed(now)
            elif isinstance(effect, SessionClosed):
                self._closed(now)
            else:
                self._execute(effect, now)

    def _execute(self, command, now: datetime) -> None:
        try:
            self.manager.execute(command, now)
        except NotFoundError as exc:
            self._resync(exc)

    def _resync(self, exc: NotFoundError) -> None:
        logger.warning("Resyncing session with the store: %s", exc)
        synced = refresh(self.state, self.manager.task_list)
        if synced.mode == Mode.EDITING:
            synced = replace(synced, mode=Mode.BROWSING, editor=None)
        self.state = replace(synced, message="STATUS_NOT_FOUND", message_args={"task_id": exc.task_id})

    def _closed(self, now: datetime) -> None:
        self.closed = True
        logger.debug("session closed (mode=%s, dirty=%s)", self.state.mode.value, self.state.dirty)
        if self.state.mode != Mode.CLOSED:
            self.state = teardown(self.state, self.manager.task_list, self.config, now).state


__all__ = ["SessionDriver"]
