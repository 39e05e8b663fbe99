#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from application.task_manager import TaskManager
from config import UiConfig, load_ui_config
from infrastructure.file_repository import YamlTaskRepository
from interface.tui_driver import SessionDriver
from interface.tui_keys import PROMPT_TOOLKIT_KEYS, from_prompt_toolkit
from interface.tui_render import RenderView, render_formatted
from interface.tui_themes import build_style

# rows taken by header, search line, borders, counters, message and help
_CHROME_ROWS = 8


class TodoTUI:
    """Full-screen search session; acts as the render sink of its driver."""

    def __init__(
        self,
        manager: Optional[TaskManager] = None,
        config: Optional[UiConfig] = None,
        query_text: str = "",
        edit_id: Optional[int] = None,
    ):
        self.config = config or load_ui_config()
        self.manager = manager or TaskManager()
        self.view: Optional[RenderView] = None
        self.app: Optional[Application] = None
        self.driver = SessionDriver(self.manager, self.config, sink=self, query_text=query_text, edit_id=edit_id)
        self.style = build_style(self.config.theme)

        self.body = Window(content=FormattedTextControl(self.get_body_text), always_hide_cursor=True, wrap_lines=False)
        self.app = Application(
            layout=Layout(HSplit([self.body])),
            key_bindings=self._build_key_bindings(),
            style=self.style,
            full_screen=True,
        )
        # Esc must not wait for an ANSI sequence to complete
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TODO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05
        self.driver.draw()

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        kb.timeout = 0

        def dispatch(event):
            press = event.key_sequence[0]
            name = press.key.value if isinstance(press.key, Keys) else str(press.key)
            self.handle_key(name, press.data)

        for name in PROMPT_TOOLKIT_KEYS:
            kb.add(name, eager=True)(dispatch)
        kb.add(Keys.Any, eager=True)(dispatch)
        return kb

    def draw(self, view: RenderView) -> None:
        self.view = view
        if self.app is not None and self.app.is_running:
            self.app.invalidate()

    def handle_key(self, key_name: str, data: str = "") -> None:
        event = from_prompt_toolkit(key_name, data)
        if event is None:
            return
        self.driver.feed(event)
        if self.driver.closed and self.app is not None and self.app.is_running:
            self.app.exit()

    def get_body_text(self):
        if self.view is None:
            return []
        rows = max(1, self.get_terminal_height() - _CHROME_ROWS)
        return render_formatted(self.view, self.get_terminal_width(), max_rows=rows, show_scores=self.config.show_scores)

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def run(self) -> None:
        try:
            self.app.run()
        finally:
            self.driver.close()


def cmd_tui(args) -> int:
    path = getattr(args, "file", None)
    manager = TaskManager(YamlTaskRepository(path) if path else None)
    config = load_ui_config(theme=getattr(args, "theme", None))
    tui = TodoTUI(
        manager=manager,
        config=config,
        query_text=getattr(args, "query", "") or "",
        edit_id=getattr(args, "task_id", None),
    )
    tui.run()
    return 0


__all__ = ["TodoTUI", "cmd_tui"]
