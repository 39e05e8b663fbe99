from typing import TYPE_CHECKING, Iterator, Protocol

from core import TaskList

if TYPE_CHECKING:
    from interface.tui_keys import KeyEvent
    from interface.tui_render import RenderView


class TaskRepository(Protocol):
    def load(self) -> TaskList:
        ...

    def save(self, task_list: TaskList) -> None:
        ...


class EventSource(Protocol):
    """Anything that yields key events one at a time (terminal, script, test)."""

    def __iter__(self) -> Iterator["KeyEvent"]:
        ...


class RenderSink(Protocol):
    """Receives a render description after every session transition."""

    def draw(self, view: "RenderView") -> None:
        ...
