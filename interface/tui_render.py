"""Render description for the search session.

``describe`` turns a session state into a plain ``RenderView`` value (what
to show). ``render_formatted`` turns that view into prompt_toolkit
fragments (how to show it). Only the second half knows about terminals.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from config import UiConfig
from interface.i18n import translate
from interface.tui_editor import FIELD_ORDER, EditorField
from interface.tui_session import Mode, SessionState
from interface.tui_themes import priority_style
from util.responsive import ResponsiveLayoutManager
from util.text_width import display_width, ellipsize, pad_display, wrap_display


@dataclass(frozen=True)
class ResultRow:
    task_id: int
    title: str
    priority: str
    priority_rank: int
    status: str
    status_style: str
    status_icon: str
    category: str
    score: int
    selected: bool


@dataclass(frozen=True)
class FieldView:
    name: str
    label: str
    value: str
    focused: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class RenderView:
    mode: Mode
    header: str
    query_text: str = ""
    query_summary: str = ""
    count_line: str = ""
    rows: Tuple[ResultRow, ...] = ()
    selected: Optional[int] = None
    fields: Tuple[FieldView, ...] = ()
    message: str = ""
    dirty: bool = False
    help: str = ""
    confirm: str = ""
    search_label: str = ""
    dirty_mark: str = ""


def _field_label(field: EditorField, lang: str) -> str:
    return translate(f"FIELD_{field.name}", lang)


def _rows(state: SessionState) -> Tuple[ResultRow, ...]:
    return tuple(
        ResultRow(
            task_id=item.task.id,
            title=item.task.title,
            priority=item.task.priority.label,
            priority_rank=item.task.priority.rank,
            status=item.task.status.label,
            status_style=item.task.status.style,
            status_icon=item.task.status.icon,
            category=item.task.category or "",
            score=item.score,
            selected=idx == state.selected,
        )
        for idx, item in enumerate(state.results)
    )


def describe(state: SessionState, config: Optional[UiConfig] = None) -> RenderView:
    cfg = config or UiConfig()
    lang = cfg.lang
    message = translate(state.message, lang, **state.message_args) if state.message else ""
    confirm = translate("CONFIRM_EXIT", lang) if state.mode == Mode.CONFIRM_EXIT else ""

    if state.mode == Mode.EDITING and state.editor is not None:
        editor = state.editor
        if editor.is_new:
            header = translate("HEADER_NEW", lang)
        else:
            header = translate("HEADER_EDIT", lang, task_id=editor.original.id)
        fields = tuple(
            FieldView(
                name=field.value,
                label=_field_label(field, lang),
                value=editor.value_of(field),
                focused=idx == editor.focus,
                error=editor.errors.get(field),
            )
            for idx, field in enumerate(FIELD_ORDER)
        )
        return RenderView(
            mode=state.mode,
            header=header,
            fields=fields,
            message=message,
            dirty=state.dirty,
            help=translate("HELP_EDITING", lang),
            dirty_mark=translate("DIRTY_MARK", lang),
        )

    if state.results:
        count_line = translate("RESULTS_COUNT", lang, count=len(state.results))
    else:
        count_line = translate("RESULTS_EMPTY", lang)
    summary = "" if state.query.is_empty else state.query.describe()
    return RenderView(
        mode=state.mode,
        header=translate("HEADER_SEARCH", lang),
        query_text=state.query_text,
        query_summary=translate("QUERY_SUMMARY", lang, summary=summary) if summary else "",
        count_line=count_line,
        rows=_rows(state),
        selected=state.selected,
        message=message,
        dirty=state.dirty,
        help=translate("HELP_BROWSING", lang),
        confirm=confirm,
        search_label=translate("SEARCH_LABEL", lang),
        dirty_mark=translate("DIRTY_MARK", lang),
    )


def _visible_window(total: int, selected: Optional[int], max_rows: int) -> Tuple[int, int]:
    if total <= max_rows:
        return 0, total
    anchor = selected or 0
    start = max(0, min(anchor - max_rows // 2, total - max_rows))
    return start, start + max_rows


def _row_fragments(row: ResultRow, columns: List[str], widths, show_scores: bool) -> List[Tuple[str, str]]:
    base = "class:selected" if row.selected else ""
    parts: List[Tuple[str, str]] = []
    for col in columns:
        width = widths[col]
        if col == "id":
            parts.append((base or "class:text.dim", pad_display(f"#{row.task_id}", width)))
        elif col == "prio":
            parts.append((base or priority_style(row.priority_rank), pad_display(row.priority, width)))
        elif col == "stat":
            parts.append((base or f"class:{row.status_style}", pad_display(row.status_icon, width)))
        elif col == "title":
            parts.append((base or "class:text", pad_display(row.title, width)))
        elif col == "category":
            parts.append((base or "class:text.dim", pad_display(row.category, width)))
        elif col == "score" and show_scores:
            parts.append((base or "class:text.dimmer", pad_display(str(row.score), width)))
        parts.append((base, " "))
    if parts:
        parts.pop()
    parts.append(("", "\n"))
    return parts


def _browse_fragments(view: RenderView, width: int, max_rows: int, show_scores: bool) -> List[Tuple[str, str]]:
    parts: List[Tuple[str, str]] = [
        ("class:text.dim", f"{view.search_label}: "),
        ("class:query", view.query_text),
        ("class:query.hint", "▏\n"),
    ]
    if view.query_summary:
        parts.append(("class:text.dimmer", ellipsize(view.query_summary, width) + "\n"))
    parts.append(("class:border", "─" * width + "\n"))
    layout = ResponsiveLayoutManager.select_layout(width, show_scores=show_scores)
    widths = layout.calculate_widths(width)
    start, end = _visible_window(len(view.rows), view.selected, max_rows)
    for row in view.rows[start:end]:
        parts.extend(_row_fragments(row, layout.columns, widths, show_scores))
    parts.append(("class:border", "─" * width + "\n"))
    parts.append(("class:text.dim", ellipsize(view.count_line, width) + "\n"))
    return parts


def _edit_fragments(view: RenderView, width: int) -> List[Tuple[str, str]]:
    parts: List[Tuple[str, str]] = []
    label_w = max(len(f.label) for f in view.fields) + 2 if view.fields else 0
    label_w = min(label_w, max(8, width // 3))
    value_w = max(8, width - label_w)
    for field in view.fields:
        style = "class:field.focus" if field.focused else "class:text"
        lines = wrap_display(field.value, value_w) if field.name == EditorField.NOTES.value else [ellipsize(field.value, value_w)]
        parts.append(("class:field.label", pad_display(field.label + ":", label_w)))
        parts.append((style, lines[0] + "\n"))
        for extra in lines[1:]:
            parts.append(("", " " * label_w))
            parts.append((style, extra + "\n"))
        if field.error:
            parts.append(("", " " * label_w))
            parts.append(("class:field.error", ellipsize(field.error, value_w) + "\n"))
    return parts


def render_formatted(
    view: RenderView, width: int = 80, max_rows: int = 20, show_scores: bool = False
) -> FormattedText:
    width = max(20, width)
    mark = "  " + view.dirty_mark if view.dirty else ""
    parts: List[Tuple[str, str]] = [("class:header", ellipsize(view.header, width - display_width(mark)))]
    if mark:
        parts.append(("class:dirty", mark))
    parts.append(("", "\n"))
    if view.mode == Mode.EDITING:
        parts.extend(_edit_fragments(view, width))
    else:
        parts.extend(_browse_fragments(view, width, max_rows, show_scores))
    if view.confirm:
        parts.append(("class:confirm", ellipsize(view.confirm, width) + "\n"))
    elif view.message:
        parts.append(("class:message", ellipsize(view.message, width) + "\n"))
    parts.append(("class:text.dimmer", ellipsize(view.help, width)))
    return FormattedText(parts)


__all__ = ["ResultRow", "FieldView", "RenderView", "describe", "render_formatted"]
