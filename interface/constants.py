"""Interface-level constants for the todo CLI/TUI."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

LANG_PACK = {
    "en": {
        "HEADER_SEARCH": "Search TODOs",
        "HEADER_EDIT": "Edit TODO #{task_id}",
        "HEADER_NEW": "New TODO",
        "SEARCH_LABEL": "Search",
        "RESULTS_COUNT": "{count} results found",
        "RESULTS_EMPTY": "No matching TODOs",
        "QUERY_SUMMARY": "Filter: {summary}",
        "DIRTY_MARK": "● unsaved",
        "HELP_BROWSING": "Type to search (#tag @category !status p0-p5) • ↑↓ Navigate • ⏎ Edit • ⌃↑/⌃↓ Priority • ⌃R Archive • ⌃D Done • ⌃A Add • ⌃S Save • ⌃X Exit",
        "HELP_EDITING": "⏎ Save & Exit • ⌃S Save • ⌃R Archive • Esc Cancel • ⇥ Next • ⇧⇥ Previous • ←/→ Change option",
        "CONFIRM_EXIT": "Unsaved changes. Save before exit? [y]es / [n]o / [Esc] back",
        "FIELD_TITLE": "Title",
        "FIELD_PRIORITY": "Priority",
        "FIELD_STATUS": "Status",
        "FIELD_CATEGORY": "Category",
        "FIELD_PROJECT": "Project",
        "FIELD_TAGS": "Tags (comma-separated)",
        "FIELD_NOTES": "Notes",
        "STATUS_SAVED": "Saved",
        "STATUS_SAVE_FAILED": "Save failed, changes kept. Press ⌃S to retry",
        "STATUS_NOTHING_TO_SAVE": "Nothing to save",
        "STATUS_NOT_FOUND": "TODO #{task_id} not found",
        "STATUS_ARCHIVED": "Archived #{task_id}",
        "STATUS_DONE": "Marked #{task_id} done",
        "STATUS_PRIORITY": "#{task_id} is now {priority}",
        "STATUS_CREATED": "Created #{task_id}",
        "STATUS_UPDATED": "Updated #{task_id}",
        "STATUS_EDIT_CANCELLED": "Edit cancelled",
        "STATUS_FIX_ERRORS": "Fix the highlighted fields first",
        "OVERVIEW_TITLE": "Your TODOs",
        "OVERVIEW_PRIORITY": "Top priority",
        "OVERVIEW_DISCOVERY": "Also worth a look",
        "OVERVIEW_EMPTY": "No active TODOs found! Use 'todo add' to create your first TODO",
        "OVERVIEW_TOTALS": "{active} active • {done} done • {archived} archived",
        "ERR_NOT_FOUND": "TODO with ID {task_id} not found",
        "MSG_ADDED": "Added TODO #{task_id}: {title}",
        "MSG_UPDATED": "Updated TODO #{task_id}",
        "MSG_DELETED": "Deleted TODO #{task_id}",
        "MSG_NO_RESULTS": "No TODOs found.",
        "MSG_LIST_COUNT": "Showing {count} TODOs",
        "MSG_DELETED_MANY": "Deleted {count} TODOs",
        "ERR_DELETE_TARGET": "Must specify either ID, --category or --status",
        "ERR_SAVE_FAILED": "Could not save {path}",
    },
    "ru": {
        "HEADER_SEARCH": "Поиск задач",
        "HEADER_EDIT": "Задача #{task_id}",
        "HEADER_NEW": "Новая задача",
        "SEARCH_LABEL": "Поиск",
        "RESULTS_COUNT": "Найдено: {count}",
        "RESULTS_EMPTY": "Ничего не найдено",
        "QUERY_SUMMARY": "Фильтр: {summary}",
        "DIRTY_MARK": "● не сохранено",
        "CONFIRM_EXIT": "Есть несохранённые изменения. Сохранить? [y] да / [n] нет / [Esc] назад",
        "FIELD_TITLE": "Название",
        "FIELD_PRIORITY": "Приоритет",
        "FIELD_STATUS": "Статус",
        "FIELD_CATEGORY": "Категория",
        "FIELD_PROJECT": "Проект",
        "FIELD_TAGS": "Теги (через запятую)",
        "FIELD_NOTES": "Заметки",
        "STATUS_SAVED": "Сохранено",
        "STATUS_SAVE_FAILED": "Не удалось сохранить, изменения сохранены в памяти. ⌃S повторить",
        "STATUS_NOT_FOUND": "Задача #{task_id} не найдена",
        "STATUS_ARCHIVED": "#{task_id} в архиве",
        "STATUS_DONE": "#{task_id} выполнена",
        "STATUS_CREATED": "Создана #{task_id}",
        "STATUS_UPDATED": "Обновлена #{task_id}",
        "STATUS_EDIT_CANCELLED": "Редактирование отменено",
        "OVERVIEW_TITLE": "Ваши задачи",
        "ERR_NOT_FOUND": "Задача с ID {task_id} не найдена",
        "MSG_ADDED": "Добавлена задача #{task_id}: {title}",
        "MSG_UPDATED": "Задача #{task_id} обновлена",
        "MSG_DELETED": "Задача #{task_id} удалена",
        "MSG_DELETED_MANY": "Удалено задач: {count}",
        "MSG_NO_RESULTS": "Задачи не найдены.",
        "MSG_LIST_COUNT": "Показано задач: {count}",
        "ERR_SAVE_FAILED": "Не удалось сохранить {path}",
    },
}
