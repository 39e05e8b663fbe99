import logging

import pytest

from util.logging_setup import setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_log_receives_debug_records(tmp_path, restore_root_logging):
    setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("todo.store").debug("loaded 3 tasks")
    for h in restore_root_logging.handlers:
        h.flush()
    text = (tmp_path / "logs" / "todo.log").read_text(encoding="utf-8")
    assert "DEBUG todo.store: loaded 3 tasks" in text


def test_console_filter_keeps_terminal_quiet(tmp_path, restore_root_logging, capsys):
    setup_logging(log_dir=tmp_path)
    logging.getLogger("todo.session").info("not shown")
    logging.getLogger("todo.session").warning("shown warning")
    logging.getLogger("prompt_toolkit").warning("third-party noise")
    err = capsys.readouterr().err
    assert "shown warning" in err
    assert "not shown" not in err
    assert "third-party noise" not in err


def test_unwritable_log_dir_keeps_console_only(tmp_path, restore_root_logging):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    setup_logging(log_dir=blocker / "logs")
    assert not any(isinstance(h, logging.FileHandler) for h in restore_root_logging.handlers)
    assert restore_root_logging.handlers
