from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from infrastructure.todo_file_resolver import get_data_dir


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the terminal quiet: our warnings only, third-party errors only."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("todo."):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Optional[str | Path] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """Console handler on stderr plus a full log file in the data directory.

    Call this once from the entry point. A log directory that cannot be
    created leaves console logging only.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    target = Path(log_dir) if log_dir is not None else get_data_dir() / "logs"
    try:
        target.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(target / "todo.log"), encoding="utf-8")
    except OSError as exc:
        logging.getLogger("todo.logging").warning("File logging disabled: %s", exc)
        return
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)


__all__ = ["setup_logging"]
