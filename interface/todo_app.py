#!/usr/bin/env python3
"""
todo: terminal TODO tracker (CLI + interactive search).

Thin facade: builds the parser, wires commands to their dependencies and
turns domain errors into exit code 1.
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from types import SimpleNamespace
from typing import List, Optional

from application.task_manager import TaskManager
from config import DEFAULT_THEME
from core import TodoError
from infrastructure.file_repository import YamlTaskRepository
from interface import cli_commands
from interface.cli_commands import CliDeps
from interface.cli_io import fail
from interface.cli_parser import build_parser as build_cli_parser
from interface.i18n import translate
from interface.tui_app import cmd_tui
from interface.tui_themes import THEMES
from util.logging_setup import setup_logging

logger = logging.getLogger("todo.cli")


def _commands(deps: CliDeps) -> SimpleNamespace:
    def bind(fn):
        return lambda args: fn(args, deps)

    return SimpleNamespace(
        cmd_overview=bind(cli_commands.cmd_overview),
        cmd_add=bind(cli_commands.cmd_add),
        cmd_list=bind(cli_commands.cmd_list),
        cmd_show=bind(cli_commands.cmd_show),
        cmd_update=bind(cli_commands.cmd_update),
        cmd_delete=bind(cli_commands.cmd_delete),
        cmd_stats=bind(cli_commands.cmd_stats),
        cmd_tui=cmd_tui,
    )


def build_parser(deps: Optional[CliDeps] = None):
    deps = deps or CliDeps(manager_factory=TaskManager, translate=translate)
    return build_cli_parser(_commands(deps), THEMES, DEFAULT_THEME)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    holder = {}

    def manager_factory() -> TaskManager:
        # one store per invocation, bound to --file when given
        if "manager" not in holder:
            path = getattr(holder.get("args"), "file", None)
            holder["manager"] = TaskManager(YamlTaskRepository(path) if path else None)
        return holder["manager"]

    parser = build_parser(CliDeps(manager_factory=manager_factory, translate=translate))
    args = parser.parse_args(argv)
    holder["args"] = args
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-tracker"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    try:
        return args.func(args)
    except TodoError as exc:
        logger.debug("command %s failed: %s", getattr(args, "command", None) or "overview", exc)
        return fail(args, getattr(args, "command", None) or "overview", str(exc))


def run() -> int:
    """Console-script entry: logging first, then the CLI."""
    setup_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
