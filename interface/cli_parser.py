"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo: a terminal TODO tracker with an interactive search view",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="store_true", help="print version and exit")
    parser.add_argument("--json", action="store_true", help="structured JSON output")
    parser.add_argument("--file", "-f", dest="file", help="task file (default: TODO_FILE, ./TODO.yaml or the data dir)")
    parser.set_defaults(func=commands.cmd_overview)

    def add_json_arg(sp):
        # SUPPRESS keeps a --json given before the subcommand
        sp.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="structured JSON output")
        return sp

    def add_field_args(sp):
        sp.add_argument("--priority", "-p", help="P0 (urgent) … P5 (worth considering)")
        sp.add_argument("--category", "-c")
        sp.add_argument("--project")
        sp.add_argument("--notes", "-n")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # add
    ap = add_json_arg(sub.add_parser("add", help="Add a TODO"))
    ap.add_argument("title")
    ap.add_argument("--status", "-s", help="Todo, InProgress, Done, Archived")
    ap.add_argument("--tags", "-t", help="comma-separated tags")
    add_field_args(ap)
    ap.set_defaults(func=commands.cmd_add)

    # list
    lp = add_json_arg(sub.add_parser("list", help="List TODOs"))
    lp.add_argument("--status", "-s")
    lp.add_argument("--category", "-c")
    lp.add_argument("--priority", "-p")
    lp.add_argument("--tags", "-t", help="comma-separated, all required")
    lp.add_argument("--all", "-a", action="store_true", help="include archived TODOs")
    lp.set_defaults(func=commands.cmd_list)

    # show
    sp = add_json_arg(sub.add_parser("show", help="Show TODO details"))
    sp.add_argument("task_id", type=int)
    sp.set_defaults(func=commands.cmd_show)

    # update
    up = add_json_arg(sub.add_parser("update", help="Update a TODO"))
    up.add_argument("task_id", type=int)
    up.add_argument("--status", "-s")
    up.add_argument("--tags", "-t", help="add/remove tags: +tag,-tag")
    add_field_args(up)
    up.set_defaults(func=commands.cmd_update)

    # delete
    dp = add_json_arg(sub.add_parser("delete", help="Delete TODOs"))
    dp.add_argument("task_id", type=int, nargs="?")
    dp.add_argument("--category", "-c", help="delete all in category")
    dp.add_argument("--status", "-s", help="delete all with status")
    dp.set_defaults(func=commands.cmd_delete)

    # stats
    st = add_json_arg(sub.add_parser("stats", help="Show statistics"))
    st.set_defaults(func=commands.cmd_stats)

    # search
    qp = sub.add_parser("search", help="Search TODOs interactively")
    qp.add_argument("query", nargs="?", default="", help="pre-fill the search (#tag @category !status p0-p5)")
    qp.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"palette (default: {default_theme})")
    qp.set_defaults(func=commands.cmd_tui)

    # edit
    ep = sub.add_parser("edit", help="Edit a TODO interactively")
    ep.add_argument("task_id", type=int)
    ep.add_argument("--theme", choices=list(themes.keys()), default=None)
    ep.set_defaults(func=commands.cmd_tui)

    return parser


__all__ = ["build_parser"]
