"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo — terminal to-do list (one JSON file per workspace)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="store_true", help="print version and exit")
    parser.add_argument(
        "--data-dir",
        dest="data_dir",
        help="directory holding db*.json and the workspace pointer (overrides $TODO_DATA_DIR; otherwise config data_dir, then cwd)",
    )

    def add_tui_args(sp, default=None):
        sp.add_argument("--theme", choices=list(themes.keys()), default=default, help="colour palette")
        sp.add_argument("--mono-select", action="store_true", default=default or False, help="monochrome selection highlight")
        return sp

    add_tui_args(parser)
    parser.set_defaults(func=commands.cmd_tui)

    sub = parser.add_subparsers(dest="command", help="Commands")

    # list
    lp = sub.add_parser("list", help="Open the interactive list (default)")
    add_tui_args(lp, default=argparse.SUPPRESS)
    lp.set_defaults(func=commands.cmd_tui)

    # add
    ap = sub.add_parser("add", help="Append a todo")
    ap.add_argument("title", help="todo title, quoted if it has spaces")
    ap.set_defaults(func=commands.cmd_add)

    # workspace
    wp = sub.add_parser("workspace", help="Switch workspace")
    wsub = wp.add_subparsers(dest="workspace_command", required=True)
    wset = wsub.add_parser("set", help="Use workspace NAME (stored in db.NAME.json)")
    wset.add_argument("workspace_name")
    wset.set_defaults(func=commands.cmd_workspace_set)
    wunset = wsub.add_parser("unset", help="Return to the default workspace (db.json)")
    wunset.set_defaults(func=commands.cmd_workspace_unset)

    return parser


__all__ = ["build_parser"]
