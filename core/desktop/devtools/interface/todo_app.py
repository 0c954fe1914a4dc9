#!/usr/bin/env python3
"""
todo.py — terminal to-do list (CLI + full-screen TUI).

Items live in db.json, or db.<workspace>.json when a workspace is set.

This is a thin facade that delegates to specialized modules.
"""

import logging
import os
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser

from .cli_commands import cmd_add, cmd_workspace_set, cmd_workspace_unset
from .tui_app import cmd_tui, run_session, TodoTUI
from .tui_controller import Action, Effect, KEYMAP, ListController
from .tui_themes import THEMES, DEFAULT_THEME

from core import Item, SelectableList
from core.desktop.devtools.application.todo_manager import TodoManager

__all__ = [
    # Commands
    "cmd_add",
    "cmd_workspace_set",
    "cmd_workspace_unset",
    "cmd_tui",
    # Session
    "run_session",
    "TodoTUI",
    "ListController",
    "Action",
    "Effect",
    "KEYMAP",
    "THEMES",
    "DEFAULT_THEME",
    # Models
    "Item",
    "SelectableList",
    "TodoManager",
    "build_parser",
    "main",
]


def build_parser():
    return build_cli_parser(sys.modules[__name__], THEMES)


def _configure_logging() -> None:
    level = os.environ.get("TODO_LOG_LEVEL", "").strip().upper()
    if not level:
        return
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    """Main entry point."""
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-tui"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
