"""Non-interactive commands: add and workspace switching."""

import argparse

from core.desktop.devtools.application.todo_manager import TodoManager
from infrastructure.file_repository import StorageError

from .cli_io import structured_error, structured_response


def _manager(args: argparse.Namespace) -> TodoManager:
    return TodoManager(data_dir=getattr(args, "data_dir", None))


def cmd_add(args: argparse.Namespace) -> int:
    manager = _manager(args)
    try:
        item = manager.add(args.title)
    except (StorageError, ValueError, OSError) as exc:
        return structured_error("add", str(exc), payload={"path": str(manager.location())})
    return structured_response(
        "add",
        message=f"Added: {item.title}",
        payload={"item": item.to_dict(), "workspace": manager.workspace or "", "path": str(manager.db_path)},
    )


def cmd_workspace_set(args: argparse.Namespace) -> int:
    manager = _manager(args)
    try:
        manager.switch_workspace(args.workspace_name)
    except (ValueError, OSError) as exc:
        return structured_error("workspace.set", str(exc), payload={"workspace": args.workspace_name})
    return structured_response(
        "workspace.set",
        message=f"Workspace: {manager.workspace}",
        payload={"workspace": manager.workspace, "path": str(manager.db_path)},
    )


def cmd_workspace_unset(args: argparse.Namespace) -> int:
    manager = _manager(args)
    try:
        manager.switch_workspace(None)
    except OSError as exc:
        return structured_error("workspace.unset", str(exc))
    return structured_response(
        "workspace.unset",
        message="Workspace: default",
        payload={"workspace": "", "path": str(manager.db_path)},
    )


__all__ = ["cmd_add", "cmd_workspace_set", "cmd_workspace_unset"]
