"""Workspace pointer file and workspace → storage file mapping."""

import logging
from pathlib import Path
from typing import Optional

from application.ports import WorkspacePointer


logger = logging.getLogger("todo.workspace")

POINTER_FILENAME = ".workspace"
DEFAULT_DB_FILENAME = "db.json"


def validate_workspace_name(name: str) -> str:
    value = (name or "").strip()
    if not value:
        raise ValueError("Workspace name must not be empty")
    # SEC: workspace names become file names inside the data dir
    if ".." in value or "/" in value or "\\" in value:
        raise ValueError(f"Invalid workspace name: contains path traversal characters: {value}")
    return value


def db_filename(workspace: Optional[str]) -> str:
    """``db.json`` without a workspace, ``db.<workspace>.json`` otherwise."""
    if not workspace:
        return DEFAULT_DB_FILENAME
    return f"db.{validate_workspace_name(workspace)}.json"


class WorkspaceStore(WorkspacePointer):
    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.pointer_path = self.data_dir / POINTER_FILENAME

    def get(self) -> Optional[str]:
        if not self.pointer_path.exists():
            return None
        raw = self.pointer_path.read_text(encoding="utf-8").strip()
        return raw or None

    def set(self, name: str) -> None:
        value = validate_workspace_name(name)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.pointer_path.write_text(value, encoding="utf-8")
        logger.debug("Workspace set to %s", value)

    def unset(self) -> None:
        if self.pointer_path.exists():
            self.pointer_path.unlink()
        logger.debug("Workspace unset")

    def db_path(self, workspace: Optional[str] = None) -> Path:
        return self.data_dir / db_filename(workspace if workspace is not None else self.get())


__all__ = [
    "WorkspaceStore",
    "validate_workspace_name",
    "db_filename",
    "POINTER_FILENAME",
    "DEFAULT_DB_FILENAME",
]
