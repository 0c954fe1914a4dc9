"""Application-level to-do service: workspace resolution plus load/save/add."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from core import Item
from application.ports import TodoRepository
from infrastructure.file_repository import FileTodoRepository
from infrastructure.workspace_store import WorkspaceStore


logger = logging.getLogger("todo.manager")


class TodoManager:
    """Binds the active workspace to its storage file.

    The workspace pointer is read at construction or on ``switch_workspace``;
    the storage file is resolved on first use, so an unusable pointer surfaces
    as a ``ValueError`` from load/save/add rather than from construction and
    can still be repaired through ``switch_workspace``.
    """

    def __init__(self, data_dir: Optional[Path] = None, workspace_store: Optional[WorkspaceStore] = None):
        if data_dir is None:
            from core.desktop.devtools.interface.data_dir_resolver import get_data_dir
            data_dir = get_data_dir()
        self.data_dir = Path(data_dir)
        self.workspaces = workspace_store or WorkspaceStore(self.data_dir)
        self.workspace: Optional[str] = self.workspaces.get()
        self._repository: Optional[TodoRepository] = None

    @property
    def db_path(self) -> Path:
        try:
            return self.workspaces.db_path(self.workspace or "")
        except ValueError as exc:
            raise ValueError(
                f"Workspace pointer {self.workspaces.pointer_path} is unusable ({exc}); "
                "run `todo workspace unset` or `todo workspace set NAME`"
            ) from exc

    @property
    def repository(self) -> TodoRepository:
        if self._repository is None:
            self._repository = FileTodoRepository(self.db_path)
        return self._repository

    def location(self) -> Path:
        """Storage file of the active workspace, or the pointer file when it is unusable."""
        try:
            return self.db_path
        except ValueError:
            return self.workspaces.pointer_path

    def switch_workspace(self, name: Optional[str]) -> None:
        """Point at workspace ``name`` (``None`` returns to the default db.json)."""
        if name is None:
            self.workspaces.unset()
        else:
            self.workspaces.set(name)
        self.workspace = self.workspaces.get()
        self._repository = None
        logger.info("Active workspace: %s (%s)", self.workspace or "default", self.db_path)

    def load_items(self) -> List[Item]:
        return self.repository.load()

    def save_items(self, items: List[Item]) -> None:
        self.repository.save(list(items))

    def add(self, title: str) -> Item:
        value = (title or "").strip()
        if not value:
            raise ValueError("Todo title must not be empty")
        items = self.load_items()
        item = Item(title=value)
        items.append(item)
        self.save_items(items)
        return item


__all__ = ["TodoManager"]
