import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from core import Item
from application.ports import TodoRepository


logger = logging.getLogger("todo.storage")


class StorageError(ValueError):
    """Stored to-do data exists but cannot be read back as a list of items."""


class FileTodoRepository(TodoRepository):
    """JSON file storage: ``{"todos": [{"title": ..., "done": ...}, ...]}``."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Item]:
        if not self.path.exists():
            logger.debug("No data at %s, starting empty", self.path)
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise StorageError(f"{self.path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"{self.path}: expected an object with a 'todos' list")
        entries = raw.get("todos", [])
        if not isinstance(entries, list):
            raise StorageError(f"{self.path}: 'todos' must be a list")
        items: List[Item] = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise StorageError(f"{self.path}: todo #{idx} is not an object")
            items.append(Item.from_dict(entry))
        logger.debug("Loaded %d item(s) from %s", len(items), self.path)
        return items

    def save(self, items: List[Item]) -> None:
        payload = json.dumps({"todos": [item.to_dict() for item in items]}, ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload + "\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(self.path))
        finally:
            if tmp_path and tmp_path.exists():
                tmp_path.unlink()
        logger.debug("Saved %d item(s) to %s", len(items), self.path)


__all__ = ["FileTodoRepository", "StorageError"]
