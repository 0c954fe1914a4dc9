from typing import List, Optional, Protocol

from core import Item


class TodoRepository(Protocol):
    def load(self) -> List[Item]:
        ...

    def save(self, items: List[Item]) -> None:
        ...


class WorkspacePointer(Protocol):
    def get(self) -> Optional[str]:
        ...

    def set(self, name: str) -> None:
        ...

    def unset(self) -> None:
        ...
