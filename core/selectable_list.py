"""Ordered collection paired with a single selection cursor.

The cursor is an index into the owned sequence, never a reference to an item,
so removal can reindex freely.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Items plus an optional selected index.

    Whenever ``items`` is non-empty and a selection has been made, ``selected``
    is in ``range(len(items))``; whenever ``items`` is empty it is ``None``.
    """

    def __init__(self, items: Optional[List[T]] = None, selected: Optional[int] = None):
        self.items: List[T] = list(items or [])
        self.selected: Optional[int] = None
        self.select(selected)

    @classmethod
    def with_items(cls, items: Iterable[T]) -> "SelectableList[T]":
        """Build a list with no selection; callers pick the initial index."""
        return cls(list(items))

    def __len__(self) -> int:
        return len(self.items)

    def select(self, index: Optional[int]) -> None:
        if index is None:
            self.selected = None
            return
        if not 0 <= index < len(self.items):
            raise IndexError(f"selection {index} out of range for {len(self.items)} items")
        self.selected = index

    def next(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
            return
        self.selected = (self.selected + 1) % len(self.items)

    def previous(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.selected = len(self.items) - 1
            return
        self.selected = (self.selected - 1) % len(self.items)

    def current(self) -> Optional[T]:
        if self.selected is None or not self.items:
            return None
        return self.items[self.selected]

    def remove(self) -> Optional[T]:
        """Drop the selected item and clamp the cursor.

        Removing the last row moves the cursor up to the new last row; removing
        any other row keeps the index, so the next item slides under the cursor.
        """
        if self.selected is None or not self.items:
            return None
        index = self.selected
        removed = self.items.pop(index)
        if not self.items:
            self.selected = None
        elif index >= len(self.items):
            self.selected = len(self.items) - 1
        else:
            self.selected = index
        return removed


__all__ = ["SelectableList"]
