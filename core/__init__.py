from .item import Item
from .selectable_list import SelectableList

__all__ = [
    "Item",
    "SelectableList",
]
