"""Key dispatch for the interactive list: one key, one transition.

``ListController`` never touches the terminal or the file system. The loop
driver draws ``frame()`` and performs the save when ``handle`` reports
``Effect.QUIT``.
"""

from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional

from core import Item, SelectableList


class Action(Enum):
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    DELETE = "delete"


class Effect(Enum):
    NONE = "none"
    QUIT = "quit"


# prompt_toolkit key names → actions; anything absent is ignored.
KEYMAP: Dict[str, Action] = {
    "q": Action.QUIT,
    "up": Action.UP,
    "k": Action.UP,
    "down": Action.DOWN,
    "j": Action.DOWN,
    "t": Action.TOGGLE,
    "space": Action.TOGGLE,
    "d": Action.DELETE,
    "delete": Action.DELETE,
}


class FrameLine(NamedTuple):
    done: bool
    title: str
    highlighted: bool


def action_for_key(key: str) -> Optional[Action]:
    return KEYMAP.get(key)


class ListController:
    def __init__(self, items: Iterable[Item]):
        self.items: SelectableList[Item] = SelectableList.with_items(items)
        if self.items.items:
            self.items.select(0)
        self.finished = False

    def handle(self, action: Optional[Action]) -> Effect:
        if self.finished:
            return Effect.NONE
        if action is Action.QUIT:
            self.finished = True
            return Effect.QUIT
        if action is Action.UP:
            self.items.previous()
        elif action is Action.DOWN:
            self.items.next()
        elif action is Action.TOGGLE:
            item = self.items.current()
            if item is not None:
                item.toggle()
        elif action is Action.DELETE:
            self.items.remove()
        return Effect.NONE

    def handle_key(self, key: str) -> Effect:
        return self.handle(action_for_key(key))

    def frame(self) -> List[FrameLine]:
        selected = self.items.selected
        return [FrameLine(item.done, item.title, idx == selected) for idx, item in enumerate(self.items.items)]

    def snapshot(self) -> List[Item]:
        return list(self.items.items)


__all__ = ["Action", "Effect", "KEYMAP", "FrameLine", "ListController", "action_for_key"]
