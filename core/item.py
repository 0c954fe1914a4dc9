from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Item:
    title: str
    done: bool = False

    def toggle(self) -> None:
        self.done = not self.done

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "done": self.done}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        return cls(title=str(data.get("title", "")), done=bool(data.get("done", False)))
