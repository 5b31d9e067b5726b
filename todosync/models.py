"""State records for todosync: todos and the controller's app state."""

import json
from dataclasses import dataclass, field
from typing import Any

from todosync.exceptions import TodoParseError

TODO_FIELDS = ("id", "title", "done")


@dataclass(frozen=True)
class Todo:
    """A server-owned todo record. ``id`` is opaque and never generated locally."""

    id: Any
    title: str
    done: bool = False
    # Other server fields (e.g. created_at), kept as received
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Todo":
        """Build a Todo from its wire shape; unknown fields land in ``extra``."""
        if not isinstance(data, dict):
            raise TodoParseError(
                f"Todo record must be an object, got {type(data).__name__}", record=data
            )
        missing = [name for name in TODO_FIELDS if name not in data]
        if missing:
            raise TodoParseError(
                f"Todo record is missing {', '.join(missing)}", record=data
            )
        extra = {k: v for k, v in data.items() if k not in TODO_FIELDS}
        return cls(
            id=data["id"], title=str(data["title"]), done=bool(data["done"]), extra=extra
        )

    def to_dict(self) -> dict[str, Any]:
        return {**self.extra, "id": self.id, "title": self.title, "done": self.done}


def parse_todos(text: str) -> list[Todo]:
    """
    Decode a ``GET /api/todos`` body.

    Args:
        text: Raw response body

    Returns:
        List of todos; an empty body yields an empty list

    Raises:
        TodoParseError: If the body is not a JSON array of todo records
    """
    if not text or not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TodoParseError(f"Invalid JSON in todo list: {e}") from e

    if not isinstance(data, list):
        raise TodoParseError(
            f"Todo list must be a JSON array, got {type(data).__name__}"
        )

    return [Todo.from_dict(item) for item in data]


@dataclass
class AppState:
    """Observable state owned by a TodoController.

    ``todos`` is only ever replaced wholesale. The rendering layer reads all
    fields and may write ``new_title``.
    """

    api_base: str
    last_response: str = ""
    todos: list[Todo] = field(default_factory=list)
    new_title: str = ""

    def snapshot(self) -> dict[str, Any]:
        """Return a plain-dict copy of the state for rendering."""
        return {
            "api_base": self.api_base,
            "last_response": self.last_response,
            "todos": [todo.to_dict() for todo in self.todos],
            "new_title": self.new_title,
        }
