"""todosync - client-side controller for a remote todo service."""

from todosync.controller import TodoController
from todosync.errors import ActionResult, Outcome
from todosync.formatter import format_response
from todosync.models import AppState, Todo

__version__ = "0.1.0"

__all__ = [
    "ActionResult",
    "AppState",
    "Outcome",
    "Todo",
    "TodoController",
    "format_response",
]
