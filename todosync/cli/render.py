"""Render an AppState snapshot for the terminal."""

import json
import sys
from typing import Any, TextIO

from todosync.models import AppState


def format_state(state: AppState) -> str:
    """Plain-text view: API base, todo list, then the last diagnostic."""
    lines = [f"API: {state.api_base}"]
    if state.todos:
        for todo in state.todos:
            mark = "x" if todo.done else " "
            lines.append(f"  [{mark}] {todo.id}  {todo.title}")
    else:
        lines.append("  (no todos)")
    lines.append("--- last response ---")
    lines.append(state.last_response)
    return "\n".join(lines)


def format_state_json(state: AppState) -> str:
    snapshot: dict[str, Any] = state.snapshot()
    return json.dumps(snapshot, indent=2, ensure_ascii=False)


def render(state: AppState, json_output: bool = False, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    text = format_state_json(state) if json_output else format_state(state)
    print(text, file=out)
