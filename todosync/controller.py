"""Todo controller: synchronizes AppState with the remote todo service."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from todosync.config import DEFAULT_API_BASE, normalize_api_base
from todosync.errors import (
    ActionResult,
    Outcome,
    classify_failure,
    classify_status,
)
from todosync.events import STATE_CHANGED, EventBus
from todosync.formatter import NO_CONTENT, format_response
from todosync.models import AppState, Todo, parse_todos
from todosync.transport import Transport

logger = logging.getLogger(__name__)

TODOS_PATH = "/api/todos"
JSON_CONTENT_TYPE = "application/json"


def encode_json(payload: dict[str, Any]) -> bytes:
    """Serialize a request body compactly, matching JSON.stringify output."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class TodoController:
    """
    Owns an AppState and exposes the actions that keep it in sync with the server.

    Every action performs its exchanges sequentially, writes ``last_response``
    exactly once it completes, and returns an ActionResult instead of raising.
    Mutations never touch ``todos`` directly; a successful mutation triggers a
    full reload instead.
    """

    def __init__(
        self,
        transport: Transport,
        api_base: str = DEFAULT_API_BASE,
        *,
        state: AppState | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.transport = transport
        if state is None:
            state = AppState(api_base=api_base)
        state.api_base = normalize_api_base(state.api_base)
        self.state = state
        self.bus = bus or EventBus()

    @property
    def api_base(self) -> str:
        return self.state.api_base

    def set_new_title(self, title: str) -> None:
        """Update the input buffer, as a rendering layer does on keystrokes."""
        self.state.new_title = title

    async def init(self) -> ActionResult:
        """Startup hook: load the collection once."""
        return await self.load_todos()

    async def ping(self, path: str) -> ActionResult:
        """GET an arbitrary path and show the response."""
        url = f"{self.api_base}{path}"
        try:
            status, body = await self._exchange("GET", url)
        except Exception as e:
            result = classify_failure("ping", e)
        else:
            result = classify_status("ping", status, format_response(status, body))
        await self._record(result)
        return result

    async def load_todos(self) -> ActionResult:
        """Fetch the collection and replace ``todos`` on success."""
        result = await self._load()
        await self._record(result)
        return result

    async def create_todo(self) -> ActionResult:
        """POST the trimmed ``new_title``; blank titles are a no-op."""
        title = self.state.new_title.strip()
        if not title:
            logger.debug("create_todo skipped: title is blank")
            return ActionResult(action="create_todo", outcome=Outcome.SKIPPED)

        url = f"{self.api_base}{TODOS_PATH}"
        headers = {"Content-Type": JSON_CONTENT_TYPE, "Accept": JSON_CONTENT_TYPE}
        try:
            status, body = await self._exchange(
                "POST", url, headers=headers, payload={"title": title}
            )
        except Exception as e:
            result = classify_failure("create_todo", e)
            await self._record(result)
            return result

        result = classify_status("create_todo", status, format_response(status, body))
        if result.ok:
            self.state.new_title = ""
        await self._record(result)
        if result.ok:
            await self._refresh(result)
        return result

    async def toggle_todo(self, item: Todo | Mapping[str, Any]) -> ActionResult:
        """PUT the item back with its done flag inverted."""
        try:
            todo = _as_todo(item)
            status, body = await self._exchange(
                "PUT",
                f"{self.api_base}{TODOS_PATH}/{todo.id}",
                headers={"Content-Type": JSON_CONTENT_TYPE},
                payload={"title": todo.title, "done": not todo.done},
            )
        except Exception as e:
            result = classify_failure("toggle_todo", e)
            await self._record(result)
            return result

        return await self._finish_mutation("toggle_todo", status, body)

    async def delete_todo(self, item: Todo | Mapping[str, Any]) -> ActionResult:
        """DELETE the item by id."""
        try:
            todo = _as_todo(item)
            status, body = await self._exchange("DELETE", f"{self.api_base}{TODOS_PATH}/{todo.id}")
        except Exception as e:
            result = classify_failure("delete_todo", e)
            await self._record(result)
            return result

        return await self._finish_mutation("delete_todo", status, body)

    async def _finish_mutation(self, action: str, status: int, body: str) -> ActionResult:
        result = classify_status(action, status, format_response(status, body))
        await self._record(result)
        if result.ok:
            await self._refresh(result)
        return result

    async def _exchange(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> tuple[int, str]:
        """Perform one exchange and read its body, skipping the read on 204.

        Undecodable bytes are replaced with U+FFFD.
        """
        data = encode_json(payload) if payload is not None else None
        async with self.transport.request(method, url, headers=headers, data=data) as response:
            status = response.status
            body = "" if status == NO_CONTENT else await response.text(errors="replace")
        logger.debug(f"{method} {url} completed with HTTP {status}")
        return status, body

    async def _load(self) -> ActionResult:
        """GET the collection and apply it; leaves ``last_response`` to the caller."""
        url = f"{self.api_base}{TODOS_PATH}"
        try:
            status, body = await self._exchange("GET", url, headers={"Accept": JSON_CONTENT_TYPE})
            result = classify_status("load_todos", status, format_response(status, body))
            if not result.ok:
                return result
            todos = parse_todos(body)
        except Exception as e:
            return classify_failure("load_todos", e)

        self.state.todos = todos
        logger.debug(f"Loaded {len(todos)} todo(s)")
        return result

    async def _refresh(self, result: ActionResult) -> None:
        """
        Reload after a successful mutation.

        The mutation's diagnostic stays visible when the reload succeeds; a
        failed reload replaces it with its own diagnostic.
        """
        refresh = await self._load()
        result.refresh = refresh
        if refresh.ok:
            await self._record(result)
        else:
            logger.warning(f"Reload after {result.action} failed: {refresh.diagnostic}")
            await self._record(refresh)

    async def _record(self, result: ActionResult) -> None:
        self.state.last_response = result.diagnostic
        await self.bus.publish(
            STATE_CHANGED,
            {"action": result.action, "outcome": result.outcome, "state": self.state.snapshot()},
        )


def _as_todo(item: Todo | Mapping[str, Any]) -> Todo:
    if isinstance(item, Todo):
        return item
    return Todo.from_dict(dict(item))
