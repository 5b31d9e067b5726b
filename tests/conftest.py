"""Pytest configuration for all todosync tests.

Ensures the project root is on sys.path and provides a scripted transport.
"""

import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Ensure project root is on sys.path
_root = Path(__file__).resolve().parents[1]
if _root not in [Path(p) for p in sys.path]:
    sys.path.insert(0, str(_root))

from todosync.transport import Transport  # noqa: E402


class FakeResponse:
    """Response whose body can be read once."""

    def __init__(self, status: int, body: str = "", read_error: Exception | None = None):
        self.status = status
        self._body = body
        self._read_error = read_error
        self.reads = 0
        self.errors = None

    async def text(self, errors: str = "strict") -> str:
        self.reads += 1
        self.errors = errors
        if self._read_error is not None:
            raise self._read_error
        if self.reads > 1:
            raise RuntimeError("body already consumed")
        return self._body


@dataclass
class Reply:
    status: int = 200
    body: str = ""
    error: Exception | None = None
    read_error: Exception | None = None


@dataclass
class Call:
    method: str
    url: str
    headers: dict | None
    data: bytes | None
    response: FakeResponse | None = None


@dataclass
class FakeTransport(Transport):
    """Transport that answers from scripted replies keyed by (method, url).

    Replies for a key are consumed in order; the last one repeats.
    """

    replies: dict = field(default_factory=dict)
    calls: list = field(default_factory=list)
    closed: bool = False

    def add(self, method: str, url: str, status: int = 200, body: str = "", **kwargs) -> None:
        self.replies.setdefault((method, url), []).append(Reply(status, body, **kwargs))

    def fail(self, method: str, url: str, error: Exception) -> None:
        self.replies.setdefault((method, url), []).append(Reply(error=error))

    @asynccontextmanager
    async def request(self, method, url, *, headers=None, data=None):
        call = Call(method, url, headers, data)
        self.calls.append(call)
        queue = self.replies.get((method, url))
        if not queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        reply = queue.pop(0) if len(queue) > 1 else queue[0]
        if reply.error is not None:
            raise reply.error
        call.response = FakeResponse(reply.status, reply.body, reply.read_error)
        yield call.response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def api_base():
    return "http://todo.test"
