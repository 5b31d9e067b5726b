"""HTTP transport for todosync."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class Transport(ABC):
    """
    Capability to perform one HTTP exchange.

    ``request`` returns an async context manager yielding a response object
    with an integer ``status`` and a coroutine ``text(errors=...)`` that reads
    the body once, decoding with the given error handler. Implementations
    raise when the exchange cannot be established.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> Any:
        """Open an exchange; use as ``async with transport.request(...) as response``."""

    async def close(self) -> None:
        """Release any held resources."""


class AiohttpTransport(Transport):
    """
    Transport backed by a single reused aiohttp session.

    No total timeout is imposed; a hung exchange hangs its action.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or lazily create the shared session."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                connector = aiohttp.TCPConnector(
                    limit=10,  # Max connections
                    keepalive_timeout=30,  # Keep connections alive for 30s
                )
                self._session = aiohttp.ClientSession(
                    connector=connector,
                    timeout=aiohttp.ClientTimeout(total=None),
                )
                self._owns_session = True
                logger.debug("Created new HTTP session")
            return self._session

    @asynccontextmanager
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> AsyncIterator[aiohttp.ClientResponse]:
        session = await self._get_session()
        logger.debug(f"{method} {url}")
        async with session.request(method, url, headers=headers, data=data) as response:
            logger.debug(f"{method} {url} -> {response.status}")
            yield response

    async def close(self) -> None:
        """Close the session if this transport created it."""
        async with self._session_lock:
            if self._session is not None and self._owns_session and not self._session.closed:
                await self._session.close()
                logger.debug("Closed HTTP session")
            self._session = None

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
