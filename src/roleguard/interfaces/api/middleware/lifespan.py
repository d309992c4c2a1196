"""Lifespan middleware - pool open/close and startup hooks."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)

StartupHook = Callable[[], Awaitable[Any]]


class LifespanMiddleware:
    """Opens the connection pool on startup, runs hooks, closes pool on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        startup_hooks: Sequence[StartupHook] = (),
    ) -> None:
        self._pool = pool
        self._startup_hooks = list(startup_hooks)

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool, then run hooks in order."""
        await self._pool.open()
        logger.info("Connection pool opened")
        for hook in self._startup_hooks:
            await hook()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
        logger.info("Connection pool closed")
