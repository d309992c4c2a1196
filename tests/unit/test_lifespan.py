"""Unit tests for the lifespan middleware."""

from unittest.mock import AsyncMock

import pytest

from roleguard.interfaces.api.middleware.lifespan import LifespanMiddleware


@pytest.mark.asyncio
async def test_startup_opens_pool_then_runs_hooks() -> None:
    calls: list[str] = []
    pool = AsyncMock()
    pool.open.side_effect = lambda: calls.append("open")

    async def hook() -> None:
        calls.append("hook")

    middleware = LifespanMiddleware(pool, startup_hooks=[hook])
    await middleware.process_startup({}, {})
    assert calls == ["open", "hook"]

    await middleware.process_shutdown({}, {})
    pool.close.assert_awaited_once()
