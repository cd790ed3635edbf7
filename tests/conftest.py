"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core import db
from main import app


class FakeConnection:
    """Stands in for an acquired asyncpg connection."""

    def __init__(self, pool: FakePool) -> None:
        self._pool = pool

    @asynccontextmanager
    async def transaction(self):
        self._pool.transactions += 1
        yield

    async def execute(self, sql: str, *args: Any) -> str:
        self._pool.calls.append(("execute", sql, args))
        return "OK"

    async def executemany(self, sql: str, args: Any) -> None:
        self._pool.calls.append(("executemany", sql, tuple(args)))


class FakePool:
    """Records SQL calls and returns canned rows (or raises `error`)."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.row: dict[str, Any] | None = None
        self.value: Any = 1
        self.error: Exception | None = None
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.transactions = 0

    def _record(self, method: str, sql: str, args: tuple[Any, ...]) -> None:
        self.calls.append((method, sql, args))
        if self.error is not None:
            raise self.error

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record("fetch", sql, args)
        return list(self.rows)

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._record("fetchrow", sql, args)
        return self.row

    async def fetchval(self, sql: str, *args: Any) -> Any:
        self._record("fetchval", sql, args)
        return self.value

    @asynccontextmanager
    async def acquire(self):
        yield FakeConnection(self)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest_asyncio.fixture
async def client(fake_pool: FakePool) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the store replaced by `fake_pool`."""
    app.dependency_overrides[db.get_pool] = lambda: fake_pool
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
