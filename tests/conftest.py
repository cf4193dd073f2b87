"""
Test Configuration
==================

Pytest fixtures for Bubba tests.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

# Set test environment before settings are loaded
os.environ["ENVIRONMENT"] = "testing"
os.environ["RESEND_API_KEY"] = ""
os.environ["RESEND_AUDIENCE_ID"] = ""
os.environ["TRIGGER_SECRET_KEY"] = ""
os.environ["DISCORD_WEBHOOK_URL"] = ""
os.environ["OPENPANEL_CLIENT_ID"] = ""
os.environ["CACHE_ENABLED"] = "true"


class FakeRedis:
    """In-memory stand-in for the handful of Redis commands the cache uses."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.sets: dict[str, set[str]] = {}
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise RedisConnectionError("redis unavailable")

    async def get(self, key: str) -> str | None:
        self._check()
        return self.values.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check()
        self.values[key] = value
        return True

    async def sadd(self, key: str, *members: str) -> int:
        self._check()
        self.sets.setdefault(key, set()).update(members)
        return len(members)

    async def smembers(self, key: str) -> set[str]:
        self._check()
        return set(self.sets.get(key, set()))

    async def expire(self, key: str, seconds: int) -> bool:
        self._check()
        return key in self.values or key in self.sets

    async def delete(self, *keys: str) -> int:
        self._check()
        deleted = 0
        for key in keys:
            if self.values.pop(key, None) is not None:
                deleted += 1
            elif self.sets.pop(key, None) is not None:
                deleted += 1
        return deleted

    async def aclose(self) -> None:
        return None


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture(autouse=True)
def fake_redis() -> FakeRedis:
    """Route every RedisClient user to an in-memory fake."""
    from shared.database.redis import RedisClient

    fake = FakeRedis()
    previous = RedisClient._client
    RedisClient._client = fake  # type: ignore[assignment]
    yield fake
    RedisClient._client = previous


@pytest_asyncio.fixture
async def dashboard_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Dashboard Service."""
    from services.dashboard.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def marketing_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Marketing Service."""
    from services.marketing.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def jobs_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Jobs Service."""
    from services.jobs.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def make_auth_headers() -> Callable[..., dict[str, str]]:
    """Build Authorization headers for a session token."""
    from shared.auth import create_access_token

    def _make(**claims: Any) -> dict[str, str]:
        payload = {
            "sub": "user-1",
            "email": "owner@acme.test",
            "roles": ["member"],
            **claims,
        }
        return {"Authorization": f"Bearer {create_access_token(payload)}"}

    return _make


@pytest.fixture
def auth_headers(make_auth_headers: Callable[..., dict[str, str]]) -> dict[str, str]:
    """Headers for a member of organization org-1."""
    return make_auth_headers(organization_id="org-1")
