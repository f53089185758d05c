"""Shared test fixtures for the JWT revoker."""

import os

# Pin the claim before any app import caches Settings().
os.environ.setdefault("JWT_CLAIM", "sid")

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from jwt_revoker.backends.redis_backend import RedisMembershipBackend  # noqa: E402
from jwt_revoker.main import app  # noqa: E402

# ---------------------------------------------------------------------------
# Membership backends
# ---------------------------------------------------------------------------


def _make_fake_redis():
    """Create a fakeredis instance that behaves like redis.asyncio.Redis."""
    return fakeredis.aioredis.FakeRedis()


def _make_mock_backend() -> AsyncMock:
    """A backend whose calls can be asserted on. ``check`` reports ``False``."""
    backend = AsyncMock()
    backend.add.return_value = None
    backend.check.return_value = False
    return backend


@pytest_asyncio.fixture()
async def redis_backend() -> AsyncGenerator[RedisMembershipBackend, None]:
    """Redis membership backend over fakeredis."""
    backend = RedisMembershipBackend(_make_fake_redis())
    yield backend
    await backend.close()


@pytest.fixture()
def mock_backend() -> AsyncMock:
    return _make_mock_backend()


# ---------------------------------------------------------------------------
# HTTP client fixtures (FastAPI app with the backend swapped in)
# ---------------------------------------------------------------------------


async def _client_for(backend) -> AsyncGenerator[AsyncClient, None]:
    app.state.backend = backend
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def client(redis_backend) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the app with a fakeredis-backed store."""
    async for ac in _client_for(redis_backend):
        yield ac


@pytest_asyncio.fixture()
async def mock_client(mock_backend) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the app with an ``AsyncMock`` backend."""
    async for ac in _client_for(mock_backend):
        yield ac
