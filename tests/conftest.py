"""Shared fixtures.

The app runs against `FakePool` through a dependency override, so no
PostgreSQL is needed. The lifespan (real pool) never runs under
ASGITransport.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from tests.helpers.app import build_app
from tests.helpers.fake_db import FakePool


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKEN_KEY", "test-secret")
    monkeypatch.delenv("REQUIRE_AUTH", raising=False)
    monkeypatch.delenv("TOKEN_EXPIRE_MIN", raising=False)
    monkeypatch.delenv("JWT_ALG", raising=False)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def app(fake_pool: FakePool):
    return build_app(fake_pool)


@pytest.fixture
async def api_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
