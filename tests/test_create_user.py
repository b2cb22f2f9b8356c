"""User provisioning script tests."""

from __future__ import annotations

import bcrypt
import pytest

from core import db
from scripts import create_user as script

from tests.helpers.fake_db import FakePool


@pytest.fixture
def pool(monkeypatch: pytest.MonkeyPatch) -> FakePool:
    fake = FakePool()

    async def _create_pool():
        return fake

    async def _close_pool(_pool):
        return None

    monkeypatch.setattr(db, "create_pool", _create_pool)
    monkeypatch.setattr(db, "close_pool", _close_pool)
    return fake


@pytest.mark.asyncio
async def test_create_user_stores_bcrypt_hash(pool: FakePool):
    assert await script.create_user("dev@example.com", "s3cret") == 0

    (row,) = pool.users.values()
    assert row["email"] == "dev@example.com"
    assert bcrypt.checkpw(b"s3cret", row["password"].encode("utf-8"))


@pytest.mark.asyncio
async def test_create_user_duplicate_email(pool: FakePool):
    pool.add_user("dev@example.com", "x")

    assert await script.create_user("dev@example.com", "s3cret") == 1


@pytest.mark.asyncio
async def test_create_user_empty_password(pool: FakePool):
    assert await script.create_user("dev@example.com", "") == 1

    assert pool.users == {}
    assert pool.statements == []
