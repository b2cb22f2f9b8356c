"""Commit history endpoint tests."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from httpx import AsyncClient

from tests.helpers.fake_db import FakePool


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def project_152(fake_pool: FakePool) -> dict:
    return fake_pool.add_project("Project 152", "https://github.com/p152.git", id=152)


def _insert_body(**overrides: object) -> dict:
    body = {
        "username": "user3",
        "branch_name": "dev",
        "commit_date": "2023-10-07T18:30:00.000Z",
        "commit_id": "commit8",
        "no_of_deletion": 9,
        "no_of_addition": 14,
        "project_id": 152,
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_history_lists_entries_for_project(
    api_client: AsyncClient, fake_pool: FakePool, project_152: dict
):
    other = fake_pool.add_project("Other", "https://github.com/other.git", id=153)
    first = fake_pool.add_history(152, _utc(2023, 1, 2))
    fake_pool.add_history(other["id"], _utc(2023, 1, 3))
    second = fake_pool.add_history(152, _utc(2023, 1, 4))

    resp = await api_client.get("/history", params={"id": 152})

    assert resp.status_code == 200
    assert [row["id"] for row in resp.json()] == [first["id"], second["id"]]
    assert all(row["project"] == 152 for row in resp.json())


@pytest.mark.asyncio
async def test_filter_date_is_inclusive_and_scoped_to_project(
    api_client: AsyncClient, fake_pool: FakePool, project_152: dict
):
    fake_pool.add_project("Other", "https://github.com/other.git", id=153)
    fake_pool.add_history(152, _utc(2022, 12, 31, 23, 59))
    first_day = fake_pool.add_history(152, _utc(2023, 1, 1, 0, 0))
    last_day = fake_pool.add_history(152, _utc(2023, 12, 31, 23, 59))
    fake_pool.add_history(152, _utc(2024, 1, 1, 0, 0))
    fake_pool.add_history(153, _utc(2023, 6, 1))

    resp = await api_client.get(
        "/history/filterDate",
        params={"id": 152, "startDate": "2023-01-01", "endDate": "2023-12-31"},
    )

    assert resp.status_code == 200
    assert [row["id"] for row in resp.json()] == [first_day["id"], last_day["id"]]

    statement, args = fake_pool.statements[-1]
    assert args == (152, date(2023, 1, 1), date(2023, 12, 31))


@pytest.mark.asyncio
async def test_filter_date_rejects_bad_dates(api_client: AsyncClient, fake_pool: FakePool):
    resp = await api_client.get(
        "/history/filterDate/",
        params={"id": 152, "startDate": "yesterday", "endDate": "2023-12-31"},
    )
    assert resp.status_code == 422
    assert fake_pool.statements == []


@pytest.mark.asyncio
async def test_header_returns_matching_project(api_client: AsyncClient, project_152: dict):
    resp = await api_client.get("/history/header", params={"id": 152})

    assert resp.status_code == 200
    assert resp.json() == [project_152]


@pytest.mark.asyncio
async def test_header_for_unknown_project_is_empty(api_client: AsyncClient):
    resp = await api_client.get("/history/header/", params={"id": 999})

    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_insert_history(api_client: AsyncClient, fake_pool: FakePool, project_152: dict):
    resp = await api_client.post("/history/insert", json=_insert_body())

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "added"
    assert body["data"]["project"] == 152
    assert body["data"]["user_name"] == "user3"
    assert body["data"]["num_additions"] == 14
    assert body["data"]["num_deletions"] == 9

    (row,) = fake_pool.history.values()
    assert row["commit_date"] == _utc(2023, 10, 7, 18, 30)


@pytest.mark.asyncio
async def test_insert_history_naive_date_is_stored_as_utc(
    api_client: AsyncClient, fake_pool: FakePool, project_152: dict
):
    resp = await api_client.post("/history/insert", json=_insert_body(commit_date="2023-10-07T08:00:00"))

    assert resp.status_code == 200
    (row,) = fake_pool.history.values()
    assert row["commit_date"].tzinfo is not None
    assert row["commit_date"] == _utc(2023, 10, 7, 8, 0)


@pytest.mark.asyncio
async def test_insert_history_for_missing_project_returns_243(
    api_client: AsyncClient, fake_pool: FakePool
):
    resp = await api_client.post("/history/insert", json=_insert_body(project_id=404))

    assert resp.status_code == 243
    assert resp.json() == {"error": "project_id does not exist"}
    assert fake_pool.history == {}


@pytest.mark.asyncio
async def test_insert_history_rejects_negative_counts(api_client: AsyncClient, project_152: dict):
    resp = await api_client.post("/history/insert", json=_insert_body(no_of_addition=-1))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_deleting_project_removes_its_history(
    api_client: AsyncClient, fake_pool: FakePool, project_152: dict
):
    fake_pool.add_history(152, _utc(2023, 5, 5))

    await api_client.delete("/project/delete", params={"id": 152})
    resp = await api_client.get("/history", params={"id": 152})

    assert resp.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["project_id", "no_of_addition", "no_of_deletion"])
async def test_insert_history_rejects_values_beyond_integer_column(
    api_client: AsyncClient, fake_pool: FakePool, project_152: dict, field: str
):
    resp = await api_client.post("/history/insert", json=_insert_body(**{field: 2**31}))

    assert resp.status_code == 422
    assert fake_pool.statements == []


@pytest.mark.asyncio
async def test_filter_date_rejects_id_beyond_integer_column(api_client: AsyncClient, fake_pool: FakePool):
    resp = await api_client.get(
        "/history/filterDate",
        params={"id": 2**31, "startDate": "2023-01-01", "endDate": "2023-12-31"},
    )

    assert resp.status_code == 422
    assert fake_pool.statements == []
