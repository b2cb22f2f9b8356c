"""
Project persistence (raw SQL over the `data` table).
"""

from __future__ import annotations

import asyncpg

from core import db

LINK_UNIQUE_CONSTRAINT = "data_link_key"


async def list_projects(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT id, project, link
        FROM data
        ORDER BY id
        """,
    )


async def get_project(pool: asyncpg.Pool, project_id: int) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, project, link
        FROM data
        WHERE id = $1
        """,
        project_id,
    )


async def insert_project(pool: asyncpg.Pool, *, project: str, link: str) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO data (project, link)
        VALUES ($1, $2)
        RETURNING id, project, link
        """,
        project,
        link,
    )
    if row is None:
        raise RuntimeError("Failed to insert project.")
    return row


async def update_project(pool: asyncpg.Pool, project_id: int, *, project: str, link: str) -> int:
    status = await db.execute(
        pool,
        """
        UPDATE data
        SET project = $1,
            link = $2
        WHERE id = $3
        """,
        project,
        link,
        project_id,
    )
    return db.affected_rows(status)


async def delete_project(pool: asyncpg.Pool, project_id: int) -> int:
    status = await db.execute(
        pool,
        """
        DELETE FROM data
        WHERE id = $1
        """,
        project_id,
    )
    return db.affected_rows(status)
