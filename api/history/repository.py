"""
Commit history persistence (raw SQL over `commit_history`).
"""

from __future__ import annotations

from datetime import date, datetime

import asyncpg

from core import db

PROJECT_FK_CONSTRAINT = "fk_project"

_COLUMNS = """
    id, project, user_name, branch_name, commit_date,
    commit_id, num_additions, num_deletions
"""


async def list_for_project(pool: asyncpg.Pool, project_id: int) -> list[dict]:
    return await db.fetch_all(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM commit_history
        WHERE project = $1
        ORDER BY id
        """,
        project_id,
    )


async def list_for_project_between(
    pool: asyncpg.Pool,
    project_id: int,
    *,
    start_date: date,
    end_date: date,
) -> list[dict]:
    """
    Entries whose commit day falls inside [start_date, end_date], both ends included.
    """
    return await db.fetch_all(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM commit_history
        WHERE project = $1
          AND commit_date::date >= $2
          AND commit_date::date <= $3
        ORDER BY id
        """,
        project_id,
        start_date,
        end_date,
    )


async def insert_entry(
    pool: asyncpg.Pool,
    *,
    project_id: int,
    user_name: str,
    branch_name: str,
    commit_date: datetime,
    commit_id: str,
    num_additions: int,
    num_deletions: int,
) -> dict:
    row = await db.fetch_one(
        pool,
        f"""
        INSERT INTO commit_history
            (project, user_name, branch_name, commit_date, commit_id, num_additions, num_deletions)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING {_COLUMNS}
        """,
        project_id,
        user_name,
        branch_name,
        commit_date,
        commit_id,
        num_additions,
        num_deletions,
    )
    if row is None:
        raise RuntimeError("Failed to insert commit history entry.")
    return row
