"""
Commit history business logic.
"""

from __future__ import annotations

import logging
from datetime import date, timezone

import asyncpg
from asyncpg import exceptions as pg_errors

from core.errors import ApiError, constraint_name
from projects import repository as project_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

# Kept for compatibility with existing clients; see DESIGN.md.
PROJECT_MISSING_STATUS = 243
PROJECT_MISSING = "project_id does not exist"


async def history(pool: asyncpg.Pool, project_id: int) -> list[dict]:
    return await repository.list_for_project(pool, project_id)


async def history_between(
    pool: asyncpg.Pool,
    project_id: int,
    *,
    start_date: date,
    end_date: date,
) -> list[dict]:
    return await repository.list_for_project_between(
        pool,
        project_id,
        start_date=start_date,
        end_date=end_date,
    )


async def header(pool: asyncpg.Pool, project_id: int) -> list[dict]:
    row = await project_repository.get_project(pool, project_id)
    return [row] if row is not None else []


async def add_entry(pool: asyncpg.Pool, payload: schemas.CommitHistoryIn) -> schemas.CommitHistoryAdded:
    commit_date = payload.commit_date
    if commit_date.tzinfo is None:
        commit_date = commit_date.replace(tzinfo=timezone.utc)

    try:
        row = await repository.insert_entry(
            pool,
            project_id=payload.project_id,
            user_name=payload.username,
            branch_name=payload.branch_name,
            commit_date=commit_date,
            commit_id=payload.commit_id,
            num_additions=payload.no_of_addition,
            num_deletions=payload.no_of_deletion,
        )
    except pg_errors.ForeignKeyViolationError as exc:
        if constraint_name(exc) != repository.PROJECT_FK_CONSTRAINT:
            raise
        logger.info("history_insert_rejected project_id=%s reason=missing_project", payload.project_id)
        raise ApiError(PROJECT_MISSING_STATUS, PROJECT_MISSING) from exc

    logger.info("history_added id=%s project_id=%s", row["id"], payload.project_id)
    return schemas.CommitHistoryAdded(data=schemas.CommitHistoryEntry(**row))
