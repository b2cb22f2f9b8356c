"""
Project business logic.

The only rule enforced here is the mapping of the link uniqueness
violation to a public error; everything else is the database's job.
"""

from __future__ import annotations

import logging

import asyncpg
from asyncpg import exceptions as pg_errors
from fastapi import status

from core.errors import ApiError, constraint_name

from . import repository, schemas

logger = logging.getLogger(__name__)

LINK_EXISTS = "Link already exists."


def _link_exists(exc: pg_errors.UniqueViolationError) -> ApiError | None:
    if constraint_name(exc) == repository.LINK_UNIQUE_CONSTRAINT:
        return ApiError(status.HTTP_400_BAD_REQUEST, LINK_EXISTS)
    return None


async def list_projects(pool: asyncpg.Pool) -> list[dict]:
    return await repository.list_projects(pool)


async def add_project(pool: asyncpg.Pool, payload: schemas.ProjectIn) -> schemas.ProjectAdded:
    try:
        row = await repository.insert_project(pool, project=payload.project, link=payload.link)
    except pg_errors.UniqueViolationError as exc:
        error = _link_exists(exc)
        if error is None:
            raise
        logger.info("project_insert_rejected reason=link_exists link=%s", payload.link)
        raise error from exc

    logger.info("project_added id=%s", row["id"])
    return schemas.ProjectAdded(data=schemas.Project(**row))


async def update_project(
    pool: asyncpg.Pool,
    project_id: int,
    payload: schemas.ProjectIn,
) -> schemas.ProjectUpdated:
    try:
        updated = await repository.update_project(
            pool,
            project_id,
            project=payload.project,
            link=payload.link,
        )
    except pg_errors.UniqueViolationError as exc:
        error = _link_exists(exc)
        if error is None:
            raise
        logger.info("project_update_rejected id=%s reason=link_exists", project_id)
        raise error from exc

    logger.info("project_updated id=%s rows=%s", project_id, updated)
    return schemas.ProjectUpdated()


async def delete_project(pool: asyncpg.Pool, project_id: int) -> str:
    deleted = await repository.delete_project(pool, project_id)
    logger.info("project_deleted id=%s rows=%s", project_id, deleted)
    return f"Project deleted with ID: {project_id}"
