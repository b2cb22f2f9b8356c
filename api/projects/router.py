"""
Project API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from core import db

from . import schemas, service

router = APIRouter()

_LINK_EXISTS_RESPONSE = {400: {"description": "Link already exists."}}


@router.get(
    "/projects",
    response_model=list[schemas.Project],
    summary="Get all projects",
    description="Retrieve every project, in id order.",
)
async def list_projects(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[dict]:
    return await service.list_projects(pool)


@router.post(
    "/project/insert",
    response_model=schemas.ProjectAdded,
    summary="Insert a project",
    description="Insert a new project with a project name and link.",
    responses=_LINK_EXISTS_RESPONSE,
)
async def insert_project(
    payload: schemas.ProjectIn,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.ProjectAdded:
    return await service.add_project(pool, payload)


@router.put(
    "/project/update",
    response_model=schemas.ProjectUpdated,
    summary="Update a project",
    description="Update a project with a new project name and link.",
    responses=_LINK_EXISTS_RESPONSE,
)
@router.put("/project/update/", include_in_schema=False)
async def update_project(
    payload: schemas.ProjectIn,
    id: int = Query(..., le=db.PG_INT_MAX, description="ID of the project to be updated."),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.ProjectUpdated:
    return await service.update_project(pool, id, payload)


@router.delete(
    "/project/delete",
    response_class=PlainTextResponse,
    summary="Delete a project",
    description="Delete a project by its ID. Its commit history goes with it.",
)
@router.delete("/project/delete/", response_class=PlainTextResponse, include_in_schema=False)
async def delete_project(
    id: int = Query(..., le=db.PG_INT_MAX, description="ID of the project to be deleted."),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> str:
    return await service.delete_project(pool, id)
