"""
Commit history API endpoints.
"""

from __future__ import annotations

from datetime import date

import asyncpg
from fastapi import APIRouter, Depends, Query

from core import db
from projects import schemas as project_schemas

from . import schemas, service

router = APIRouter()


@router.get(
    "/history",
    response_model=list[schemas.CommitHistoryEntry],
    summary="Get commit history",
    description="Retrieve every commit history entry of a project, in id order.",
)
async def history(
    id: int = Query(..., le=db.PG_INT_MAX, description="ID of the project to get commit history for."),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    return await service.history(pool, id)


@router.get(
    "/history/filterDate",
    response_model=list[schemas.CommitHistoryEntry],
    summary="Get commit history details for the dates mentioned",
    description="Retrieve commit history of a project whose commit day lies in an inclusive date range.",
)
@router.get("/history/filterDate/", include_in_schema=False)
async def history_filter_date(
    id: int = Query(..., le=db.PG_INT_MAX, description="ID of the project to get commit history for."),
    start_date: date = Query(..., alias="startDate", description="First day, YYYY-MM-DD."),
    end_date: date = Query(..., alias="endDate", description="Last day, YYYY-MM-DD."),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    return await service.history_between(pool, id, start_date=start_date, end_date=end_date)


@router.get(
    "/history/header",
    response_model=list[project_schemas.Project],
    summary="Get commit history header",
    description="Retrieve the project row shown above a project's commit history.",
)
@router.get("/history/header/", include_in_schema=False)
async def history_header(
    id: int = Query(..., le=db.PG_INT_MAX, description="ID of the project to get commit history header for."),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    return await service.header(pool, id)


@router.post(
    "/history/insert",
    response_model=schemas.CommitHistoryAdded,
    summary="Insert commit history",
    description="Insert one commit history entry for an existing project.",
    responses={service.PROJECT_MISSING_STATUS: {"description": "Project ID does not exist."}},
)
async def insert_history(
    payload: schemas.CommitHistoryIn,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.CommitHistoryAdded:
    return await service.add_entry(pool, payload)
