"""
Auth API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Body, Depends

from core import db

from . import schemas, service

router = APIRouter()


@router.post(
    "/login",
    response_model=schemas.TokenResponse,
    summary="Log in",
    description="Verify an email/password pair and issue a signed token valid for two hours.",
    responses={
        400: {"description": "Missing input or invalid credentials (plain text)."},
        500: {"description": "Unexpected failure (plain text)."},
    },
)
async def login(
    payload: schemas.LoginRequest | None = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.TokenResponse:
    return await service.login(pool, payload)
