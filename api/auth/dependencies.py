"""
Auth dependencies for protected FastAPI routes.

Project and history routes only use these when REQUIRE_AUTH is enabled.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends, Header, HTTPException, status

from core import db

from . import service


def _extract_bearer_token(authorization: str | None, access_token: str | None = None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        fallback = (access_token or "").strip()
        if fallback:
            return fallback
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def get_bearer_token(
    authorization: str | None = Header(default=None),
    x_access_token: str | None = Header(default=None),
) -> str:
    return _extract_bearer_token(authorization, x_access_token)


async def get_current_user(
    access_token: str = Depends(get_bearer_token),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.get_user_from_access_token(pool, access_token)
