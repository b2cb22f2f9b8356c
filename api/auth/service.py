"""
Auth business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from core.errors import ApiError

from . import repository, schemas, security

logger = logging.getLogger(__name__)


async def _issue_token(pool: asyncpg.Pool, user_row: dict) -> str:
    user_id = int(user_row["user_id"])
    email = str(user_row["email"])

    token = security.build_access_token(user_id=user_id, email=email)
    await repository.set_user_token(pool, user_id=user_id, token=token)
    return token


async def login(pool: asyncpg.Pool, payload: schemas.LoginRequest | None) -> schemas.TokenResponse:
    email = ((payload.username if payload else None) or "").strip()
    password = (payload.password if payload else None) or ""
    if not (email and password):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "All input is required", plain=True)

    try:
        user_row = await repository.get_user_by_credentials(pool, email=email, password=password)
        token = await _issue_token(pool, user_row) if user_row is not None else None
    except Exception as exc:
        logger.exception("login_failed email=%s", email)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            plain=True,
        ) from exc

    if token is None:
        logger.info("login_rejected email=%s", email)
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid Credentials", plain=True)

    logger.info("login_ok user_id=%s", user_row["user_id"])
    return schemas.TokenResponse(token=token)


async def get_user_from_access_token(pool: asyncpg.Pool, access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    user_row = await repository.get_user_by_id(pool, int(payload["user_id"]))
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )

    # Only the most recently issued token is honoured.
    if str(user_row.get("token") or "") != access_token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token has been superseded.",
        )
    return user_row
