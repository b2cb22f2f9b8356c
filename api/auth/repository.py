"""
Auth persistence helpers.

Passwords are verified by the database (pgcrypto `crypt()`), never in Python.
"""

from __future__ import annotations

import asyncpg

from core import db


def normalize_email(email: str) -> str:
    return (email or "").strip()


async def get_user_by_credentials(pool: asyncpg.Pool, *, email: str, password: str) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT user_id, email
        FROM users
        WHERE email = $1
          AND password = crypt($2, password)
        """,
        normalize_email(email),
        password,
    )


async def get_user_by_id(pool: asyncpg.Pool, user_id: int) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT user_id, email, token
        FROM users
        WHERE user_id = $1
        """,
        user_id,
    )


async def set_user_token(pool: asyncpg.Pool, *, user_id: int, token: str) -> None:
    await db.execute(
        pool,
        """
        UPDATE users
        SET token = $1
        WHERE user_id = $2
        """,
        token,
        user_id,
    )


async def create_user(pool: asyncpg.Pool, *, email: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO users (email, password)
        VALUES ($1, $2)
        RETURNING user_id, email
        """,
        normalize_email(email),
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row
