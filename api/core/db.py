"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once in the FastAPI lifespan (see `api/main.py`), kept on
`app.state.pool` and handed to route handlers through the `get_pool`
dependency. Repository functions take the pool as their first argument.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import settings

logger = logging.getLogger(__name__)

# Upper bound of a Postgres `integer` column.
PG_INT_MAX = 2**31 - 1


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str | None:
    """
    DSN from DATABASE_URL, or None to let asyncpg read PGHOST/PGUSER/... itself.
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return None
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )
    logger.info(
        "db_pool_open min_size=%s max_size=%s",
        settings.db_pool_min_size(),
        settings.db_pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return its status tag,
    e.g. "DELETE 1".
    """
    return await pool.execute(sql, *args)


def affected_rows(status: str) -> int:
    # Status tags look like "UPDATE 3" or "INSERT 0 1".
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0
