"""Provision a login user.

Usage:
    python -m scripts.create_user someone@example.com 's3cret'

Connection settings come from the same environment as the API
(DATABASE_URL or PGHOST/PGUSER/...). The password is stored as a bcrypt
hash that the login query verifies with pgcrypto's crypt().
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from asyncpg import exceptions as pg_errors

from auth import repository, security
from core import db

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def create_user(email: str, password: str) -> int:
    try:
        password_hash = security.hash_password(password)
    except security.AuthSecurityError as exc:
        logger.error("Cannot create %s: %s", email, exc)
        return 1

    pool = await db.create_pool()
    try:
        row = await repository.create_user(pool, email=email, password_hash=password_hash)
    except pg_errors.UniqueViolationError:
        logger.error("User %s already exists", email)
        return 1
    finally:
        await db.close_pool(pool)

    logger.info("Created user_id=%s email=%s", row["user_id"], row["email"])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an API login user.")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args(argv)
    return asyncio.run(create_user(args.email, args.password))


if __name__ == "__main__":
    raise SystemExit(main())
