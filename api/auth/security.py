"""
Auth security helpers.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set TOKEN_KEY in environment.
    return settings.env_str("TOKEN_KEY", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return settings.env_str("JWT_ALG", "HS256")


def token_expire_minutes() -> int:
    return settings.env_int("TOKEN_EXPIRE_MIN", 120)


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    """
    Hash with the "2a" bcrypt variant, which pgcrypto's crypt() understands,
    so the login query can verify it inside the database.
    """
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(prefix=b"2a")).decode("utf-8")


def build_access_token(*, user_id: int, email: str) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (token_expire_minutes() * 60)

    payload = {
        "user_id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if not isinstance(payload.get("user_id"), int):
        raise AuthSecurityError("Invalid access token subject.")

    return payload
