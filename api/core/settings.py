"""
Environment-backed settings.

Values are read on each call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 5000
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)
CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def require_auth() -> bool:
    return env_bool("REQUIRE_AUTH", False)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def db_pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN", 1), 0)


def db_pool_max_size() -> int:
    return max(env_int("DB_POOL_MAX", 10), 1)


def db_command_timeout() -> float:
    return float(env_int("DB_COMMAND_TIMEOUT", 30))
