"""Fail-fast environment validation for the box-score service."""

from __future__ import annotations

import os
from functools import lru_cache
from urllib.parse import urlparse


ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"{name} is required and must be set before startup.")
    return value.strip()


def _validate_environment_value(environment: str) -> None:
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def _validate_non_local_url(name: str, value: str) -> None:
    parsed = urlparse(value)
    host = parsed.hostname
    if not host:
        raise RuntimeError(f"{name} must be a valid URL (missing hostname).")
    if host in {"localhost", "127.0.0.1"}:
        raise RuntimeError(f"{name} must not point to localhost in production.")


def _validate_database_credentials(value: str) -> None:
    parsed = urlparse(value)
    if parsed.username == "postgres" and parsed.password == "postgres":
        raise RuntimeError("DATABASE_URL must not use default postgres credentials in production.")


def _validate_port(value: str) -> None:
    if not value.isdigit() or not 0 < int(value) < 65536:
        raise RuntimeError("PORT must be an integer between 1 and 65535.")


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before the service starts.

    ENVIRONMENT defaults to development. Production deployments must point
    DATABASE_URL at a real, non-default database.
    """
    environment = os.getenv("ENVIRONMENT", "development").strip() or "development"
    _validate_environment_value(environment)

    port = os.getenv("PORT")
    if port:
        _validate_port(port.strip())

    if environment == "production":
        database_url = _require_env("DATABASE_URL")
        _validate_non_local_url("DATABASE_URL", database_url)
        _validate_database_credentials(database_url)
