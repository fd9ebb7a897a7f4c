from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_optional_int(name: str) -> int | None:
    raw = _get_env(name, None)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    analysis_delay_ms: int
    job_search_delay_ms: int
    jobs_random_seed: int | None
    max_upload_bytes: int
    scoring_config_path: str | None
    session_ttl_minutes: int


settings = Settings(
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://localhost:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    analysis_delay_ms=max(0, _get_env_int("ANALYSIS_DELAY_MS", 1000)),
    job_search_delay_ms=max(0, _get_env_int("JOB_SEARCH_DELAY_MS", 1000)),
    jobs_random_seed=_get_env_optional_int("JOBS_RANDOM_SEED"),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
    session_ttl_minutes=_get_env_int("SESSION_TTL_MINUTES", 120),
)

if settings.max_upload_bytes <= 0:
    raise RuntimeError("MAX_UPLOAD_BYTES must be a positive number of bytes.")

if settings.session_ttl_minutes <= 0:
    raise RuntimeError("SESSION_TTL_MINUTES must be a positive number of minutes.")

__all__ = ["Settings", "settings"]
