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


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    ai_provider: str
    gemini_api_key: str | None
    gemini_model: str
    gemini_base_url: str
    ai_insights_enabled: bool
    ai_timeout_s: float
    max_job_description_chars: int


def load_settings() -> Settings:
    return Settings(
        api_key=_get_env("API_KEY"),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://localhost:3000",
            ],
        ),
        ai_provider=(_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower(),
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        gemini_model=_get_env("GEMINI_MODEL", "gemini-2.0-flash") or "gemini-2.0-flash",
        gemini_base_url=(
            _get_env("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
            or "https://generativelanguage.googleapis.com/v1beta"
        ).rstrip("/"),
        ai_insights_enabled=_get_env_bool("AI_INSIGHTS_ENABLED", True),
        ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 20.0),
        max_job_description_chars=_get_env_int("MAX_JOB_DESCRIPTION_CHARS", 50000),
    )


settings = load_settings()

__all__ = ["Settings", "load_settings", "settings"]
