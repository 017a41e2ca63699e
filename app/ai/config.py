from dataclasses import dataclass

from app.core.config import settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    base_url: str
    timeout_s: float
    api_key: str | None


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def resolve_api_key(override: str | None = None) -> str | None:
    """Prefer a caller-supplied key, then GEMINI_API_KEY; placeholders count as missing."""
    for candidate in (override, settings.gemini_api_key):
        key = (candidate or "").strip()
        if key and not _looks_like_placeholder(key):
            return key
    return None


def load_ai_config(api_key: str | None = None) -> AIConfig:
    return AIConfig(
        provider=settings.ai_provider,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout_s=settings.ai_timeout_s,
        api_key=resolve_api_key(api_key),
    )
