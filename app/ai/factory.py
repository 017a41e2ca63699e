import httpx

from app.ai.config import load_ai_config
from app.ai.types import AIClient

from app.ai.providers.gemini_provider import GeminiProvider


def get_ai_client(api_key: str | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> AIClient:
    cfg = load_ai_config(api_key)

    if cfg.provider == "gemini":
        return GeminiProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            transport=transport,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
