from __future__ import annotations

import logging
from typing import Any

import httpx

from app.ai.types import InsightServiceError

logger = logging.getLogger(__name__)


def extract_candidate_text(body: Any) -> str:
    """Return candidates[0].content.parts[0].text, or "" when the shape differs."""
    if not isinstance(body, dict):
        return ""
    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return ""
    text = parts[0].get("text")
    return text if isinstance(text, str) else ""


class GeminiProvider:
    def __init__(
        self,
        model: str,
        api_key: str | None,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_s: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._model = model
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/models/{model}:generateContent"
        self._timeout_s = timeout_s
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise InsightServiceError("GEMINI_API_KEY is missing", code="ai_disabled")

        body = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                response = await client.post(self._url, headers={"x-goog-api-key": self._api_key}, json=body)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as exc:
            raise InsightServiceError(f"Gemini request timed out: {exc}", code="timeout") from exc
        except httpx.HTTPStatusError as exc:
            raise InsightServiceError(
                f"Gemini returned HTTP {exc.response.status_code}", code="http_error"
            ) from exc
        except httpx.HTTPError as exc:
            raise InsightServiceError(f"Gemini request failed: {exc}", code="network_error") from exc
        except ValueError as exc:
            raise InsightServiceError("Gemini response body is not JSON", code="invalid_json") from exc

        text = extract_candidate_text(payload)
        if not text.strip():
            raise InsightServiceError("Gemini returned an empty response", code="empty_response")
        logger.debug("gemini_generate_ok model=%s chars=%s", self._model, len(text))
        return text
