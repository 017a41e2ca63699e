from __future__ import annotations

import logging
import secrets

from fastapi import HTTPException, status

from app.core.config import settings

logger = logging.getLogger(__name__)


def check_api_key(x_api_key: str | None) -> None:
    """Reject the request when API_KEY is configured and the X-API-Key header differs."""
    if not settings.api_key:
        return
    if x_api_key and secrets.compare_digest(x_api_key.encode(), settings.api_key.encode()):
        return
    logger.info("api_key_rejected present=%s", bool(x_api_key))
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Please provide a valid API key to use the analyzer.",
    )
