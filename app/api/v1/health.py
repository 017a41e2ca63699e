from fastapi import APIRouter

from app.core.config import settings
from app.taxonomy import get_default_taxonomy_provider

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {
        "status": "healthy",
        "vocabularyVersion": get_default_taxonomy_provider().version,
        "aiInsightsEnabled": settings.ai_insights_enabled,
    }
