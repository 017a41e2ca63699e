import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from app.api.v1.health import router as health_router
from app.api.v1.ats import router as ats_router
from app.core.rate_limit import limiter
from app.core.config import settings
from app.services.ats_service import InputError

logger = logging.getLogger(__name__)


async def _input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    logger.info("ats_input_rejected code=%s path=%s", exc.code, request.url.path)
    return JSONResponse(
        status_code=422,
        content={"detail": {"code": exc.code, "message": str(exc)}},
    )


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)

    application = FastAPI(title="ATS Analyzer API", version="0.1.0")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    application.add_exception_handler(InputError, _input_error_handler)
    application.add_middleware(SlowAPIMiddleware)

    application.include_router(health_router, prefix="/v1", tags=["Health"])
    application.include_router(ats_router, prefix="/v1", tags=["ATS"])
    return application


app = create_app()
