from fastapi import APIRouter, Header, Request

from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.analysis import AnalysisResult
from app.schemas.ats import AnalyzeRequest, OptimizeRequest, OptimizeResponse
from app.services.ats_service import analyze, optimize

router = APIRouter()


@router.post("/ats/analyze", response_model=AnalysisResult, response_model_by_alias=True)
@rate_limit()
async def ats_analyze(
    request: Request,
    payload: AnalyzeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return await analyze(
        payload.job_description,
        payload.resume,
        api_key=payload.options.api_key,
        use_ai=payload.options.use_ai,
    )


@router.post("/ats/optimize", response_model=OptimizeResponse, response_model_by_alias=True)
@rate_limit()
async def ats_optimize(
    request: Request,
    payload: OptimizeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return await optimize(payload.job_description, payload.resume, api_key=payload.api_key)
