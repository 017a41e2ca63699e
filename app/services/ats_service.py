from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.ai.config import resolve_api_key
from app.ai.types import AIClient
from app.core.config import settings
from app.features import analyze_content, check_formatting, extract_keywords, match_keywords, match_skills
from app.normalize.resume_corpus import build_resume_corpus
from app.schemas.analysis import AnalysisResult, Recommendation
from app.schemas.ats import OptimizeResponse
from app.schemas.resume import ResumeRecord
from app.services.ai_insights import optimize_resume_content, run_augmentation
from app.services.result_normalizer import normalize_result
from app.services.scoring import aggregate, ai_recommendations, merge_recommendations

logger = logging.getLogger(__name__)


class InputError(ValueError):
    def __init__(self, message: str, *, code: str = "invalid_input"):
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class _HeuristicRun:
    corpus: str
    payload: dict[str, Any]
    ladder: list[Recommendation]


def validate_inputs(job_text: str, resume: ResumeRecord) -> None:
    if not job_text or not job_text.strip():
        raise InputError("Please provide a job description", code="empty_job_description")
    if len(job_text) > settings.max_job_description_chars:
        raise InputError(
            f"Job description exceeds {settings.max_job_description_chars} characters",
            code="job_description_too_long",
        )
    if not resume.personal_info.full_name.strip():
        raise InputError("Please complete your resume before analyzing", code="missing_full_name")


def _run_heuristics(job_text: str, resume: ResumeRecord) -> _HeuristicRun:
    corpus = build_resume_corpus(resume)
    keyword_matches = match_keywords(extract_keywords(job_text), corpus)
    skills = match_skills(job_text, resume, corpus=corpus)
    formatting = check_formatting(resume)
    content = analyze_content(resume, corpus=corpus)
    score = aggregate(keyword_matches, skills, formatting, content, resume)

    payload: dict[str, Any] = {
        "overall_score": score.overall_score,
        "keyword_matches": keyword_matches,
        "missing_keywords": [match.keyword for match in keyword_matches if not match.found],
        "hard_skills_analysis": skills,
        "formatting_check": formatting,
        "content_enhancement": content,
        "recommendations": score.recommendations,
    }
    return _HeuristicRun(corpus=corpus, payload=payload, ladder=score.candidate_recommendations)


def run_heuristic_analysis(job_text: str, resume: ResumeRecord) -> AnalysisResult:
    """Run the deterministic analyzers only; accepts any input, including empty ones."""
    return normalize_result(_run_heuristics(job_text or "", resume).payload)


def _merge_missing_keywords(heuristic: list[str], suggested: list[str]) -> list[str]:
    merged: list[str] = []
    seen: set[str] = set()
    for keyword in [*heuristic, *suggested]:
        key = keyword.strip().lower()
        if key and key not in seen:
            seen.add(key)
            merged.append(keyword)
    return merged


def _ai_requested(use_ai: bool, api_key: str | None, client: AIClient | None) -> bool:
    if not use_ai or not settings.ai_insights_enabled:
        return False
    return client is not None or resolve_api_key(api_key) is not None


async def analyze(
    job_text: str,
    resume: ResumeRecord,
    *,
    api_key: str | None = None,
    use_ai: bool = True,
    client: AIClient | None = None,
) -> AnalysisResult:
    validate_inputs(job_text, resume)
    run = _run_heuristics(job_text, resume)
    payload = run.payload

    if _ai_requested(use_ai, api_key, client):
        augmentation = await run_augmentation(job_text, run.corpus, api_key, client=client)
        payload["ai_insights"] = augmentation.insights
        payload["missing_keywords"] = _merge_missing_keywords(
            payload["missing_keywords"], augmentation.keyword_gaps.missing_keywords
        )
        payload["recommendations"] = merge_recommendations(run.ladder, ai_recommendations(augmentation.insights))
        payload["degraded"] = augmentation.degraded

    result = normalize_result(payload)
    logger.info(
        "ats_analysis_completed score=%s keywords=%s missing=%s ai=%s degraded=%s",
        result.overall_score,
        len(result.keyword_matches),
        len(result.missing_keywords),
        result.ai_insights is not None,
        result.degraded,
    )
    return result


async def optimize(
    job_text: str,
    resume: ResumeRecord,
    *,
    api_key: str | None = None,
    client: AIClient | None = None,
) -> OptimizeResponse:
    validate_inputs(job_text, resume)
    return await optimize_resume_content(job_text, resume, api_key, client=client)
