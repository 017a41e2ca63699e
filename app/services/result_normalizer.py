"""Coerce analysis output into the stable AnalysisResult shape.

Every numeric field is clamped with a fallback for NaN/missing values and every
collection field falls back to an empty list, whether the data came from the
heuristic analyzers or from the external text-generation service.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import (
    AIInsights,
    AnalysisResult,
    CertificationAnalysis,
    ContentEnhancement,
    FormattingCheck,
    FormattingIssue,
    HardSkillsAnalysis,
    KeywordGaps,
    KeywordMatch,
    Recommendation,
    ScoredFeedback,
)

VALID_IMPORTANCE = {"high", "medium", "low"}
VALID_SEVERITIES = {"critical", "warning", "info"}
VALID_PRIORITIES = {"high", "medium", "low"}
VALID_CATEGORIES = {"keywords", "skills", "formatting", "content"}
MAX_RECOMMENDATIONS = 8
FALLBACK_FEEDBACK = "AI analysis unavailable"


def _as_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return dict(value)
    return {}


def _get(mapping: Mapping[str, Any], key: str) -> Any:
    if key in mapping:
        return mapping[key]
    return mapping.get(to_camel(key))


def _safe_str(value: Any, max_len: int = 1500) -> str:
    if not isinstance(value, str):
        return ""
    text = re.sub(r"\s+", " ", value).strip()
    if len(text) > max_len:
        text = text[:max_len].rstrip()
    return text


def _safe_str_list(value: Any, max_items: int = 50, max_len: int = 220) -> list[str]:
    if not isinstance(value, list):
        return []
    output: list[str] = []
    for item in value:
        text = _safe_str(item, max_len=max_len)
        if text and text not in output:
            output.append(text)
        if len(output) >= max_items:
            break
    return output


def _clamp_int(value: Any, default: int, min_value: int = 0, max_value: int = 100) -> int:
    if isinstance(value, bool):
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(parsed) or math.isinf(parsed):
        return default
    return max(min_value, min(max_value, round(parsed)))


def _safe_keyword_matches(value: Any) -> list[KeywordMatch]:
    if not isinstance(value, list):
        return []
    output: list[KeywordMatch] = []
    for item in value:
        data = _as_mapping(item)
        keyword = _safe_str(_get(data, "keyword"), max_len=120)
        if not keyword:
            continue
        positions = _get(data, "positions")
        importance = _safe_str(_get(data, "importance"), max_len=16).lower()
        output.append(
            KeywordMatch(
                keyword=keyword,
                frequency=_clamp_int(_get(data, "frequency"), default=0, max_value=1_000_000),
                positions=[
                    _clamp_int(position, default=0, max_value=10_000_000)
                    for position in (positions if isinstance(positions, list) else [])
                ],
                importance=importance if importance in VALID_IMPORTANCE else "low",
            )
        )
    return output


def _safe_hard_skills(value: Any) -> HardSkillsAnalysis:
    data = _as_mapping(value)
    required = _safe_str_list(_get(data, "required_skills"), max_items=200)
    found = [skill for skill in _safe_str_list(_get(data, "found_skills"), max_items=200) if skill in required]
    missing = set(required) - set(found)
    critical = [skill for skill in _safe_str_list(_get(data, "missing_critical_skills"), max_items=200) if skill in missing]

    certs = _as_mapping(_get(data, "certifications"))
    cert_required = _safe_str_list(_get(certs, "required"), max_items=100)
    cert_found = [cert for cert in _safe_str_list(_get(certs, "found"), max_items=100) if cert in cert_required]

    return HardSkillsAnalysis(
        required_skills=required,
        found_skills=found,
        missing_critical_skills=critical,
        certifications=CertificationAnalysis(
            required=cert_required,
            found=cert_found,
            missing=[cert for cert in cert_required if cert not in cert_found],
        ),
        skills_score=_clamp_int(_get(data, "skills_score"), default=100),
        recommendations=_safe_str_list(_get(data, "recommendations"), max_items=5),
    )


def _safe_formatting(value: Any) -> FormattingCheck:
    data = _as_mapping(value)
    issues: list[FormattingIssue] = []
    raw_issues = _get(data, "issues")
    for item in raw_issues if isinstance(raw_issues, list) else []:
        issue = _as_mapping(item)
        message = _safe_str(_get(issue, "message"), max_len=240)
        if not message:
            continue
        severity = _safe_str(_get(issue, "severity"), max_len=16).lower()
        issues.append(FormattingIssue(message=message, severity=severity if severity in VALID_SEVERITIES else "warning"))
    return FormattingCheck(
        score=_clamp_int(_get(data, "score"), default=0),
        issues=issues,
        strengths=_safe_str_list(_get(data, "strengths")),
        suggestions=_safe_str_list(_get(data, "suggestions")),
    )


def _safe_content(value: Any) -> ContentEnhancement:
    data = _as_mapping(value)
    readability_default = int(get_scoring_value("defaults.readability_without_sentences", 60))
    return ContentEnhancement(
        action_verbs_used=_clamp_int(_get(data, "action_verbs_used"), default=0, max_value=10_000),
        quantified_achievements=_clamp_int(_get(data, "quantified_achievements"), default=0, max_value=10_000),
        industry_keywords=_clamp_int(_get(data, "industry_keywords"), default=0, max_value=10_000),
        generic_phrases_used=_clamp_int(_get(data, "generic_phrases_used"), default=0, max_value=10_000),
        generic_phrases=_safe_str_list(_get(data, "generic_phrases")),
        readability_score=_clamp_int(_get(data, "readability_score"), default=readability_default),
        suggestions=_safe_str_list(_get(data, "suggestions")),
    )


def _safe_recommendations(value: Any) -> list[Recommendation]:
    if not isinstance(value, list):
        return []
    output: list[Recommendation] = []
    for item in value:
        data = _as_mapping(item)
        priority = _safe_str(_get(data, "priority"), max_len=16).lower()
        category = _safe_str(_get(data, "category"), max_len=24).lower()
        title = _safe_str(_get(data, "title"), max_len=120)
        if priority not in VALID_PRIORITIES or category not in VALID_CATEGORIES or not title:
            continue
        output.append(
            Recommendation(
                priority=priority,
                category=category,
                title=title,
                description=_safe_str(_get(data, "description"), max_len=400),
                action=_safe_str(_get(data, "action"), max_len=400),
            )
        )
        if len(output) >= MAX_RECOMMENDATIONS:
            break
    return output


def _safe_feedback(value: Any, fallback_score: int) -> ScoredFeedback:
    data = _as_mapping(value)
    return ScoredFeedback(
        score=_clamp_int(_get(data, "score"), default=fallback_score),
        feedback=_safe_str(_get(data, "feedback"), max_len=800) or FALLBACK_FEEDBACK,
    )


def fallback_ai_insights() -> AIInsights:
    score = int(get_scoring_value("defaults.ai_score_fallback", 70))
    return AIInsights(
        overall_assessment="Unable to generate AI insights at this time",
        key_strengths=[],
        critical_gaps=[],
        industry_alignment=ScoredFeedback(score=score, feedback=FALLBACK_FEEDBACK),
        content_quality=ScoredFeedback(score=score, feedback=FALLBACK_FEEDBACK),
        competitive_analysis="Analysis unavailable",
        tailored_suggestions=[],
        is_fallback=True,
    )


def normalize_ai_insights(raw: Any) -> AIInsights:
    if isinstance(raw, AIInsights):
        raw = raw.model_dump()
    data = _as_mapping(raw)
    if not data:
        return fallback_ai_insights()
    fallback_score = int(get_scoring_value("defaults.ai_score_fallback", 70))
    return AIInsights(
        overall_assessment=_safe_str(_get(data, "overall_assessment"), max_len=1500) or "No overall assessment provided",
        key_strengths=_safe_str_list(_get(data, "key_strengths"), max_items=8),
        critical_gaps=_safe_str_list(_get(data, "critical_gaps"), max_items=8),
        industry_alignment=_safe_feedback(_get(data, "industry_alignment"), fallback_score),
        content_quality=_safe_feedback(_get(data, "content_quality"), fallback_score),
        competitive_analysis=_safe_str(_get(data, "competitive_analysis"), max_len=1500) or "Analysis unavailable",
        tailored_suggestions=_safe_str_list(_get(data, "tailored_suggestions"), max_items=8, max_len=400),
        is_fallback=_get(data, "is_fallback") is True,
    )


def normalize_keyword_gaps(raw: Any) -> KeywordGaps:
    data = _as_mapping(raw)
    suggestions = _as_mapping(_get(data, "keyword_suggestions"))
    return KeywordGaps(
        missing_keywords=_safe_str_list(_get(data, "missing_keywords"), max_items=30, max_len=80),
        keyword_suggestions={
            _safe_str(category, max_len=60): _safe_str_list(values, max_items=15, max_len=80)
            for category, values in suggestions.items()
            if _safe_str(category, max_len=60)
        },
    )


def normalize_result(raw: Any) -> AnalysisResult:
    data = _as_mapping(raw)
    ai_raw = _get(data, "ai_insights")
    return AnalysisResult(
        overall_score=_clamp_int(
            _get(data, "overall_score"),
            default=int(get_scoring_value("defaults.empty_input_score", 50)),
        ),
        keyword_matches=_safe_keyword_matches(_get(data, "keyword_matches")),
        missing_keywords=_safe_str_list(_get(data, "missing_keywords"), max_items=100, max_len=120),
        hard_skills_analysis=_safe_hard_skills(_get(data, "hard_skills_analysis")),
        formatting_check=_safe_formatting(_get(data, "formatting_check")),
        content_enhancement=_safe_content(_get(data, "content_enhancement")),
        recommendations=_safe_recommendations(_get(data, "recommendations")),
        ai_insights=None if ai_raw is None else normalize_ai_insights(ai_raw),
        degraded=_get(data, "degraded") is True,
    )
