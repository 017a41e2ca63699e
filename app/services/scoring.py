from __future__ import annotations

from dataclasses import dataclass

from app.core.config.scoring import get_scoring_value
from app.features.skills import compute_skills_score
from app.normalize.resume_corpus import build_resume_corpus
from app.schemas.analysis import (
    AIInsights,
    ContentEnhancement,
    FormattingCheck,
    HardSkillsAnalysis,
    KeywordMatch,
    Recommendation,
)
from app.schemas.resume import ResumeRecord

_PRIORITY_RANK = {"high": 0, "medium": 1, "low": 2}


@dataclass(frozen=True)
class AggregateScore:
    overall_score: int
    recommendations: list[Recommendation]
    candidate_recommendations: list[Recommendation]


def _clamp_score(value: float) -> int:
    return max(0, min(100, round(value)))


def keyword_score(keyword_matches: list[KeywordMatch]) -> float:
    if not keyword_matches:
        return 0.0
    matched = sum(1 for match in keyword_matches if match.found)
    return 100.0 * matched / len(keyword_matches)


def content_score(content: ContentEnhancement) -> int:
    base = float(get_scoring_value("content.base_score", 50))
    per_quantified = float(get_scoring_value("content.per_quantified_achievement", 10))
    per_verb = float(get_scoring_value("content.per_action_verb", 5))
    per_generic = float(get_scoring_value("content.per_generic_phrase", 10))
    return _clamp_score(
        base
        + per_quantified * content.quantified_achievements
        + per_verb * content.action_verbs_used
        - per_generic * content.generic_phrases_used
    )


def _recommendation(priority: str, category: str, title: str, description: str, action: str) -> Recommendation:
    return Recommendation(priority=priority, category=category, title=title, description=description, action=action)


def build_recommendations(
    keyword_matches: list[KeywordMatch],
    skills: HardSkillsAnalysis,
    formatting: FormattingCheck,
    content: ContentEnhancement,
    resume: ResumeRecord | None = None,
) -> list[Recommendation]:
    """Walk the fixed priority ladder; each rung contributes at most one recommendation."""
    ladder: list[Recommendation] = []

    if resume is not None:
        min_skills = int(get_scoring_value("recommendations.min_skills", 5))
        if len(resume.skills) < min_skills:
            ladder.append(
                _recommendation(
                    "high",
                    "skills",
                    "Add More Skills",
                    f"Your resume has fewer than {min_skills} skills listed",
                    "Add relevant technical and soft skills",
                )
            )
        if not resume.experience:
            ladder.append(
                _recommendation(
                    "high",
                    "content",
                    "Add Work Experience",
                    "No work experience is listed",
                    "Include relevant work experience and achievements",
                )
            )

    if skills.missing_critical_skills:
        listed = ", ".join(skills.missing_critical_skills[:3])
        ladder.append(
            _recommendation(
                "high",
                "skills",
                "Add Missing Critical Skills",
                f"The job description marks these skills as required: {listed}",
                "Add these skills to your Skills section and show where you used them",
            )
        )

    critical_issues = [issue for issue in formatting.issues if issue.severity == "critical"]
    if critical_issues:
        ladder.append(
            _recommendation(
                "high",
                "formatting",
                "Fix Critical Formatting Issues",
                critical_issues[0].message,
                "Resolve critical formatting problems so ATS parsers can read your resume",
            )
        )

    missing_high = [match.keyword for match in keyword_matches if match.importance == "high" and not match.found]
    if missing_high:
        ladder.append(
            _recommendation(
                "medium",
                "keywords",
                "Add Missing High-Priority Keywords",
                f"Important job keywords not found in your resume: {', '.join(missing_high[:5])}",
                "Work these keywords into your experience and skills where they are accurate",
            )
        )

    if content.quantified_achievements < int(get_scoring_value("recommendations.min_quantified_achievements", 3)):
        ladder.append(
            _recommendation(
                "medium",
                "content",
                "Quantify Your Achievements",
                f"Only {content.quantified_achievements} quantified achievements found",
                "Add percentages, amounts and counts that show the impact of your work",
            )
        )

    if content.action_verbs_used < int(get_scoring_value("recommendations.min_action_verbs", 3)):
        ladder.append(
            _recommendation(
                "low",
                "content",
                "Use Stronger Action Verbs",
                f"Only {content.action_verbs_used} strong action verbs found",
                "Start bullet points with verbs such as led, delivered, optimized or launched",
            )
        )

    if content.generic_phrases_used > 0:
        ladder.append(
            _recommendation(
                "low",
                "content",
                "Replace Generic Phrases",
                f"Generic phrases weaken your resume: {', '.join(content.generic_phrases[:3])}",
                "Replace generic phrases with specific, measurable accomplishments",
            )
        )

    return ladder


def ai_recommendations(insights: AIInsights) -> list[Recommendation]:
    if insights.is_fallback:
        return []

    threshold = int(get_scoring_value("recommendations.ai_alignment_threshold", 70))
    recommendations: list[Recommendation] = []
    if insights.critical_gaps:
        recommendations.append(
            _recommendation(
                "high",
                "skills",
                "Address Critical Skill Gaps",
                "AI analysis identified critical gaps in your qualifications",
                f"Focus on: {', '.join(insights.critical_gaps[:2])}",
            )
        )
    if insights.industry_alignment.score < threshold:
        recommendations.append(
            _recommendation(
                "medium",
                "content",
                "Improve Industry Alignment",
                insights.industry_alignment.feedback or "Your resume does not reflect the target industry strongly",
                "Highlight relevant industry experience and use industry-specific terminology",
            )
        )
    if insights.content_quality.score < threshold:
        recommendations.append(
            _recommendation(
                "medium",
                "content",
                "Enhance Content Quality",
                insights.content_quality.feedback or "The writing quality of your resume can be improved",
                "Improve writing quality and professional presentation",
            )
        )
    if insights.tailored_suggestions:
        recommendations.append(
            _recommendation(
                "low",
                "content",
                "AI-Suggested Improvements",
                "Personalized suggestions based on job requirements",
                insights.tailored_suggestions[0],
            )
        )
    return recommendations


def merge_recommendations(
    heuristic: list[Recommendation],
    additional: list[Recommendation],
    limit: int | None = None,
) -> list[Recommendation]:
    """Order by priority, keeping generation order within a priority, then cap."""
    cap = limit if limit is not None else int(get_scoring_value("recommendations.max_with_ai", 8))
    merged = sorted([*heuristic, *additional], key=lambda item: _PRIORITY_RANK[item.priority])
    return merged[:cap]


def aggregate(
    keyword_matches: list[KeywordMatch],
    skills: HardSkillsAnalysis,
    formatting: FormattingCheck,
    content: ContentEnhancement,
    resume: ResumeRecord | None = None,
) -> AggregateScore:
    if not keyword_matches and resume is not None and not build_resume_corpus(resume):
        overall = int(get_scoring_value("defaults.empty_input_score", 50))
    else:
        weighted = (
            float(get_scoring_value("weights.keywords", 0.4)) * keyword_score(keyword_matches)
            + float(get_scoring_value("weights.skills", 0.3))
            * compute_skills_score(len(skills.found_skills), len(skills.required_skills))
            + float(get_scoring_value("weights.formatting", 0.2)) * formatting.score
            + float(get_scoring_value("weights.content", 0.1)) * content_score(content)
        )
        overall = _clamp_score(weighted)

    ladder = build_recommendations(keyword_matches, skills, formatting, content, resume)
    max_heuristic = int(get_scoring_value("recommendations.max_heuristic", 5))
    return AggregateScore(
        overall_score=overall,
        recommendations=ladder[:max_heuristic],
        candidate_recommendations=ladder,
    )
