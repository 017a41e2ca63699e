from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

Importance = Literal["high", "medium", "low"]
IssueSeverity = Literal["critical", "warning", "info"]
Priority = Literal["high", "medium", "low"]
RecommendationCategory = Literal["keywords", "skills", "formatting", "content"]
OptimizeContentType = Literal["experience", "summary", "skills"]


class _ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class KeywordMatch(_ResultModel):
    keyword: str
    frequency: int = Field(default=0, ge=0)
    positions: list[int] = Field(default_factory=list)
    importance: Importance = "low"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return self.frequency > 0


class CertificationAnalysis(_ResultModel):
    required: list[str] = Field(default_factory=list)
    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class HardSkillsAnalysis(_ResultModel):
    required_skills: list[str] = Field(default_factory=list)
    found_skills: list[str] = Field(default_factory=list)
    missing_critical_skills: list[str] = Field(default_factory=list)
    certifications: CertificationAnalysis = Field(default_factory=CertificationAnalysis)
    skills_score: int = Field(default=100, ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list)


class FormattingIssue(_ResultModel):
    message: str
    severity: IssueSeverity = "warning"


class FormattingCheck(_ResultModel):
    score: int = Field(default=100, ge=0, le=100)
    issues: list[FormattingIssue] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ContentEnhancement(_ResultModel):
    action_verbs_used: int = Field(default=0, ge=0)
    quantified_achievements: int = Field(default=0, ge=0)
    industry_keywords: int = Field(default=0, ge=0)
    generic_phrases_used: int = Field(default=0, ge=0)
    generic_phrases: list[str] = Field(default_factory=list)
    readability_score: int = Field(default=60, ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)


class Recommendation(_ResultModel):
    priority: Priority
    category: RecommendationCategory
    title: str
    description: str
    action: str


class ScoredFeedback(_ResultModel):
    score: int = Field(default=70, ge=0, le=100)
    feedback: str = ""


class AIInsights(_ResultModel):
    overall_assessment: str = ""
    key_strengths: list[str] = Field(default_factory=list)
    critical_gaps: list[str] = Field(default_factory=list)
    industry_alignment: ScoredFeedback = Field(default_factory=ScoredFeedback)
    content_quality: ScoredFeedback = Field(default_factory=ScoredFeedback)
    competitive_analysis: str = ""
    tailored_suggestions: list[str] = Field(default_factory=list)
    is_fallback: bool = False


class KeywordGaps(_ResultModel):
    missing_keywords: list[str] = Field(default_factory=list)
    keyword_suggestions: dict[str, list[str]] = Field(default_factory=dict)


class AnalysisResult(_ResultModel):
    overall_score: int = Field(ge=0, le=100)
    keyword_matches: list[KeywordMatch] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    hard_skills_analysis: HardSkillsAnalysis = Field(default_factory=HardSkillsAnalysis)
    formatting_check: FormattingCheck = Field(default_factory=FormattingCheck)
    content_enhancement: ContentEnhancement = Field(default_factory=ContentEnhancement)
    recommendations: list[Recommendation] = Field(default_factory=list, max_length=8)
    ai_insights: AIInsights | None = None
    degraded: bool = False
