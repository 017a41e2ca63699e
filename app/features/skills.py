from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_value
from app.normalize.resume_corpus import build_resume_corpus
from app.schemas.analysis import CertificationAnalysis, HardSkillsAnalysis
from app.schemas.resume import ResumeRecord
from app.taxonomy import TaxonomyProvider, VocabularyTerm, get_default_taxonomy_provider

from .lexicon import CRITICAL_MARKER_PATTERN, LEADING_CRITICAL_MARKER_PATTERN

_CLAUSE_BOUNDARY_RE = re.compile(r"[.;!?](?=\s|$)|\n")
_TRAILING_MARKER_RE = re.compile(CRITICAL_MARKER_PATTERN, re.IGNORECASE)
_LEADING_MARKER_RE = re.compile(LEADING_CRITICAL_MARKER_PATTERN, re.IGNORECASE)


def _clause_before(text: str, start: int, window: int) -> str:
    segment = text[max(0, start - window) : start]
    boundaries = list(_CLAUSE_BOUNDARY_RE.finditer(segment))
    return segment[boundaries[-1].end() :] if boundaries else segment


def _clause_after(text: str, end: int, window: int) -> str:
    segment = text[end : end + window]
    boundary = _CLAUSE_BOUNDARY_RE.search(segment)
    return segment[: boundary.start()] if boundary else segment


def _is_marked_critical(
    term: VocabularyTerm,
    job_text: str,
    other_spans: list[tuple[int, int]],
    window: int,
) -> bool:
    """Check whether any occurrence of ``term`` sits next to a criticality marker.

    A leading marker ("must have", "required:") covers every term that follows it in
    the same clause. A trailing marker ("AWS (required)") belongs to the nearest term
    before it, so it is ignored when another vocabulary term lies in between.
    That makes "Python, Java and AWS are required" flag only AWS; a list is only
    treated as critical as a whole when the marker leads it ("Required: Python, Java
    and AWS").
    """
    for start, end in term.spans(job_text):
        if _LEADING_MARKER_RE.search(_clause_before(job_text, start, window)):
            return True
        marker = _TRAILING_MARKER_RE.search(_clause_after(job_text, end, window))
        if marker is None:
            continue
        marker_at = end + marker.start()
        if not any(end <= other_start < marker_at for other_start, _ in other_spans):
            return True
    return False


def compute_skills_score(found: int, required: int) -> int:
    if required <= 0:
        return int(get_scoring_value("defaults.skills_score_without_requirements", 100))
    return max(0, min(100, round(100 * found / required)))


def _declared_skill_names(resume: ResumeRecord, provider: TaxonomyProvider) -> tuple[list[str], set[str]]:
    names: list[str] = []
    canonical: set[str] = set()
    for skill in resume.skills:
        normalized, canonical_name = provider.normalize_skill(skill.name)
        if not normalized:
            continue
        names.append(normalized)
        if canonical_name:
            canonical.add(canonical_name)
    return names, canonical


def match_skills(
    job_text: str,
    resume: ResumeRecord,
    *,
    corpus: str | None = None,
    taxonomy: TaxonomyProvider | None = None,
) -> HardSkillsAnalysis:
    provider = taxonomy or get_default_taxonomy_provider()
    resume_corpus = corpus if corpus is not None else build_resume_corpus(resume)
    declared_names, declared_canonical = _declared_skill_names(resume, provider)
    window = int(get_scoring_value("skills.criticality_window_chars", 60))

    def is_found(term: VocabularyTerm) -> bool:
        if term.name in declared_canonical or term.occurs_in(resume_corpus):
            return True
        return any(term.occurs_in(name) for name in declared_names)

    required_skills = [term for term in provider.skills if term.occurs_in(job_text)]
    required_certs = [term for term in provider.certifications if term.occurs_in(job_text)]

    spans_by_term = {term.name: term.spans(job_text) for term in required_skills + required_certs}

    found_skills: list[str] = []
    missing_skills: list[str] = []
    missing_critical: list[str] = []
    for term in required_skills:
        if is_found(term):
            found_skills.append(term.name)
            continue
        missing_skills.append(term.name)
        other_spans = [span for name, spans in spans_by_term.items() if name != term.name for span in spans]
        if _is_marked_critical(term, job_text, other_spans, window):
            missing_critical.append(term.name)

    found_certs = [term.name for term in required_certs if is_found(term)]
    certifications = CertificationAnalysis(
        required=[term.name for term in required_certs],
        found=found_certs,
        missing=[term.name for term in required_certs if term.name not in found_certs],
    )

    max_recommendations = int(get_scoring_value("skills.max_skill_recommendations", 5))
    return HardSkillsAnalysis(
        required_skills=[term.name for term in required_skills],
        found_skills=found_skills,
        missing_critical_skills=missing_critical,
        certifications=certifications,
        skills_score=compute_skills_score(len(found_skills), len(required_skills)),
        recommendations=[
            f"Consider adding {name} to your skills section" for name in missing_skills[:max_recommendations]
        ],
    )
