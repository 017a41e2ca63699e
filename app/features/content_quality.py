from __future__ import annotations

import re
from functools import lru_cache

from app.core.config.scoring import get_scoring_value
from app.normalize.resume_corpus import build_resume_corpus
from app.normalize.utils import split_sentences, word_count
from app.schemas.analysis import ContentEnhancement
from app.schemas.resume import ResumeRecord

from .lexicon import GENERIC_PHRASES, INDUSTRY_TERMS, STRONG_ACTION_VERBS

_QUANTIFIED_RE = re.compile(r"\d+%|\$\d+|\d+\+")


@lru_cache(maxsize=256)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    body = r"\s+".join(re.escape(word) for word in phrase.split())
    return re.compile(rf"(?<![a-z0-9]){body}(?![a-z0-9])", re.IGNORECASE)


def _distinct_hits(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    return [term for term in vocabulary if _phrase_pattern(term).search(text)]


def readability_score(text: str) -> int:
    """100 minus a penalty for sentences longer than the target word count."""
    sentences = split_sentences(text)
    if not sentences:
        return int(get_scoring_value("defaults.readability_without_sentences", 60))
    target = float(get_scoring_value("content.readability_target_words", 15))
    penalty = float(get_scoring_value("content.readability_penalty_per_word", 2))
    average = word_count(text) / len(sentences)
    return max(0, min(100, round(100 - (average - target) * penalty)))


def _prose(resume: ResumeRecord) -> str:
    parts = [exp.description for exp in resume.experience] + [project.description for project in resume.projects]
    return "\n".join(part.strip() for part in parts if part.strip())


def analyze_content(resume: ResumeRecord, *, corpus: str | None = None) -> ContentEnhancement:
    text = corpus if corpus is not None else build_resume_corpus(resume)

    action_verbs = _distinct_hits(text, STRONG_ACTION_VERBS)
    quantified = len(_QUANTIFIED_RE.findall(text))
    industry = _distinct_hits(text, INDUSTRY_TERMS)
    generic = _distinct_hits(text, GENERIC_PHRASES)
    generic_occurrences = sum(len(_phrase_pattern(phrase).findall(text)) for phrase in generic)
    readability = readability_score(_prose(resume))

    suggestions: list[str] = []
    if len(action_verbs) < int(get_scoring_value("content.min_action_verbs", 3)):
        suggestions.append("Use more action verbs to describe your achievements")
    if quantified < int(get_scoring_value("content.min_quantified_achievements", 2)):
        suggestions.append("Add quantifiable achievements with numbers and percentages")
    if generic:
        suggestions.append(f"Replace generic phrases such as '{generic[0]}' with specific accomplishments")
    if readability < 50:
        suggestions.append("Shorten long sentences to improve readability")

    return ContentEnhancement(
        action_verbs_used=len(action_verbs),
        quantified_achievements=quantified,
        industry_keywords=len(industry),
        generic_phrases_used=generic_occurrences,
        generic_phrases=generic,
        readability_score=readability,
        suggestions=suggestions,
    )
