from __future__ import annotations

import re
from collections import Counter
from functools import lru_cache

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import Importance, KeywordMatch
from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .lexicon import ACTION_VERB_MARKERS, ROLE_MARKERS, STOPWORDS

_PUNCTUATION_RE = re.compile(r"[^\w\s+#./-]")
_EDGE_CHARS = ".-/"
_HAS_LETTER_RE = re.compile(r"[a-z]")


def _tokenize(text: str) -> list[str]:
    cleaned = _PUNCTUATION_RE.sub(" ", text.lower())
    tokens: list[str] = []
    for raw in cleaned.split():
        token = raw.strip(_EDGE_CHARS)
        if token:
            tokens.append(token)
    return tokens


def _is_content_token(token: str, min_length: int) -> bool:
    if len(token) < min_length or token in STOPWORDS:
        return False
    return bool(_HAS_LETTER_RE.search(token))


def extract_keywords(text: str, limit: int | None = None) -> list[str]:
    """Extract candidate keywords and short phrases from a job description.

    Unigrams must repeat at least ``keywords.min_unigram_frequency`` times and are
    ordered by frequency, ties keeping first appearance. Every contiguous bigram
    and trigram built only from content tokens follows, in order of appearance.
    The output is deduplicated and capped at ``keywords.max_keywords``.
    """
    if not text or not text.strip():
        return []

    max_keywords = limit if limit is not None else int(get_scoring_value("keywords.max_keywords", 50))
    min_frequency = int(get_scoring_value("keywords.min_unigram_frequency", 2))
    min_length = int(get_scoring_value("keywords.min_token_length", 3))

    tokens = _tokenize(text)
    keep = [_is_content_token(token, min_length) for token in tokens]

    counts: Counter[str] = Counter(token for token, kept in zip(tokens, keep) if kept)
    unigrams = sorted(
        (token for token, count in counts.items() if count >= min_frequency),
        key=lambda token: -counts[token],
    )

    phrases: list[str] = []
    for size in (2, 3):
        for start in range(len(tokens) - size + 1):
            if all(keep[start : start + size]):
                phrases.append(" ".join(tokens[start : start + size]))

    ordered = list(dict.fromkeys([*unigrams, *phrases]))
    return ordered[:max_keywords]


@lru_cache(maxsize=512)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    body = r"\s+".join(re.escape(word) for word in keyword.split())
    return re.compile(rf"(?<![a-z0-9+#]){body}(?![a-z0-9+#])", re.IGNORECASE)


def classify_importance(keyword: str, taxonomy: TaxonomyProvider | None = None) -> Importance:
    provider = taxonomy or get_default_taxonomy_provider()
    if provider.find_terms(keyword):
        return "high"
    for word in keyword.lower().split():
        if word in ROLE_MARKERS or word.startswith(ACTION_VERB_MARKERS):
            return "medium"
    return "low"


def match_keywords(
    keywords: list[str],
    corpus: str,
    taxonomy: TaxonomyProvider | None = None,
) -> list[KeywordMatch]:
    max_positions = int(get_scoring_value("keywords.max_positions", 20))
    matches: list[KeywordMatch] = []
    for keyword in keywords:
        hits = list(keyword_pattern(keyword).finditer(corpus)) if corpus else []
        matches.append(
            KeywordMatch(
                keyword=keyword,
                frequency=len(hits),
                positions=[hit.start() for hit in hits[:max_positions]],
                importance=classify_importance(keyword, taxonomy),
            )
        )
    return matches
