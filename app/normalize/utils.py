from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+|\n+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def join_fields(*values: str | None) -> str:
    """Space-join the non-empty values, skipping None and blank strings."""
    parts = [normalize_line(value) for value in values if isinstance(value, str) and value.strip()]
    return " ".join(parts)


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def has_structured_lines(text: str) -> bool:
    """True when the text is laid out as bullets or as several separate lines."""
    lines = [line for line in text.splitlines() if line.strip()]
    if any(is_bullet_like(line) for line in lines):
        return True
    return len(lines) >= 2


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value.strip()))


def split_sentences(text: str) -> list[str]:
    return [chunk.strip() for chunk in _SENTENCE_SPLIT_RE.split(text) if chunk.strip()]


def word_count(text: str) -> int:
    return len(text.split())
