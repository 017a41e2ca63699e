from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Pattern, Protocol

TermKind = Literal["skill", "certification"]


@dataclass(frozen=True)
class VocabularyTerm:
    name: str
    kind: TermKind
    aliases: tuple[str, ...]
    pattern: Pattern[str]

    def spans(self, text: str) -> list[tuple[int, int]]:
        return [(match.start(), match.end()) for match in self.pattern.finditer(text)]

    def occurs_in(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class TaxonomyProvider(Protocol):
    version: str

    @property
    def skills(self) -> tuple[VocabularyTerm, ...]: ...

    @property
    def certifications(self) -> tuple[VocabularyTerm, ...]: ...

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        """Return normalized text and the canonical vocabulary name, if any."""

    def find_terms(self, text: str) -> list[VocabularyTerm]:
        """Return every vocabulary term (skills first, then certifications) present in text."""
