from __future__ import annotations

import json
import re
from pathlib import Path

from .provider import TaxonomyProvider, TermKind, VocabularyTerm

# Terms such as "c++", "c#" and ".net" end or start with symbols, so \b is not usable.
# A leading dot is excluded so "js" does not match inside "node.js".
_LEFT_BOUNDARY = r"(?<![a-z0-9+#.])"
_RIGHT_BOUNDARY = r"(?![a-z0-9+#])"


def _compile_term(aliases: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(
        r"\s+".join(re.escape(word) for word in alias.split())
        for alias in sorted(aliases, key=len, reverse=True)
    )
    return re.compile(f"{_LEFT_BOUNDARY}(?:{alternation}){_RIGHT_BOUNDARY}", re.IGNORECASE)


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, vocabulary_path: str | Path | None = None) -> None:
        path = Path(vocabulary_path) if vocabulary_path else Path(__file__).with_name("vocabulary.json")
        raw = self._load_vocabulary(path)
        self.version = str(raw.get("version") or "unversioned")
        self._skills = self._build_terms(raw.get("skills") or {}, "skill")
        self._certifications = self._build_terms(raw.get("certifications") or {}, "certification")
        self._alias_index = {
            alias: term.name for term in self._skills + self._certifications for alias in term.aliases
        }
        self._alias_index.update({term.name.lower(): term.name for term in self._skills + self._certifications})

    @staticmethod
    def _load_vocabulary(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid vocabulary file '{path}': expected a top-level mapping.")
        return raw

    @staticmethod
    def _build_terms(entries: dict, kind: TermKind) -> tuple[VocabularyTerm, ...]:
        terms: list[VocabularyTerm] = []
        for name, aliases in entries.items():
            clean = tuple(
                dict.fromkeys(str(alias).strip().lower() for alias in [name, *aliases] if str(alias).strip())
            )
            terms.append(VocabularyTerm(name=str(name), kind=kind, aliases=clean, pattern=_compile_term(clean)))
        return tuple(terms)

    @property
    def skills(self) -> tuple[VocabularyTerm, ...]:
        return self._skills

    @property
    def certifications(self) -> tuple[VocabularyTerm, ...]:
        return self._certifications

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = re.sub(r"\s+", " ", raw).strip().lower()
        return normalized, self._alias_index.get(normalized)

    def find_terms(self, text: str) -> list[VocabularyTerm]:
        if not text:
            return []
        return [term for term in self._skills + self._certifications if term.occurs_in(text)]
