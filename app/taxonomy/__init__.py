from functools import lru_cache

from .local_taxonomy import LocalTaxonomy
from .provider import TaxonomyProvider, TermKind, VocabularyTerm


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    """Process-wide vocabulary loaded from the bundled vocabulary.json."""
    return LocalTaxonomy()


__all__ = ["LocalTaxonomy", "TaxonomyProvider", "TermKind", "VocabularyTerm", "get_default_taxonomy_provider"]
