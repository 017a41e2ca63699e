import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.taxonomy import get_default_taxonomy_provider  # noqa: E402
from app.taxonomy.local_taxonomy import LocalTaxonomy  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_alias_normalization_resolves_canonical_name(self):
        taxonomy = LocalTaxonomy()
        normalized, canonical = taxonomy.normalize_skill("  K8s ")
        self.assertEqual(normalized, "k8s")
        self.assertEqual(canonical, "Kubernetes")
        self.assertEqual(taxonomy.normalize_skill("Underwater basket weaving"), ("underwater basket weaving", None))

    def test_symbol_terms_match_on_boundaries(self):
        taxonomy = LocalTaxonomy()
        names = [term.name for term in taxonomy.find_terms("C++ and C# services behind a .NET gateway")]
        self.assertEqual(names, ["C++", "C#", ".NET"])

    def test_dotted_suffix_is_not_a_separate_term(self):
        names = [term.name for term in LocalTaxonomy().find_terms("APIs in Node.js")]
        self.assertEqual(names, ["Node.js"])

    def test_multi_word_aliases_allow_any_whitespace(self):
        names = [term.name for term in LocalTaxonomy().find_terms("Deployed on Amazon\nWeb Services")]
        self.assertEqual(names, ["AWS"])

    def test_certifications_follow_skills(self):
        kinds = [term.kind for term in LocalTaxonomy().find_terms("AWS Certified, strong Python")]
        self.assertEqual(kinds, ["skill", "skill", "certification"])

    def test_default_provider_is_versioned_and_cached(self):
        provider = get_default_taxonomy_provider()
        self.assertIs(provider, get_default_taxonomy_provider())
        self.assertEqual(provider.version, "2024.1")

    def test_custom_vocabulary_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "vocab.json"
            path.write_text(json.dumps({"version": "test", "skills": {"Elixir": ["elixir"]}}), encoding="utf-8")
            taxonomy = LocalTaxonomy(path)
        self.assertEqual(taxonomy.version, "test")
        self.assertEqual([term.name for term in taxonomy.skills], ["Elixir"])
        self.assertEqual(taxonomy.certifications, ())


if __name__ == "__main__":
    unittest.main()
