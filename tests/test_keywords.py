import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.keywords import classify_importance, extract_keywords, match_keywords  # noqa: E402


class ExtractKeywordsTests(unittest.TestCase):
    def test_repeated_unigrams_come_first_by_frequency(self):
        text = "Django developer. Python and Django. Python, Django and REST."
        keywords = extract_keywords(text)
        self.assertEqual(keywords[:2], ["django", "python"])
        self.assertNotIn("developer", keywords)
        self.assertNotIn("and", keywords)

    def test_phrases_are_built_from_content_tokens_only(self):
        keywords = extract_keywords("Design distributed systems with the platform team.")
        self.assertIn("distributed systems", keywords)
        self.assertIn("design distributed systems", keywords)
        self.assertIn("platform team", keywords)
        self.assertFalse(any(phrase.startswith("with ") or " the " in phrase for phrase in keywords))

    def test_output_is_unique_and_capped(self):
        text = " ".join(f"alpha{i} beta{i} gamma{i}" for i in range(40))
        keywords = extract_keywords(text)
        self.assertLessEqual(len(keywords), 50)
        self.assertEqual(len(keywords), len(set(keywords)))
        self.assertEqual(len(extract_keywords(text, limit=7)), 7)

    def test_empty_text_has_no_keywords(self):
        self.assertEqual(extract_keywords(""), [])
        self.assertEqual(extract_keywords("   \n"), [])


class MatchKeywordsTests(unittest.TestCase):
    def test_frequency_positions_and_found_agree(self):
        corpus = "Python services. Wrote python tooling."
        matches = match_keywords(["python", "kubernetes"], corpus)
        python, kubernetes = matches
        self.assertEqual(python.frequency, 2)
        self.assertEqual(python.positions, [0, 23])
        self.assertTrue(python.found)
        self.assertEqual(kubernetes.frequency, 0)
        self.assertFalse(kubernetes.found)
        for match in matches:
            self.assertEqual(match.found, match.frequency > 0)

    def test_word_boundaries_are_respected(self):
        matches = match_keywords(["java"], "Senior JavaScript developer")
        self.assertEqual(matches[0].frequency, 0)

    def test_empty_corpus_matches_nothing(self):
        matches = match_keywords(["python"], "")
        self.assertFalse(matches[0].found)
        self.assertEqual(matches[0].positions, [])

    def test_found_is_serialized(self):
        payload = match_keywords(["python"], "python")[0].model_dump(by_alias=True)
        self.assertTrue(payload["found"])


class ClassifyImportanceTests(unittest.TestCase):
    def test_vocabulary_terms_are_high(self):
        self.assertEqual(classify_importance("kubernetes"), "high")
        self.assertEqual(classify_importance("python developer"), "high")

    def test_role_and_action_words_are_medium(self):
        self.assertEqual(classify_importance("senior engineer"), "medium")
        self.assertEqual(classify_importance("managing stakeholders"), "medium")

    def test_everything_else_is_low(self):
        self.assertEqual(classify_importance("culture"), "low")


if __name__ == "__main__":
    unittest.main()
