import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.content_quality import analyze_content, readability_score  # noqa: E402
from app.schemas.resume import ResumeRecord  # noqa: E402


def _resume_with_description(description: str) -> ResumeRecord:
    return ResumeRecord.model_validate(
        {"personalInfo": {"fullName": "Jane Doe"}, "experience": [{"id": "e1", "description": description}]}
    )


class ContentQualityTests(unittest.TestCase):
    def test_percentage_is_a_quantified_achievement(self):
        content = analyze_content(_resume_with_description("Increased revenue by 25% in Q2"))
        self.assertGreaterEqual(content.quantified_achievements, 1)
        self.assertEqual(content.action_verbs_used, 1)

    def test_money_and_plus_counts_are_quantified(self):
        content = analyze_content(_resume_with_description("Saved $200 per month. Supported 50+ customers."))
        self.assertEqual(content.quantified_achievements, 2)

    def test_generic_phrases_are_listed_and_counted(self):
        content = analyze_content(
            _resume_with_description("Responsible for various tasks. Also responsible for reports.")
        )
        self.assertEqual(content.generic_phrases, ["responsible for", "various tasks"])
        self.assertEqual(content.generic_phrases_used, 3)
        self.assertTrue(any("responsible for" in suggestion for suggestion in content.suggestions))

    def test_industry_terms_are_distinct(self):
        content = analyze_content(_resume_with_description("Agile team shipping microservices. Agile rituals."))
        self.assertEqual(content.industry_keywords, 2)

    def test_empty_resume_gets_neutral_readability(self):
        content = analyze_content(ResumeRecord())
        self.assertEqual(content.readability_score, 60)
        self.assertEqual(content.action_verbs_used, 0)
        self.assertEqual(content.quantified_achievements, 0)
        self.assertIn("Use more action verbs to describe your achievements", content.suggestions)
        self.assertIn("Add quantifiable achievements with numbers and percentages", content.suggestions)


class ReadabilityTests(unittest.TestCase):
    def test_short_sentences_score_full(self):
        self.assertEqual(readability_score("Led the team. Shipped the product."), 100)

    def test_long_sentences_are_penalized(self):
        sentence = " ".join(["word"] * 40) + "."
        self.assertEqual(readability_score(sentence), 50)

    def test_no_sentences(self):
        self.assertEqual(readability_score("  "), 60)

    def test_bullet_lines_without_periods_are_separate_sentences(self):
        bullets = "\n".join(
            f"- Designed and shipped service number {index} for the payments platform team" for index in range(8)
        )
        self.assertEqual(readability_score(bullets), 100)
        content = analyze_content(_resume_with_description(bullets))
        self.assertEqual(content.readability_score, 100)
        self.assertNotIn("Shorten long sentences to improve readability", content.suggestions)


if __name__ == "__main__":
    unittest.main()
