import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.resume_corpus import build_resume_corpus, experience_descriptions  # noqa: E402
from app.schemas.resume import ResumeRecord  # noqa: E402


class ResumeCorpusTests(unittest.TestCase):
    def test_empty_fields_are_skipped(self):
        resume = ResumeRecord.model_validate(
            {
                "personalInfo": {"fullName": "Jane Doe"},
                "experience": [{"id": "e1", "company": "", "position": "", "description": ""}],
                "education": [{"id": "ed1", "institution": "TU Berlin", "gpa": None}],
            }
        )
        corpus = build_resume_corpus(resume)
        self.assertEqual(corpus, "Jane Doe TU Berlin")
        self.assertNotIn("None", corpus)
        self.assertNotIn("null", corpus)
        self.assertNotIn("  ", corpus)

    def test_sections_follow_resume_order(self):
        resume = ResumeRecord.model_validate(
            {
                "personalInfo": {"fullName": "Jane Doe", "email": "jane@example.com"},
                "experience": [
                    {"id": "e1", "company": "Acme", "position": "Backend Engineer", "description": "Built APIs"}
                ],
                "skills": [{"id": "s1", "name": "Python", "level": "Expert"}],
                "projects": [{"id": "p1", "name": "Chat", "technologies": "Redis"}],
            }
        )
        corpus = build_resume_corpus(resume)
        self.assertLess(corpus.index("jane@example.com"), corpus.index("Backend Engineer Acme Built APIs"))
        self.assertLess(corpus.index("Built APIs"), corpus.index("Python Expert"))
        self.assertTrue(corpus.endswith("Chat Redis"))

    def test_empty_resume_yields_empty_corpus(self):
        self.assertEqual(build_resume_corpus(ResumeRecord()), "")

    def test_experience_descriptions_ignore_blank_entries(self):
        resume = ResumeRecord.model_validate(
            {
                "experience": [
                    {"id": "e1", "description": "   "},
                    {"id": "e2", "description": "Led a team of 5"},
                ]
            }
        )
        self.assertEqual(experience_descriptions(resume), ["Led a team of 5"])

    def test_duplicate_ids_are_rejected(self):
        with self.assertRaises(ValueError):
            ResumeRecord.model_validate({"skills": [{"id": "s1", "name": "Go"}, {"id": "s1", "name": "Rust"}]})


if __name__ == "__main__":
    unittest.main()
