import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.utils import (  # noqa: E402
    has_structured_lines,
    is_bullet_like,
    is_valid_email,
    join_fields,
    split_sentences,
    word_count,
)


class TextUtilsTests(unittest.TestCase):
    def test_join_fields_skips_blank_values(self):
        self.assertEqual(join_fields("  Senior  Engineer ", None, "", "Acme\nCorp"), "Senior Engineer Acme Corp")

    def test_bullet_detection(self):
        self.assertTrue(is_bullet_like("• Led the team"))
        self.assertTrue(is_bullet_like("  - Built APIs"))
        self.assertTrue(is_bullet_like("1) Shipped v2"))
        self.assertFalse(is_bullet_like("Built APIs"))

    def test_structured_lines(self):
        self.assertTrue(has_structured_lines("Built APIs\nLed migrations"))
        self.assertTrue(has_structured_lines("* Built APIs"))
        self.assertFalse(has_structured_lines("Built APIs and led migrations."))

    def test_email_validation(self):
        self.assertTrue(is_valid_email("jane.doe@example.co.uk"))
        self.assertFalse(is_valid_email("jane@example"))
        self.assertFalse(is_valid_email("jane doe@example.com"))

    def test_sentences_and_words(self):
        self.assertEqual(split_sentences("Led a team. Shipped it!  Why?"), ["Led a team", "Shipped it", "Why"])
        self.assertEqual(split_sentences("..."), [])
        self.assertEqual(split_sentences("- Built APIs\n\n- Led reviews\n"), ["- Built APIs", "- Led reviews"])
        self.assertEqual(word_count("  three   short words "), 3)


if __name__ == "__main__":
    unittest.main()
