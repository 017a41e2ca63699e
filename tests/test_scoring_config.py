import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config.scoring import get_scoring_config, get_scoring_value


class ScoringConfigTests(unittest.TestCase):
    def tearDown(self):
        get_scoring_config.cache_clear()

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("weights.keywords"), 0.4)
        self.assertEqual(get_scoring_value("formatting.deductions.incomplete_contact"), 20)

    def test_weights_sum_to_one(self):
        weights = get_scoring_value("weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("weights.unknown", 7), 7)
        self.assertIsNone(get_scoring_value("nope.nothing"))
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")

    def test_incomplete_override_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("weights:\n  keywords: 1.0\n", encoding="utf-8")
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                get_scoring_config.cache_clear()
                with self.assertRaises(RuntimeError) as ctx:
                    get_scoring_config()
        self.assertIn("missing sections", str(ctx.exception))

    def test_missing_override_file(self):
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": "/nonexistent/scoring.yaml"}):
            get_scoring_config.cache_clear()
            with self.assertRaises(RuntimeError):
                get_scoring_config()


if __name__ == "__main__":
    unittest.main()
