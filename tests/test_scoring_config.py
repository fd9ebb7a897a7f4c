import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config.scoring import get_scoring_config, get_scoring_value


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("skill_scoring.mention_weight"), 20)
        self.assertEqual(get_scoring_value("skill_scoring.strength_thresholds.strong"), 70)
        self.assertEqual(get_scoring_value("analysis.top_skills"), 8)

    def test_missing_paths_fall_back_to_default(self):
        self.assertEqual(get_scoring_value("skill_scoring.unknown", 7), 7)
        self.assertEqual(get_scoring_value("skill_scoring.mention_weight.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))


if __name__ == "__main__":
    unittest.main()
