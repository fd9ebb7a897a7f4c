import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ANALYSIS_DELAY_MS", "0")
os.environ.setdefault("JOB_SEARCH_DELAY_MS", "0")

import app.main  # noqa: F401,E402
from app.core.config.scoring import get_scoring_value  # noqa: E402
from app.features.suggestions import load_suggestion_rules  # noqa: E402


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("skill_scoring.mention_weight"), 20)
        self.assertGreaterEqual(len(load_suggestion_rules()), 1)


if __name__ == "__main__":
    unittest.main()
