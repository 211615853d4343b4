import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import resume_ats.main  # noqa: F401,E402
from resume_ats.core.config.scoring import get_scoring_value  # noqa: E402
from resume_ats.scoring import calculate_ats_score  # noqa: E402


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("ats.weights.experience"), 0.275)

    def test_scoring_none_document(self):
        report = calculate_ats_score(None)
        self.assertEqual(report.breakdown.format, 15)


if __name__ == "__main__":
    unittest.main()
