import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas import normalize_resume_document  # noqa: E402
from resume_ats.scoring import score_achievements, score_projects  # noqa: E402


class AchievementsScoringTests(unittest.TestCase):
    def test_no_achievements_scores_zero(self):
        self.assertEqual(score_achievements(normalize_resume_document({})).score, 0)

    def test_one_achievement_fans_out_to_categories(self):
        document = normalize_resume_document(
            {"achievements": [{"title": "Latency Win", "description": "Reduced latency by 40% for 2M users"}]}
        )
        result = score_achievements(document)
        self.assertEqual(result.factors["metrics"].score, 4)
        self.assertEqual(result.factors["scale"].score, 4)
        self.assertEqual(result.factors["metrics"].details, ["Latency Win"])
        self.assertEqual(result.factors["scale"].details, ["Latency Win"])
        self.assertEqual(result.factors["quality"].score, 0)
        self.assertEqual(result.factors["leadership"].score, 0)
        self.assertEqual(result.factors["business"].score, 0)
        self.assertEqual(result.score, 8)

    def test_several_keywords_count_once_per_achievement(self):
        document = normalize_resume_document(
            {"achievements": [{"title": "Speedup", "description": "Improved and increased throughput 30%"}]}
        )
        self.assertEqual(score_achievements(document).factors["metrics"].score, 4)

    def test_category_cap(self):
        achievements = [{"title": f"Win {i}", "description": "Cut cost 10%"} for i in range(6)]
        result = score_achievements(normalize_resume_document({"achievements": achievements}))
        self.assertEqual(result.factors["metrics"].score, 20)
        self.assertEqual(result.factors["business"].score, 20)
        self.assertEqual(len(result.factors["metrics"].details), 6)
        self.assertEqual(result.score, 40)


class ProjectsScoringTests(unittest.TestCase):
    def test_no_projects_scores_zero(self):
        self.assertEqual(score_projects(normalize_resume_document({})).score, 0)

    def test_complexity_topics_accumulate(self):
        document = normalize_resume_document(
            {"projects": [{"name": "Mesh", "description": "Distributed microservices with frontend and backend"}]}
        )
        result = score_projects(document)
        self.assertEqual(result.factors["complexity"].score, 5)
        self.assertEqual(result.factors["complexity"].details, ["System Architecture", "Full-Stack Web"])

    def test_full_stack_needs_both_halves_or_phrase(self):
        frontend_only = normalize_resume_document({"projects": [{"description": "A frontend widget"}]})
        self.assertEqual(score_projects(frontend_only).factors["complexity"].score, 0)
        phrase = normalize_resume_document({"projects": [{"description": "A full-stack widget"}]})
        self.assertEqual(score_projects(phrase).factors["complexity"].details, ["Full-Stack Web"])

    def test_complexity_cap(self):
        description = "machine learning data pipeline on kubernetes, distributed, android, full-stack"
        projects = [{"name": f"p{i}", "description": description} for i in range(3)]
        result = score_projects(normalize_resume_document({"projects": projects}))
        self.assertEqual(result.factors["complexity"].score, 30)

    def test_portfolio_and_documentation(self):
        long_description = "x" * 101
        document = normalize_resume_document(
            {
                "projects": [
                    {"name": "a", "github": "https://github.com/a", "demo": "https://a.dev", "description": long_description},
                    {"name": "b", "github": "https://github.com/b", "description": "x" * 100},
                ]
            }
        )
        result = score_projects(document)
        self.assertEqual(result.factors["portfolio"].score, 15)
        self.assertEqual(result.factors["documentation"].score, 5)
        self.assertEqual(result.factors["documentation"].details, ["a"])
        self.assertEqual(result.score, 20)

    def test_portfolio_cap(self):
        projects = [{"name": str(i), "github": "g", "demo": "d"} for i in range(5)]
        result = score_projects(normalize_resume_document({"projects": projects}))
        self.assertEqual(result.factors["portfolio"].score, 40)


if __name__ == "__main__":
    unittest.main()
