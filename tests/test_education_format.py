import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas import normalize_resume_document  # noqa: E402
from resume_ats.scoring import score_education, score_format  # noqa: E402
from resume_ats.taxonomy import CertificationGroup, KeywordTaxonomy  # noqa: E402

STANDARD_SECTIONS = [
    {"id": "personal", "title": "Personal Information", "order": 1, "visible": True},
    {"id": "summary", "title": "Professional Summary", "order": 2, "visible": True},
    {"id": "experience", "title": "Professional Experience", "order": 3, "visible": True},
    {"id": "skills", "title": "Technical Skills", "order": 4, "visible": True},
    {"id": "achievements", "title": "Key Achievements", "order": 5, "visible": True},
    {"id": "education", "title": "Education", "order": 6, "visible": True},
    {"id": "projects", "title": "Projects", "order": 7, "visible": True},
    {"id": "organize", "title": "Organize Sections", "order": 8, "visible": True},
]


class EducationScoringTests(unittest.TestCase):
    def test_no_education_scores_zero(self):
        document = normalize_resume_document({"summary": {"content": "aws solutions architect"}})
        self.assertEqual(score_education(document).score, 0)

    def test_bachelor_degree(self):
        document = normalize_resume_document(
            {"education": [{"degree": "Bachelor of Arts", "institution": "State College"}]}
        )
        result = score_education(document)
        self.assertEqual(result.factors["degree"].score, 15)
        self.assertEqual(result.factors["degree"].details, ["Bachelor's Degree"])
        self.assertEqual(result.score, 15)

    def test_last_matching_degree_wins(self):
        document = normalize_resume_document(
            {
                "education": [
                    {"degree": "Master of Science"},
                    {"degree": "B.S. Computer Science"},
                    {"degree": "High School Diploma"},
                ]
            }
        )
        result = score_education(document)
        self.assertEqual(result.factors["degree"].score, 20)
        self.assertEqual(result.factors["degree"].details, ["Advanced Degree", "CS/Engineering Degree"])

    def test_engineering_takes_priority_within_an_entry(self):
        document = normalize_resume_document({"education": [{"degree": "Master of Engineering"}]})
        self.assertEqual(score_education(document).factors["degree"].score, 20)

    def test_single_university_bonus(self):
        document = normalize_resume_document(
            {"education": [{"institution": "Stanford University"}, {"institution": "Harvard University"}]}
        )
        result = score_education(document)
        self.assertEqual(result.factors["university"].score, 15)
        self.assertEqual(result.factors["university"].details, ["Top-Tier University"])

    def test_certifications_scan_whole_document(self):
        document = normalize_resume_document(
            {
                "summary": {"content": "AWS Solutions Architect and CKA holder"},
                "education": [{"degree": "Diploma", "institution": "State College"}],
            }
        )
        result = score_education(document)
        self.assertEqual(result.factors["certifications"].score, 20)
        self.assertEqual(result.factors["certifications"].details, ["aws solutions architect", "cka"])
        self.assertEqual(result.score, 20)

    def test_certification_cap(self):
        document = normalize_resume_document(
            {
                "summary": {"content": "aws solutions architect, google cloud professional, cka, tensorflow"},
                "education": [{"degree": "Diploma"}],
            }
        )
        self.assertEqual(score_education(document).factors["certifications"].score, 40)

    def test_injected_certifications(self):
        taxonomy = KeywordTaxonomy(certifications={"security": CertificationGroup(weight=9, keywords=("cissp",))})
        document = normalize_resume_document(
            {"summary": {"content": "CISSP"}, "education": [{"degree": "Diploma"}]}
        )
        self.assertEqual(score_education(document, taxonomy=taxonomy).score, 9)


class FormatScoringTests(unittest.TestCase):
    def test_no_sections_or_contact(self):
        result = score_format(normalize_resume_document({}))
        self.assertEqual(result.factors["structure"].score, 15)
        self.assertEqual(result.factors["headers"].score, 0)
        self.assertEqual(result.factors["contact"].score, 0)
        self.assertEqual(result.score, 15)

    def test_default_builder_sections(self):
        result = score_format(normalize_resume_document({"sections": STANDARD_SECTIONS}))
        self.assertEqual(result.factors["structure"].score, 25)
        self.assertEqual(result.factors["headers"].score, 24)
        self.assertNotIn("Key Achievements", result.factors["headers"].details)

    def test_header_cap_and_full_contact(self):
        titles = ["Personal", "Summary", "Experience", "Education", "Skills", "Projects", "Work Experience", "Core Skills"]
        document = normalize_resume_document(
            {
                "sections": [{"id": str(i), "title": title, "order": i} for i, title in enumerate(titles)],
                "contact": {
                    "email": "jane@example.com",
                    "phone": "555-0100",
                    "linkedin": "https://linkedin.com/in/jane",
                    "github": "https://github.com/jane",
                },
            }
        )
        result = score_format(document)
        self.assertEqual(result.factors["structure"].score, 25)
        self.assertEqual(result.factors["headers"].score, 25)
        self.assertEqual(result.factors["contact"].score, 25)
        self.assertEqual(result.factors["contact"].details, ["Email", "Phone", "LinkedIn", "GitHub"])
        self.assertEqual(result.score, 75)

    def test_email_only(self):
        document = normalize_resume_document({"contact": {"email": "jane@example.com"}})
        self.assertEqual(score_format(document).factors["contact"].score, 10)


if __name__ == "__main__":
    unittest.main()
