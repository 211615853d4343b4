from __future__ import annotations

from resume_ats.schemas.resume import ResumeDocument
from resume_ats.taxonomy import KeywordTaxonomy, get_default_taxonomy

from .text import contains_any, flatten_resume_text
from .types import SubScore, ats_value, empty_factors

FACTORS = ("degree", "university", "certifications")

# Checked in order per entry; the first matching rule applies to that entry.
DEGREE_RULES: tuple[tuple[tuple[str, ...], float, str], ...] = (
    (("computer science", "engineering"), 20, "CS/Engineering Degree"),
    (("bachelor",), 15, "Bachelor's Degree"),
    (("master", "phd"), 25, "Advanced Degree"),
)


def score_education(
    document: ResumeDocument,
    *,
    taxonomy: KeywordTaxonomy | None = None,
    blob: str | None = None,
) -> SubScore:
    factors = empty_factors(*FACTORS)
    education = document.education
    if not education:
        return SubScore(score=0, factors=factors)
    taxonomy = taxonomy or get_default_taxonomy()

    # Each matching entry overwrites the degree score, so the last match wins.
    degree = factors["degree"]
    for entry in education:
        if not entry.degree:
            continue
        text = entry.degree.lower()
        for markers, points, label in DEGREE_RULES:
            if contains_any(text, markers):
                degree.score = points
                degree.details.append(label)
                break

    university = factors["university"]
    for entry in education:
        institution = entry.institution.lower()
        if institution and contains_any(institution, taxonomy.top_tier_institutions):
            university.score = ats_value("education.university_points", 15)
            university.details.append("Top-Tier University")
            break

    if blob is None:
        blob = flatten_resume_text(document)
    certifications = factors["certifications"]
    certification_score = 0.0
    for group in taxonomy.certifications.values():
        for cert in group.keywords:
            if cert in blob:
                certification_score += group.weight
                certifications.details.append(cert)
    certifications.score = min(certification_score, ats_value("education.certification_cap", 40))

    score = degree.score + university.score + certifications.score
    return SubScore(score=min(score, 100), factors=factors)
