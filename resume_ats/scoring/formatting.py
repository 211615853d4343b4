from __future__ import annotations

from resume_ats.schemas.resume import ResumeDocument

from .text import contains_any
from .types import SubScore, ats_value, empty_factors

FACTORS = ("structure", "headers", "contact")

STANDARD_HEADERS = ("personal", "summary", "experience", "education", "skills", "projects")

# (contact field, label, default points)
CONTACT_FIELDS = (
    ("email", "Email", 10),
    ("phone", "Phone", 5),
    ("linkedin", "LinkedIn", 5),
    ("github", "GitHub", 5),
)


def score_format(document: ResumeDocument) -> SubScore:
    factors = empty_factors(*FACTORS)
    sections = document.sections

    structure = factors["structure"]
    if len(sections) >= ats_value("format.min_sections", 6):
        structure.score = ats_value("format.structure_complete", 25)
        structure.details.append("Complete section structure")
    else:
        structure.score = ats_value("format.structure_partial", 15)

    header_points = ats_value("format.header_points", 4)
    headers = factors["headers"]
    header_score = 0.0
    for section in sections:
        if contains_any(section.title.lower(), STANDARD_HEADERS):
            header_score += header_points
            headers.details.append(section.title)
    headers.score = min(header_score, ats_value("format.header_cap", 25))

    contact = factors["contact"]
    for field_name, label, points in CONTACT_FIELDS:
        if getattr(document.contact, field_name):
            contact.score += ats_value(f"format.contact.{field_name}", points)
            contact.details.append(label)

    score = structure.score + headers.score + contact.score
    return SubScore(score=min(score, 100), factors=factors)
