from __future__ import annotations

from resume_ats.schemas.score import ScoreBreakdown

from .types import ats_value

OVERALL_SUGGESTIONS = (
    "Focus on adding more technical keywords and skills",
    "Include quantifiable achievements with metrics",
    "Add more detailed project descriptions",
)

# Breakdown order; every category below threshold contributes its tips.
CATEGORY_SUGGESTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "technical_skills",
        (
            "Expand your technical skills section with more programming languages",
            "Include trending technologies like AI/ML, cloud platforms",
        ),
    ),
    (
        "experience",
        (
            "Highlight career progression and increasing responsibilities",
            "Emphasize experience with well-known tech companies",
        ),
    ),
    (
        "achievements",
        (
            "Add more quantifiable achievements with specific metrics",
            "Include business impact and scale metrics",
        ),
    ),
    (
        "projects",
        (
            "Add more complex projects with system architecture details",
            "Include live demos and GitHub links for projects",
        ),
    ),
    (
        "education",
        (
            "Consider adding relevant certifications (AWS, GCP, Kubernetes)",
            "Highlight any AI/ML coursework or certifications",
        ),
    ),
    (
        "format",
        (
            "Ensure all standard resume sections are present",
            "Add professional contact information and LinkedIn/GitHub links",
        ),
    ),
)


def generate_suggestions(overall: float, breakdown: ScoreBreakdown) -> list[str]:
    overall_threshold = ats_value("suggestions.overall_threshold", 70)
    category_threshold = ats_value("suggestions.category_threshold", 60)

    suggestions: list[str] = []
    if overall < overall_threshold:
        suggestions.extend(OVERALL_SUGGESTIONS)
    for category, tips in CATEGORY_SUGGESTIONS:
        if getattr(breakdown, category) < category_threshold:
            suggestions.extend(tips)
    return suggestions
