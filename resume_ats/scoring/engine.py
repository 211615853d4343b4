from __future__ import annotations

import logging
from typing import Any, Mapping

from resume_ats.schemas.resume import ResumeDocument, normalize_resume_document
from resume_ats.schemas.score import ScoreBreakdown, ScoreDetails, ScoreReport
from resume_ats.taxonomy import KeywordTaxonomy, get_default_taxonomy

from .achievements import score_achievements
from .education import score_education
from .experience import score_experience
from .formatting import score_format
from .projects import score_projects
from .suggestions import generate_suggestions
from .technical import score_technical_skills
from .text import flatten_resume_text
from .types import SubScore, ats_value

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: dict[str, float] = {
    "technical_skills": 0.45,
    "experience": 0.275,
    "achievements": 0.175,
    "projects": 0.125,
    "education": 0.10,
    "format": 0.075,
}

_RATING_BANDS = (
    ("excellent", 80, "Excellent"),
    ("good", 60, "Good"),
    ("fair", 40, "Fair"),
)


def get_weights() -> dict[str, float]:
    return {name: ats_value(f"weights.{name}", default) for name, default in DEFAULT_WEIGHTS.items()}


def rating_for(overall: float) -> str:
    for key, default, label in _RATING_BANDS:
        if overall >= ats_value(f"rating.{key}", default):
            return label
    return "Needs Improvement"


def calculate_ats_score(
    document: ResumeDocument | Mapping[str, Any] | None,
    *,
    taxonomy: KeywordTaxonomy | None = None,
    weights: Mapping[str, float] | None = None,
) -> ScoreReport:
    """Score a resume document for ATS compatibility.

    The weighted total is rounded but not clamped; with the default weights
    (sum 1.225) a strong resume can score above 100. ``weights`` overrides
    individual configured weights; names it leaves out keep their default.
    """
    resume = normalize_resume_document(document)
    taxonomy = taxonomy or get_default_taxonomy()
    weights = {**get_weights(), **(weights or {})}
    blob = flatten_resume_text(resume)

    results: dict[str, SubScore] = {
        "technical_skills": score_technical_skills(resume, taxonomy=taxonomy, blob=blob),
        "experience": score_experience(resume, taxonomy=taxonomy),
        "achievements": score_achievements(resume),
        "projects": score_projects(resume),
        "education": score_education(resume, taxonomy=taxonomy, blob=blob),
        "format": score_format(resume),
    }

    total = sum(result.score * weights.get(name, 0.0) for name, result in results.items())
    breakdown = ScoreBreakdown(**{name: result.score for name, result in results.items()})
    details = ScoreDetails(**{name: result.factors for name, result in results.items()})

    keyword_matches: list[str] = []
    missing_keywords: list[str] = []
    for result in results.values():
        keyword_matches.extend(result.keywords)
        missing_keywords.extend(result.missing)

    overall = round(total)
    report = ScoreReport(
        overall=overall,
        rating=rating_for(overall),
        breakdown=breakdown,
        details=details,
        suggestions=generate_suggestions(total, breakdown),
        keyword_matches=keyword_matches,
        missing_keywords=missing_keywords,
    )
    logger.info(
        "ats_score_computed overall=%s technical=%.1f experience=%.1f achievements=%.1f "
        "projects=%.1f education=%.1f format=%.1f keywords=%s",
        overall,
        breakdown.technical_skills,
        breakdown.experience,
        breakdown.achievements,
        breakdown.projects,
        breakdown.education,
        breakdown.format,
        len(keyword_matches),
    )
    return report
