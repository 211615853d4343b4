from __future__ import annotations

from typing import Iterable

from resume_ats.schemas.resume import ResumeDocument
from resume_ats.taxonomy import KeywordTaxonomy, get_default_taxonomy

from .text import contains_any, flatten_resume_text
from .types import SubScore, ats_value, empty_factors

FACTORS = ("languages", "frameworks", "tools", "methodologies", "bonuses")

_AI_ML_MARKERS = ("machine learning", "ai", "tensorflow", "pytorch")
_SYSTEM_DESIGN_MARKERS = ("system design", "architecture", "microservices")


def _score_category(
    blob: str,
    keywords: Iterable[str],
    *,
    category: str,
    default_points: float,
    default_cap: float,
) -> tuple[float, list[str]]:
    points = ats_value(f"technical_skills.points.{category}", default_points)
    cap = ats_value(f"technical_skills.caps.{category}", default_cap)
    matched = [keyword for keyword in keywords if keyword in blob]
    return min(points * len(matched), cap), matched


def score_technical_skills(
    document: ResumeDocument,
    *,
    taxonomy: KeywordTaxonomy | None = None,
    blob: str | None = None,
) -> SubScore:
    taxonomy = taxonomy or get_default_taxonomy()
    if blob is None:
        blob = flatten_resume_text(document)
    factors = empty_factors(*FACTORS)
    keywords: list[str] = []

    categories = (
        ("languages", taxonomy.core_languages, 2, 20),
        ("frameworks", taxonomy.all_frameworks(), 1.5, 12),
        ("tools", taxonomy.all_tools(), 1, 10),
        ("methodologies", taxonomy.methodologies, 1, 8),
    )
    score = 0.0
    for category, category_keywords, points, cap in categories:
        category_score, matched = _score_category(
            blob,
            category_keywords,
            category=category,
            default_points=points,
            default_cap=cap,
        )
        factors[category].score = category_score
        factors[category].details.extend(matched)
        keywords.extend(matched)
        score += category_score

    bonuses = factors["bonuses"]
    min_frameworks = ats_value("technical_skills.bonuses.full_stack_min_frameworks", 8)
    min_languages = ats_value("technical_skills.bonuses.full_stack_min_languages", 15)
    if factors["frameworks"].score >= min_frameworks and factors["languages"].score >= min_languages:
        bonuses.score += ats_value("technical_skills.bonuses.full_stack", 15)
        bonuses.details.append("Full-Stack Proficiency")

    if factors["tools"].score >= ats_value("technical_skills.bonuses.cloud_devops_min_tools", 6):
        bonuses.score += ats_value("technical_skills.bonuses.cloud_devops", 20)
        bonuses.details.append("Cloud & DevOps Skills")

    if contains_any(blob, _AI_ML_MARKERS):
        bonuses.score += ats_value("technical_skills.bonuses.ai_ml", 25)
        bonuses.details.append("AI/ML Skills (2025 Trend)")

    if contains_any(blob, _SYSTEM_DESIGN_MARKERS):
        bonuses.score += ats_value("technical_skills.bonuses.system_design", 10)
        bonuses.details.append("System Design Experience")

    score += bonuses.score

    missing: list[str] = []
    for keyword in (*taxonomy.trending_languages, *taxonomy.trending_frameworks):
        if keyword not in blob and keyword not in missing:
            missing.append(keyword)

    return SubScore(score=min(score, 100), factors=factors, keywords=keywords, missing=missing)
