from __future__ import annotations

from resume_ats.schemas.resume import ResumeDocument
from resume_ats.taxonomy import KeywordTaxonomy, get_default_taxonomy

from .text import parse_year
from .types import SubScore, ats_value, empty_factors

FACTORS = ("years", "title", "company", "progression", "bonuses")

TECH_TITLES = ("engineer", "developer", "architect", "lead", "manager", "consultant")

# (minimum years, score), checked top-down
_YEARS_BANDS = ((5, 10), (3, 8), (1, 6))
_YEARS_FLOOR = 4


def total_years(document: ResumeDocument) -> int:
    """Sum of end-year minus start-year over finished roles with both dates parseable."""
    years = 0
    for exp in document.experiences:
        if exp.current or not exp.start_date or not exp.end_date:
            continue
        start = parse_year(exp.start_date)
        end = parse_year(exp.end_date)
        if start is None or end is None:
            continue
        years += end - start
    return years


def years_score(years: int) -> int:
    for minimum, score in _YEARS_BANDS:
        if years >= minimum:
            return score
    return _YEARS_FLOOR


def score_experience(
    document: ResumeDocument,
    *,
    taxonomy: KeywordTaxonomy | None = None,
) -> SubScore:
    factors = empty_factors(*FACTORS)
    experiences = document.experiences
    if not experiences:
        return SubScore(score=0, factors=factors)
    taxonomy = taxonomy or get_default_taxonomy()
    keywords: list[str] = []

    factors["years"].score = years_score(total_years(document))

    title_points = ats_value("experience.title_points", 2)
    title_score = 0.0
    for exp in experiences:
        if not exp.title:
            continue
        title = exp.title.lower()
        for tech_title in TECH_TITLES:
            if tech_title in title:
                title_score += title_points
                factors["title"].details.append(exp.title)
                keywords.append(exp.title)
    factors["title"].score = min(title_score, ats_value("experience.title_cap", 10))

    company_points = ats_value("experience.company_points", 3)
    company_score = 0.0
    tier_companies = taxonomy.all_companies()
    for exp in experiences:
        if not exp.company:
            continue
        company = exp.company.lower()
        for tier_company in tier_companies:
            if tier_company in company:
                company_score += company_points
                factors["company"].details.append(exp.company)
    factors["company"].score = min(company_score, ats_value("experience.company_cap", 7))

    if len(experiences) >= 2:
        factors["progression"].score = ats_value("experience.progression_multi", 5)
        factors["progression"].details.append("Multiple positions showing career growth")
    else:
        factors["progression"].score = ats_value("experience.progression_single", 3)

    bonuses = factors["bonuses"]
    if any("startup" in exp.company.lower() for exp in experiences):
        bonuses.score += ats_value("experience.startup_bonus", 5)
        bonuses.details.append("Startup Experience")
    if any(project.github for project in document.projects):
        bonuses.score += ats_value("experience.open_source_bonus", 5)
        bonuses.details.append("Open Source Contributions")

    score = sum(factor.score for factor in factors.values())
    return SubScore(score=min(score, 100), factors=factors, keywords=keywords)
