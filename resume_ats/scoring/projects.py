from __future__ import annotations

from typing import Callable

from resume_ats.schemas.resume import ResumeDocument

from .text import contains_any
from .types import SubScore, ats_value, empty_factors

FACTORS = ("complexity", "portfolio", "documentation")


def _is_full_stack(text: str) -> bool:
    return "full-stack" in text or ("frontend" in text and "backend" in text)


# (evidence label, points, predicate on the lowercased description)
COMPLEXITY_TOPICS: tuple[tuple[str, float, Callable[[str], bool]], ...] = (
    ("System Architecture", 3, lambda text: contains_any(text, ("microservices", "distributed"))),
    ("Data Engineering", 4, lambda text: contains_any(text, ("machine learning", "data pipeline"))),
    ("Mobile Development", 2, lambda text: contains_any(text, ("mobile", "ios", "android"))),
    ("Full-Stack Web", 2, _is_full_stack),
    ("DevOps/Infrastructure", 3, lambda text: contains_any(text, ("ci/cd", "devops", "kubernetes"))),
)


def score_projects(document: ResumeDocument) -> SubScore:
    factors = empty_factors(*FACTORS)
    projects = document.projects
    if not projects:
        return SubScore(score=0, factors=factors)

    complexity = 0.0
    for project in projects:
        description = project.description.lower()
        for label, points, matches in COMPLEXITY_TOPICS:
            if matches(description):
                complexity += points
                factors["complexity"].details.append(label)
    factors["complexity"].score = min(complexity, ats_value("projects.complexity_cap", 30))

    link_points = ats_value("projects.link_points", 5)
    portfolio = 0.0
    for project in projects:
        if project.github:
            portfolio += link_points
            factors["portfolio"].details.append(project.github)
        if project.demo:
            portfolio += link_points
            factors["portfolio"].details.append(project.demo)
    factors["portfolio"].score = min(portfolio, ats_value("projects.portfolio_cap", 40))

    min_chars = ats_value("projects.documentation_min_chars", 100)
    doc_points = ats_value("projects.documentation_points", 5)
    documentation = 0.0
    for project in projects:
        if len(project.description) > min_chars:
            documentation += doc_points
            factors["documentation"].details.append(project.name)
    factors["documentation"].score = min(documentation, ats_value("projects.documentation_cap", 30))

    score = sum(factor.score for factor in factors.values())
    return SubScore(score=min(score, 100), factors=factors)
