from __future__ import annotations

from resume_ats.schemas.resume import ResumeDocument

from .text import contains_any
from .types import SubScore, ats_value, empty_factors

# One match per achievement per category; a single achievement may land in several.
ACHIEVEMENT_SIGNALS: dict[str, tuple[str, ...]] = {
    "metrics": ("%", "improved", "reduced", "increased"),
    "scale": ("million", "100k", "1m+", "users"),
    "quality": ("test coverage", "quality", "performance"),
    "leadership": ("team", "led", "managed"),
    "business": ("revenue", "business", "cost"),
}


def score_achievements(document: ResumeDocument) -> SubScore:
    factors = empty_factors(*ACHIEVEMENT_SIGNALS)
    achievements = document.achievements
    if not achievements:
        return SubScore(score=0, factors=factors)

    points = ats_value("achievements.points_per_match", 4)
    cap = ats_value("achievements.category_cap", 20)
    for category, signals in ACHIEVEMENT_SIGNALS.items():
        category_score = 0.0
        for achievement in achievements:
            if contains_any(achievement.description.lower(), signals):
                category_score += points
                factors[category].details.append(achievement.title)
        factors[category].score = min(category_score, cap)

    score = sum(factor.score for factor in factors.values())
    return SubScore(score=min(score, 100), factors=factors)
