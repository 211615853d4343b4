from .achievements import score_achievements
from .education import score_education
from .engine import DEFAULT_WEIGHTS, calculate_ats_score, get_weights, rating_for
from .experience import score_experience
from .formatting import score_format
from .projects import score_projects
from .suggestions import generate_suggestions
from .technical import score_technical_skills
from .text import flatten_resume_text
from .types import SubScore

__all__ = [
    "DEFAULT_WEIGHTS",
    "SubScore",
    "calculate_ats_score",
    "flatten_resume_text",
    "generate_suggestions",
    "get_weights",
    "rating_for",
    "score_achievements",
    "score_education",
    "score_experience",
    "score_format",
    "score_projects",
    "score_technical_skills",
]
