from .resume import (
    Achievement,
    ContactInfo,
    Education,
    Experience,
    Project,
    ResumeDocument,
    ResumeSection,
    Skills,
    Summary,
    normalize_resume_document,
)
from .score import FactorDetail, ScoreBreakdown, ScoreDetails, ScoreReport

__all__ = [
    "Achievement",
    "ContactInfo",
    "Education",
    "Experience",
    "Project",
    "ResumeDocument",
    "ResumeSection",
    "Skills",
    "Summary",
    "normalize_resume_document",
    "FactorDetail",
    "ScoreBreakdown",
    "ScoreDetails",
    "ScoreReport",
]
