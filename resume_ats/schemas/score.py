from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FactorDetail(_ReportModel):
    score: float = 0
    details: list[str] = Field(default_factory=list)


class ScoreBreakdown(_ReportModel):
    technical_skills: float = Field(default=0.0, ge=0.0, le=100.0)
    experience: float = Field(default=0.0, ge=0.0, le=100.0)
    achievements: float = Field(default=0.0, ge=0.0, le=100.0)
    projects: float = Field(default=0.0, ge=0.0, le=100.0)
    education: float = Field(default=0.0, ge=0.0, le=100.0)
    format: float = Field(default=0.0, ge=0.0, le=100.0)


class ScoreDetails(_ReportModel):
    technical_skills: dict[str, FactorDetail] = Field(default_factory=dict)
    experience: dict[str, FactorDetail] = Field(default_factory=dict)
    achievements: dict[str, FactorDetail] = Field(default_factory=dict)
    projects: dict[str, FactorDetail] = Field(default_factory=dict)
    education: dict[str, FactorDetail] = Field(default_factory=dict)
    format: dict[str, FactorDetail] = Field(default_factory=dict)


class ScoreReport(_ReportModel):
    overall: int = Field(ge=0)
    rating: str
    breakdown: ScoreBreakdown
    details: ScoreDetails
    suggestions: list[str] = Field(default_factory=list)
    keyword_matches: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
