from __future__ import annotations

from dataclasses import dataclass, field

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.schemas.score import FactorDetail


@dataclass
class SubScore:
    """Result of one sub-scorer: its score, factor breakdown and keyword evidence."""

    score: float
    factors: dict[str, FactorDetail]
    keywords: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def empty_factors(*names: str) -> dict[str, FactorDetail]:
    return {name: FactorDetail() for name in names}


def ats_value(path: str, default: float) -> float:
    return float(get_scoring_value(f"ats.{path}", default))
