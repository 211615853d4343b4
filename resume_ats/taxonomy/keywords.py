from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _freeze_groups(groups: Mapping[str, tuple[str, ...]] | None) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({name: tuple(values) for name, values in (groups or {}).items()})


@dataclass(frozen=True)
class CertificationGroup:
    weight: float
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class KeywordTaxonomy:
    """Read-only keyword reference data shared by every sub-scorer.

    Groups are kept in declaration order; scorers iterate them rather than
    hardcoding keywords, so extending the taxonomy never touches scorer code.
    """

    core_languages: tuple[str, ...] = ()
    trending_languages: tuple[str, ...] = ()
    frameworks: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    tools: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    methodologies: tuple[str, ...] = ()
    company_tiers: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    top_tier_institutions: tuple[str, ...] = ()
    certifications: Mapping[str, CertificationGroup] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "frameworks", _freeze_groups(self.frameworks))
        object.__setattr__(self, "tools", _freeze_groups(self.tools))
        object.__setattr__(self, "company_tiers", _freeze_groups(self.company_tiers))
        object.__setattr__(self, "certifications", MappingProxyType(dict(self.certifications)))

    @property
    def trending_frameworks(self) -> tuple[str, ...]:
        return self.frameworks.get("trending", ())

    def all_frameworks(self) -> list[str]:
        return [keyword for group in self.frameworks.values() for keyword in group]

    def all_tools(self) -> list[str]:
        return [keyword for group in self.tools.values() for keyword in group]

    def all_companies(self) -> list[str]:
        return [keyword for group in self.company_tiers.values() for keyword in group]

    @classmethod
    def from_dict(cls, raw: Mapping) -> "KeywordTaxonomy":
        languages = raw.get("languages") or {}
        education = raw.get("education") or {}
        certifications = {
            str(name): CertificationGroup(
                weight=float(group.get("weight", 0)),
                keywords=_lower_all(group.get("keywords")),
            )
            for name, group in (education.get("certifications") or {}).items()
        }
        return cls(
            core_languages=_lower_all(languages.get("core")),
            trending_languages=_lower_all(languages.get("trending")),
            frameworks=_lower_groups(raw.get("frameworks")),
            tools=_lower_groups(raw.get("tools")),
            methodologies=_lower_all(raw.get("methodologies")),
            company_tiers=_lower_groups(raw.get("company_tiers")),
            top_tier_institutions=_lower_all(education.get("top_tier")),
            certifications=certifications,
        )


def _lower_all(values) -> tuple[str, ...]:
    return tuple(str(value).strip().lower() for value in (values or []) if str(value).strip())


def _lower_groups(groups) -> dict[str, tuple[str, ...]]:
    return {str(name): _lower_all(values) for name, values in (groups or {}).items()}
