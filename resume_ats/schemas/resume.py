from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel, to_snake

logger = logging.getLogger(__name__)

_MAX_REPAIR_PASSES = 5


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null fields fall back to their defaults; null list items are skipped
        if not isinstance(data, Mapping):
            return data
        cleaned: dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            cleaned[key] = value
        return cleaned


class ContactInfo(_ResumeModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""


class Summary(_ResumeModel):
    content: str = ""


class Skills(_ResumeModel):
    languages: str = ""
    frameworks: str = ""
    databases: str = ""
    cloud: str = ""
    tools: str = ""


class Experience(_ResumeModel):
    id: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class Achievement(_ResumeModel):
    id: str = ""
    title: str = ""
    description: str = ""
    date: str = ""
    impact: str = ""


class Education(_ResumeModel):
    id: str = ""
    degree: str = ""
    institution: str = ""
    location: str = ""
    year: str = ""
    gpa: str = ""
    coursework: str = ""


class Project(_ResumeModel):
    id: str = ""
    name: str = ""
    technologies: str = ""
    description: str = ""
    github: str = ""
    demo: str = ""


class ResumeSection(_ResumeModel):
    id: str = ""
    title: str = ""
    order: int = 0
    visible: bool = True


class ResumeDocument(_ResumeModel):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: Summary = Field(default_factory=Summary)
    skills: Skills = Field(default_factory=Skills)
    experiences: list[Experience] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    sections: list[ResumeSection] = Field(default_factory=list)


def _pop_path(data: Any, loc: tuple) -> bool:
    """Remove the value at ``loc`` from nested dicts/lists; return whether anything was removed."""
    if not loc:
        return False
    parent = data
    for key in loc[:-1]:
        if isinstance(parent, Mapping):
            if key not in parent:
                key = _other_spelling(parent, key)
                if key is None:
                    return False
            parent = parent[key]
        elif isinstance(parent, list) and isinstance(key, int) and 0 <= key < len(parent):
            parent = parent[key]
        else:
            return False
    last = loc[-1]
    if isinstance(parent, dict):
        if last not in parent:
            last = _other_spelling(parent, last)
            if last is None:
                return False
        del parent[last]
        return True
    if isinstance(parent, list) and isinstance(last, int) and 0 <= last < len(parent):
        del parent[last]
        return True
    return False


def _other_spelling(mapping: Mapping, key: Any) -> Any:
    # error locations may name the alias while the input used the field name, or the reverse
    if not isinstance(key, str):
        return None
    for candidate in (to_camel(key), to_snake(key)):
        if candidate in mapping:
            return candidate
    return None


def _as_plain_data(value: Any) -> Any:
    # null list items are skipped here as well so error indices line up with the data
    if isinstance(value, Mapping):
        return {key: _as_plain_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_plain_data(item) for item in value if item is not None]
    return value


def normalize_resume_document(document: ResumeDocument | Mapping[str, Any] | None) -> ResumeDocument:
    """Return a fresh ResumeDocument with every optional collection filled in.

    Accepts an existing model, a raw mapping (camelCase or snake_case keys) or
    None. Values that fail validation are dropped so their defaults apply; a
    list item that is not an object is dropped whole. The input is never
    mutated.
    """
    if document is None:
        return ResumeDocument()
    if isinstance(document, ResumeDocument):
        return document.model_copy(deep=True)
    if not isinstance(document, Mapping):
        logger.warning("resume_document_rejected type=%s", type(document).__name__)
        return ResumeDocument()

    data = _as_plain_data(document)
    for _ in range(_MAX_REPAIR_PASSES):
        try:
            return ResumeDocument.model_validate(data)
        except ValidationError as exc:
            # deepest and highest-index locations first so list positions stay valid
            locs = sorted(
                {tuple(error["loc"]) for error in exc.errors()},
                key=lambda loc: (len(loc), [str(part).zfill(8) for part in loc]),
                reverse=True,
            )
            dropped = [loc for loc in locs if _pop_path(data, loc)]
            logger.warning(
                "resume_document_fields_dropped count=%s fields=%s",
                len(dropped),
                [".".join(str(part) for part in loc) for loc in dropped],
            )
            if not dropped:
                break
    return ResumeDocument()
