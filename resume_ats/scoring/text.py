from __future__ import annotations

from datetime import datetime
from typing import Any

from resume_ats.schemas.resume import ResumeDocument

_SKIPPED_KEYS = {"id"}
_DATE_FORMATS = ("%Y-%m", "%Y-%m-%d", "%Y")


def _collect_strings(value: Any, out: list[str]) -> None:
    if isinstance(value, str):
        if value:
            out.append(value)
    elif isinstance(value, dict):
        for key, item in value.items():
            if key in _SKIPPED_KEYS:
                continue
            _collect_strings(item, out)
    elif isinstance(value, list):
        for item in value:
            _collect_strings(item, out)


def flatten_resume_text(document: ResumeDocument) -> str:
    """Lowercase blob of every text value in the document, used for substring matching.

    Field names and ids are left out so they cannot produce keyword hits.
    """
    chunks: list[str] = []
    _collect_strings(document.model_dump(), chunks)
    return "\n".join(chunks).lower()


def parse_year(raw: str) -> int | None:
    text = (raw or "").strip()
    if not text:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).year
        except ValueError:
            continue
    return None


def contains_any(text: str, needles) -> bool:
    return any(needle in text for needle in needles)
