from __future__ import annotations

import json
from pathlib import Path

from .keywords import KeywordTaxonomy
from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, keywords_path: str | Path | None = None) -> None:
        self._path = Path(keywords_path) if keywords_path else Path(__file__).with_name("keywords.json")
        self._taxonomy: KeywordTaxonomy | None = None

    @staticmethod
    def _read_keywords(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except OSError as exc:
            raise RuntimeError(f"Failed to read keyword taxonomy '{path}': {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"Invalid JSON in keyword taxonomy '{path}': {exc}") from exc
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid keyword taxonomy '{path}': expected a top-level object.")
        return raw

    def load(self) -> KeywordTaxonomy:
        if self._taxonomy is None:
            self._taxonomy = KeywordTaxonomy.from_dict(self._read_keywords(self._path))
        return self._taxonomy
