from __future__ import annotations

from typing import Protocol

from .keywords import KeywordTaxonomy


class TaxonomyProvider(Protocol):
    def load(self) -> KeywordTaxonomy:
        """Return the keyword taxonomy used by the scorers."""
