from functools import lru_cache

from resume_ats.core.config import settings

from .keywords import CertificationGroup, KeywordTaxonomy
from .local_taxonomy import LocalTaxonomy
from .provider import TaxonomyProvider


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    return LocalTaxonomy(settings.taxonomy_path)


def get_default_taxonomy() -> KeywordTaxonomy:
    return get_default_taxonomy_provider().load()


__all__ = [
    "CertificationGroup",
    "KeywordTaxonomy",
    "TaxonomyProvider",
    "LocalTaxonomy",
    "get_default_taxonomy",
    "get_default_taxonomy_provider",
]
