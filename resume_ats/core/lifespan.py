from contextlib import asynccontextmanager
import logging

from resume_ats.core.config.scoring import get_scoring_config
from resume_ats.taxonomy import get_default_taxonomy

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_scoring_config()
    taxonomy = get_default_taxonomy()
    logger.info(
        "ats_taxonomy_loaded languages=%s frameworks=%s tools=%s methodologies=%s",
        len(taxonomy.core_languages),
        len(taxonomy.all_frameworks()),
        len(taxonomy.all_tools()),
        len(taxonomy.methodologies),
    )
    yield
