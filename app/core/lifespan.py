from contextlib import asynccontextmanager
import logging

from app.core.config.scoring import scoring_config_path
from app.features.suggestions import load_suggestion_rules
from app.taxonomy import get_default_skill_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Load the read-only catalog and rule table once, before serving.
    catalog = get_default_skill_catalog()
    rules = load_suggestion_rules()
    logger.info(
        "startup_ready catalog_skills=%d suggestion_rules=%d scoring_config=%s",
        len(catalog.names),
        len(rules),
        scoring_config_path(),
    )
    yield
    logger.info("shutdown_complete")
