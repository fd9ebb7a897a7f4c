from functools import lru_cache

from .local_catalog import LocalSkillCatalog
from .provider import SkillCatalogProvider


@lru_cache(maxsize=1)
def get_default_skill_catalog() -> SkillCatalogProvider:
    return LocalSkillCatalog()


__all__ = ["SkillCatalogProvider", "LocalSkillCatalog", "get_default_skill_catalog"]
