from __future__ import annotations

import uuid
from typing import Callable

from app.schemas.skills import ProficiencyLevel, UserSkill
from app.taxonomy import SkillCatalogProvider, get_default_skill_catalog

from .scanner import estimate_years, scan

MIN_DETECTED_SKILLS = 5
INFERRED_YEARS = 2

TITLE_SKILL_MAP: dict[str, tuple[str, ...]] = {
    "frontend developer": ("HTML", "CSS", "JavaScript", "React"),
    "backend developer": ("Node.js", "Express", "SQL", "REST API"),
    "full stack": ("JavaScript", "HTML", "CSS", "Node.js", "SQL"),
    "ui/ux designer": ("UI/UX Design", "Figma", "User Research", "Wireframing"),
    "data scientist": ("Python", "Machine Learning", "Statistical Analysis", "Data Mining"),
    "devops engineer": ("Docker", "Kubernetes", "CI/CD", "AWS"),
    "mobile developer": ("iOS", "Android", "React Native", "Swift"),
    "product manager": ("Product Management", "Agile", "User Research", "Wireframing"),
}


def _new_id() -> str:
    return str(uuid.uuid4())


def proficiency_level(
    lowered_text: str,
    skill: str,
    years: int,
    context_count: int,
) -> ProficiencyLevel:
    skill_key = skill.lower()
    if years > 7 or f"expert {skill_key}" in lowered_text:
        return "expert"
    if years > 4 or f"advanced {skill_key}" in lowered_text:
        return "advanced"
    if years > 1 or context_count > 1:
        return "intermediate"
    return "beginner"


def infer_skills_from_titles(
    text: str,
    *,
    id_factory: Callable[[], str] | None = None,
) -> list[UserSkill]:
    make_id = id_factory or _new_id
    lowered = (text or "").lower()
    inferred: list[UserSkill] = []
    for title, skills in TITLE_SKILL_MAP.items():
        if title not in lowered:
            continue
        for name in skills:
            inferred.append(
                UserSkill(
                    id=make_id(),
                    name=name,
                    years_of_experience=INFERRED_YEARS,
                    level="intermediate",
                )
            )
    return inferred


def infer_user_skills(
    text: str,
    *,
    catalog: SkillCatalogProvider | None = None,
    id_factory: Callable[[], str] | None = None,
) -> list[UserSkill]:
    """Derive a user skill list from CV text.

    Every catalog skill mentioned literally or in context becomes a skill with
    estimated years and a proficiency level. When fewer than five skills are
    found, job titles in the text contribute their usual skill sets.
    """
    catalog = catalog or get_default_skill_catalog()
    make_id = id_factory or _new_id
    lowered = (text or "").lower()

    extracted: list[UserSkill] = []
    for name in catalog.names:
        mention = scan(text, name)
        if not mention.found:
            continue
        years = estimate_years(text, name, context_count=mention.context_count)
        extracted.append(
            UserSkill(
                id=make_id(),
                name=name,
                years_of_experience=years,
                level=proficiency_level(lowered, name, years, mention.context_count),
            )
        )

    if len(extracted) < MIN_DETECTED_SKILLS:
        known = {skill.name.lower() for skill in extracted}
        for skill in infer_skills_from_titles(text, id_factory=make_id):
            if skill.name.lower() in known:
                continue
            known.add(skill.name.lower())
            extracted.append(skill)

    return extracted
