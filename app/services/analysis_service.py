from __future__ import annotations

import asyncio
import logging

from app.core.config import settings
from app.core.config.scoring import get_scoring_value
from app.features.content_quality import assess_content_quality
from app.features.scanner import SkillMention, estimate_years, scan
from app.features.skill_scorer import clamp_score, round_half_up, score_skill, strength_for
from app.features.suggestions import select_suggestions
from app.schemas.analysis import AnalysisResult, SkillAssessment
from app.taxonomy import SkillCatalogProvider, get_default_skill_catalog

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Empty CV text. Please paste your CV text before analyzing."


class EmptyInputError(ValueError):
    status_code = 400

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


def validate_input_text(text: str | None) -> str:
    if text is None or not text.strip():
        raise EmptyInputError()
    return text


def rank_mentions(text: str, catalog: SkillCatalogProvider) -> list[SkillMention]:
    """Scan every catalog skill and keep the strongest ones, ties in catalog order."""
    top_n = int(get_scoring_value("analysis.top_skills", 8))
    found = [mention for mention in (scan(text, name) for name in catalog.names) if mention.found]
    ranked = sorted(found, key=lambda mention: mention.total, reverse=True)
    return ranked[:top_n]


def assess_skill(text: str, mention: SkillMention) -> SkillAssessment:
    score = score_skill(mention.mention_count, mention.context_count, len(text))
    return SkillAssessment(
        name=mention.skill,
        strength=strength_for(score),
        score=score,
        years_of_experience=estimate_years(text, mention.skill, context_count=mention.context_count),
    )


def overall_score(skills: list[SkillAssessment], content_quality: int) -> int:
    skill_weight = float(get_scoring_value("analysis.skill_weight", 0.6))
    content_weight = float(get_scoring_value("analysis.content_weight", 0.4))
    skill_average = sum(skill.score for skill in skills) / len(skills) if skills else 0.0
    return clamp_score(round_half_up(skill_average * skill_weight + content_quality * content_weight))


def analyze_text(text: str, *, catalog: SkillCatalogProvider | None = None) -> AnalysisResult:
    """Score *text* synchronously. Total over any string, including empty."""
    text = text or ""
    catalog = catalog or get_default_skill_catalog()

    skills = [assess_skill(text, mention) for mention in rank_mentions(text, catalog)]
    content_quality = assess_content_quality(text)
    partial = AnalysisResult(
        overall_score=overall_score(skills, content_quality),
        content_quality=content_quality,
        skills=skills,
        suggestions=[],
    )
    return partial.model_copy(update={"suggestions": select_suggestions(partial)})


async def analyze(
    text: str,
    *,
    delay_seconds: float | None = None,
    catalog: SkillCatalogProvider | None = None,
) -> AnalysisResult:
    validate_input_text(text)
    delay = settings.analysis_delay_ms / 1000 if delay_seconds is None else max(0.0, delay_seconds)
    if delay:
        await asyncio.sleep(delay)
    result = analyze_text(text, catalog=catalog)
    logger.info(
        "analysis_complete chars=%d skills=%d overall=%d quality=%d",
        len(text),
        len(result.skills),
        result.overall_score,
        result.content_quality,
    )
    return result
