from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

# Each template counts at most once per document.
CONTEXT_TEMPLATES: tuple[str, ...] = (
    "experience with {skill}",
    "{skill} experience",
    "skilled in {skill}",
    "proficient in {skill}",
    "knowledge of {skill}",
    "worked with {skill}",
    "familiar with {skill}",
    "expertise in {skill}",
    "{skill} developer",
    "{skill} engineer",
)

# Tried in order; the first captured integer wins.
YEAR_PATTERN_TEMPLATES: tuple[str, ...] = (
    r"(\d+)\s*(?:\+\s*)?years?\s*(?:of)?\s*{skill}\s*experience",
    r"{skill}\s*(?:experience)?\s*\(\s*(\d+)\s*(?:\+\s*)?years?",
    r"experience\s*(?:with|in)\s*{skill}\s*(?:for)?\s*(\d+)\s*(?:\+\s*)?years?",
)


@dataclass(slots=True, frozen=True)
class SkillMention:
    skill: str
    mention_count: int
    context_count: int

    @property
    def total(self) -> int:
        return self.mention_count + self.context_count

    @property
    def found(self) -> bool:
        return self.total > 0


def _normalize_skill(skill: str) -> str:
    return (skill or "").strip().lower()


@lru_cache(maxsize=1024)
def _literal_pattern(skill_key: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(skill_key)}(?!\w)", re.IGNORECASE)


@lru_cache(maxsize=1024)
def _year_patterns(skill_key: str) -> tuple[re.Pattern[str], ...]:
    escaped = re.escape(skill_key)
    return tuple(
        re.compile(template.replace("{skill}", escaped), re.IGNORECASE)
        for template in YEAR_PATTERN_TEMPLATES
    )


def context_phrases(skill: str) -> list[str]:
    skill_key = _normalize_skill(skill)
    return [template.replace("{skill}", skill_key) for template in CONTEXT_TEMPLATES]


def count_literal_mentions(text: str, skill: str) -> int:
    skill_key = _normalize_skill(skill)
    if not skill_key or not text:
        return 0
    return len(_literal_pattern(skill_key).findall(text))


def count_contextual_mentions(text: str, skill: str) -> int:
    skill_key = _normalize_skill(skill)
    if not skill_key or not text:
        return 0
    lowered = text.lower()
    return sum(1 for phrase in context_phrases(skill_key) if phrase in lowered)


def scan(text: str, skill: str) -> SkillMention:
    return SkillMention(
        skill=skill,
        mention_count=count_literal_mentions(text, skill),
        context_count=count_contextual_mentions(text, skill),
    )


def estimate_years(text: str, skill: str, *, context_count: int | None = None) -> int:
    """Estimate years of experience with *skill* from explicit year phrases.

    Falls back to a tiered default driven by the number of contextual
    mentions: more than two gives 3 years, at least one gives 2, otherwise 1.
    """
    skill_key = _normalize_skill(skill)
    if skill_key and text:
        for pattern in _year_patterns(skill_key):
            match = pattern.search(text)
            if match and match.group(1):
                return int(match.group(1))

    if context_count is None:
        context_count = count_contextual_mentions(text, skill)
    if context_count > 2:
        return 3
    if context_count > 0:
        return 2
    return 1
