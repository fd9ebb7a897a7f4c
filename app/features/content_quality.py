from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_value

from .skill_scorer import clamp_score

_ACHIEVEMENT_RE = re.compile(
    r"increased|improved|reduced|achieved|delivered|managed|led|created|built|developed",
    re.IGNORECASE,
)
_QUANTIFIER_RE = re.compile(
    r"\d+%|\$\d+|\d+ times|\d+ team members|\d+ projects",
    re.IGNORECASE,
)
_SECTION_RE = re.compile(
    r"education|experience|skills|projects|summary|objective|achievements",
    re.IGNORECASE,
)
_BULLET_MARKERS = ("•", "-", "*")


def _value(key: str, default: int) -> int:
    return int(get_scoring_value(f"content_quality.{key}", default))


def length_adjustment(length: int) -> int:
    if length > _value("long_document.min_chars", 3000):
        return _value("long_document.bonus", 15)
    if length > _value("medium_document.min_chars", 1500):
        return _value("medium_document.bonus", 10)
    if length < _value("short_document.max_chars", 500):
        return -_value("short_document.penalty", 15)
    return 0


def count_achievements(text: str) -> int:
    return len(_ACHIEVEMENT_RE.findall(text or ""))


def count_quantifiers(text: str) -> int:
    return len(_QUANTIFIER_RE.findall(text or ""))


def has_section_headers(text: str) -> bool:
    return bool(_SECTION_RE.search(text or ""))


def has_bullet_points(text: str) -> bool:
    return any(marker in (text or "") for marker in _BULLET_MARKERS)


def assess_content_quality(text: str) -> int:
    text = text or ""
    score = _value("base", 50)
    score += length_adjustment(len(text))
    score += min(
        _value("achievement.cap", 20),
        count_achievements(text) * _value("achievement.per_match", 2),
    )
    score += min(
        _value("quantifier.cap", 15),
        count_quantifiers(text) * _value("quantifier.per_match", 3),
    )
    if has_section_headers(text):
        score += _value("section_bonus", 10)
    if has_bullet_points(text):
        score += _value("bullet_bonus", 5)
    return clamp_score(score)
