from __future__ import annotations

import math

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import SkillStrength


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def normalized_length(content_length: int) -> int:
    min_length = int(get_scoring_value("skill_scoring.min_length", 500))
    max_length = int(get_scoring_value("skill_scoring.max_length", 3000))
    return max(min_length, min(content_length, max_length))


def length_factor(content_length: int) -> float:
    """Shorter documents amplify each mention, longer ones dilute it."""
    reference = float(get_scoring_value("skill_scoring.length_reference", 1500))
    return reference / normalized_length(content_length)


def score_skill(mention_count: int, context_count: int, content_length: int) -> int:
    mention_weight = float(get_scoring_value("skill_scoring.mention_weight", 20))
    context_weight = float(get_scoring_value("skill_scoring.context_weight", 30))
    raw = (mention_count * mention_weight + context_count * context_weight) * length_factor(content_length)
    return round_half_up(min(100.0, max(0.0, raw)))


def strength_for(score: int) -> SkillStrength:
    strong = int(get_scoring_value("skill_scoring.strength_thresholds.strong", 70))
    medium = int(get_scoring_value("skill_scoring.strength_thresholds.medium", 40))
    if score >= strong:
        return "Strong"
    if score >= medium:
        return "Medium"
    return "Weak"
