from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import AnalysisResult, SkillStrength, Suggestion

PredicateKind = Literal[
    "always",
    "overall_score_below",
    "no_skill_with_strength",
    "skill_has_strength",
    "skill_not_demonstrated",
]

_REQUIRED_PARAMETERS: dict[str, tuple[str, ...]] = {
    "always": (),
    "overall_score_below": ("threshold",),
    "no_skill_with_strength": ("strength",),
    "skill_has_strength": ("skill", "strength"),
    "skill_not_demonstrated": ("skill",),
}


class SuggestionPredicate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: PredicateKind
    skill: str | None = None
    strength: SkillStrength | None = None
    threshold: int | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _check_parameters(self) -> "SuggestionPredicate":
        missing = [name for name in _REQUIRED_PARAMETERS[self.kind] if getattr(self, name) is None]
        if missing:
            raise ValueError(f"predicate '{self.kind}' requires: {', '.join(missing)}")
        return self


class SuggestionRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str | None = None
    when: SuggestionPredicate

    def to_suggestion(self) -> Suggestion:
        return Suggestion(title=self.title, description=self.description)


def _same_skill(left: str, right: str | None) -> bool:
    return (left or "").strip().lower() == (right or "").strip().lower()


def predicate_holds(predicate: SuggestionPredicate, result: AnalysisResult) -> bool:
    kind = predicate.kind
    if kind == "always":
        return True
    if kind == "overall_score_below":
        return result.overall_score < (predicate.threshold or 0)
    if kind == "no_skill_with_strength":
        return not any(skill.strength == predicate.strength for skill in result.skills)
    if kind == "skill_has_strength":
        return any(
            _same_skill(skill.name, predicate.skill) and skill.strength == predicate.strength
            for skill in result.skills
        )
    if kind == "skill_not_demonstrated":
        return not any(
            _same_skill(skill.name, predicate.skill) and skill.strength != "Weak"
            for skill in result.skills
        )
    raise ValueError(f"Unknown suggestion predicate kind: {kind}")


@lru_cache(maxsize=1)
def load_suggestion_rules() -> tuple[SuggestionRule, ...]:
    """Parse the ordered suggestion rule table from scoring config."""
    raw = get_scoring_value("suggestions.rules", [])
    if not isinstance(raw, list):
        raise RuntimeError("Invalid scoring config: 'suggestions.rules' must be a list.")
    try:
        return tuple(SuggestionRule.model_validate(item) for item in raw)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid suggestion rule in scoring config: {exc}") from exc


def max_suggestions() -> int:
    return int(get_scoring_value("suggestions.max_items", 3))


def select_suggestions(
    result: AnalysisResult,
    rules: Iterable[SuggestionRule] | None = None,
    *,
    limit: int | None = None,
) -> list[Suggestion]:
    table = load_suggestion_rules() if rules is None else tuple(rules)
    cap = max_suggestions() if limit is None else limit
    matched = [rule.to_suggestion() for rule in table if predicate_holds(rule.when, result)]
    return matched[: max(0, cap)]
