from .content_quality import assess_content_quality
from .job_matcher import compute_match_score, filter_listings, search_listings, sort_listings
from .scanner import SkillMention, estimate_years, scan
from .skill_inference import infer_user_skills
from .skill_scorer import score_skill, strength_for
from .suggestions import SuggestionRule, load_suggestion_rules, select_suggestions

__all__ = [
    "SkillMention",
    "scan",
    "estimate_years",
    "score_skill",
    "strength_for",
    "assess_content_quality",
    "SuggestionRule",
    "load_suggestion_rules",
    "select_suggestions",
    "infer_user_skills",
    "compute_match_score",
    "filter_listings",
    "sort_listings",
    "search_listings",
]
