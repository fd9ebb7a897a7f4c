import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.suggestions import (  # noqa: E402
    SuggestionPredicate,
    SuggestionRule,
    load_suggestion_rules,
    predicate_holds,
    select_suggestions,
)
from app.schemas.analysis import AnalysisResult, SkillAssessment  # noqa: E402


def _result(overall: int, *skills: tuple[str, str, int]) -> AnalysisResult:
    return AnalysisResult(
        overall_score=overall,
        content_quality=50,
        skills=[SkillAssessment(name=name, strength=strength, score=score) for name, strength, score in skills],
        suggestions=[],
    )


class SuggestionRuleTests(unittest.TestCase):
    def test_rule_table_is_ordered_and_has_an_always_rule(self):
        rules = load_suggestion_rules()
        self.assertEqual(
            [rule.rule_id for rule in rules],
            [
                "quantify_achievements",
                "product_strategy",
                "generic_summary",
                "user_research_methods",
                "project_examples",
            ],
        )
        self.assertTrue(any(rule.when.kind == "always" for rule in rules))

    def test_rules_are_serializable_records(self):
        dumped = load_suggestion_rules()[2].model_dump()
        self.assertEqual(dumped["when"]["kind"], "overall_score_below")
        self.assertEqual(dumped["when"]["threshold"], 80)
        self.assertEqual(SuggestionRule.model_validate(dumped), load_suggestion_rules()[2])

    def test_weak_result_takes_first_three_matching_rules(self):
        suggestions = select_suggestions(_result(20))
        self.assertEqual(len(suggestions), 3)
        self.assertEqual(
            [s.title for s in suggestions],
            [
                "Add more quantifiable achievements to your experience section",
                "Your summary is too generic - tailor it to highlight your unique strengths",
                "Improve your user research section by including specific methodologies used",
            ],
        )

    def test_strong_result_still_gets_the_always_rule(self):
        result = _result(90, ("User Research", "Medium", 50), ("Python", "Strong", 80))
        suggestions = select_suggestions(result)
        self.assertEqual(len(suggestions), 1)
        self.assertEqual(suggestions[0].title, "Include more specific examples of projects you've worked on")
        self.assertEqual(suggestions[0].description, "Name specific products, features and your contributions to them.")

    def test_predicates(self):
        result = _result(79, ("product strategy", "Weak", 10))
        self.assertTrue(predicate_holds(SuggestionPredicate(kind="overall_score_below", threshold=80), result))
        self.assertFalse(predicate_holds(SuggestionPredicate(kind="overall_score_below", threshold=79), result))
        self.assertTrue(
            predicate_holds(
                SuggestionPredicate(kind="skill_has_strength", skill="Product Strategy", strength="Weak"),
                result,
            )
        )
        self.assertTrue(predicate_holds(SuggestionPredicate(kind="no_skill_with_strength", strength="Strong"), result))
        self.assertTrue(
            predicate_holds(SuggestionPredicate(kind="skill_not_demonstrated", skill="Product Strategy"), result)
        )

    def test_predicate_requires_its_parameters(self):
        with self.assertRaises(ValidationError):
            SuggestionPredicate(kind="overall_score_below")
        with self.assertRaises(ValidationError):
            SuggestionPredicate(kind="skill_has_strength", skill="Python")

    def test_custom_table_and_limit(self):
        rules = [
            SuggestionRule(rule_id="a", title="A", when=SuggestionPredicate(kind="always")),
            SuggestionRule(rule_id="b", title="B", when=SuggestionPredicate(kind="always")),
        ]
        self.assertEqual([s.title for s in select_suggestions(_result(50), rules, limit=1)], ["A"])
        self.assertEqual(select_suggestions(_result(50), [], limit=3), [])


if __name__ == "__main__":
    unittest.main()
