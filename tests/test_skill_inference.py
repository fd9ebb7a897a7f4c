import itertools
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.skill_inference import infer_skills_from_titles, infer_user_skills, proficiency_level  # noqa: E402


def _counter_ids():
    counter = itertools.count(1)
    return lambda: f"skill-{next(counter)}"


class SkillInferenceTests(unittest.TestCase):
    def test_levels_and_title_fallback(self):
        text = (
            "Senior frontend developer. 8 years of React experience. "
            "Advanced CSS. Familiar with Git."
        )
        skills = infer_user_skills(text, id_factory=_counter_ids())
        by_name = {skill.name: skill for skill in skills}

        self.assertEqual([skill.name for skill in skills], ["CSS", "React", "Git", "HTML", "JavaScript"])
        self.assertEqual(by_name["React"].years_of_experience, 8)
        self.assertEqual(by_name["React"].level, "expert")
        self.assertEqual(by_name["CSS"].level, "advanced")
        self.assertEqual(by_name["Git"].years_of_experience, 2)
        self.assertEqual(by_name["Git"].level, "intermediate")
        self.assertEqual(by_name["HTML"].years_of_experience, 2)
        self.assertEqual(by_name["HTML"].level, "intermediate")
        self.assertEqual(skills[0].id, "skill-1")
        self.assertEqual(len({skill.id for skill in skills}), len(skills))

    def test_single_mention_is_beginner(self):
        skills = infer_user_skills("Python")
        self.assertEqual(len(skills), 1)
        self.assertEqual(skills[0].level, "beginner")
        self.assertEqual(skills[0].years_of_experience, 1)

    def test_proficiency_level_rules(self):
        self.assertEqual(proficiency_level("", "Go", 8, 0), "expert")
        self.assertEqual(proficiency_level("expert go", "Go", 1, 0), "expert")
        self.assertEqual(proficiency_level("", "Go", 5, 0), "advanced")
        self.assertEqual(proficiency_level("", "Go", 1, 2), "intermediate")
        self.assertEqual(proficiency_level("", "Go", 1, 1), "beginner")

    def test_titles_without_catalog_hits(self):
        skills = infer_skills_from_titles("Worked as a DevOps Engineer")
        self.assertEqual([skill.name for skill in skills], ["Docker", "Kubernetes", "CI/CD", "AWS"])
        self.assertEqual(infer_user_skills(""), [])


if __name__ == "__main__":
    unittest.main()
