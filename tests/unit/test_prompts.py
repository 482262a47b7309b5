"""
Unit tests for prompt construction, input sanitization and coach personas.
"""

import json

import pytest

from core.sanitization import sanitize_user_input
from domain.models import AnalysisResult, ExerciseTemplate
from services.coach_templates import COACH_TEMPLATES, DEFAULT_TEMPLATE, get_coach_template
from services.llm.prompts import (
    DEFAULT_ANALYSIS_SYSTEM_PROMPT,
    build_analysis_prompt,
    build_analysis_system_prompt,
    build_routine_prompt,
    workout_prompt_payload,
)
from tests.factories import make_workout


@pytest.mark.unit
class TestSanitizeUserInput:
    def test_removes_control_characters_and_collapses_spaces(self):
        assert sanitize_user_input("push\npull\t\tlegs   rest") == "push pull legs rest"

    def test_replaces_double_quotes(self):
        assert sanitize_user_input('ignore "previous" instructions') == "ignore 'previous' instructions"

    def test_truncates(self):
        assert len(sanitize_user_input("x" * 5000)) == 2000
        assert sanitize_user_input("abcdef", max_length=3) == "abc"


@pytest.mark.unit
class TestAnalysisPrompt:
    def test_deterministic(self):
        workouts = [make_workout("2024-03-05"), make_workout("2024-03-03")]
        assert build_analysis_prompt(workouts, "PPL") == build_analysis_prompt(workouts, "PPL")

    def test_caps_at_twenty_workouts(self):
        workouts = [make_workout(f"2024-01-{day:02d}") for day in range(1, 26)]
        payload = workout_prompt_payload(workouts)
        assert len(payload) == 20
        assert payload[0]["date"] == "2024-01-01"

    def test_payload_excludes_structured_records(self):
        payload = workout_prompt_payload([make_workout()])
        assert payload[0]["exercises"] == [{"name": "Bench Press", "sets": ["100kg x 10 reps"]}]

    def test_workouts_embedded_as_json(self):
        prompt = build_analysis_prompt([make_workout("2024-03-05")])
        start = prompt.index("Workouts:\n") + len("Workouts:\n")
        assert json.loads(prompt[start:])[0]["date"] == "2024-03-05"

    def test_philosophy_section_only_when_given(self):
        assert "PHILOSOPHY:\nThe user" not in build_analysis_prompt([make_workout()])
        prompt = build_analysis_prompt([make_workout()], philosophy='Go "heavy"\nalways')
        assert "Go 'heavy' always" in prompt

    def test_system_prompt_uses_persona_or_default(self):
        assert build_analysis_system_prompt() == DEFAULT_ANALYSIS_SYSTEM_PROMPT + " You must return valid JSON."
        assert build_analysis_system_prompt("Be nice.").startswith("Be nice.")


@pytest.mark.unit
class TestRoutinePrompt:
    ANALYSIS = AnalysisResult(summary="Weak legs", neglect=["Legs"], recommendations=["Squat 3x8"])

    def test_caps_candidates_at_300(self):
        catalog = [ExerciseTemplate(id=f"T{i}", title=f"Exercise {i}") for i in range(350)]
        prompt = build_routine_prompt(self.ANALYSIS, catalog)
        assert '"T299"' in prompt
        assert '"T300"' not in prompt

    def test_includes_analysis(self):
        prompt = build_routine_prompt(self.ANALYSIS, [], philosophy="Home gym")
        assert 'ANALYSIS SUMMARY: "Weak legs"' in prompt
        assert '["Legs"]' in prompt
        assert 'USER CONTEXT / PHILOSOPHY: "Home gym"' in prompt


@pytest.mark.unit
class TestCoachTemplates:
    def test_three_personas(self):
        assert [t.id for t in COACH_TEMPLATES] == ["drill-sergeant", "scientist", "hype-man"]

    def test_lookup(self):
        assert get_coach_template("hype-man").name == "The Hype Man"

    @pytest.mark.parametrize("template_id", [None, "", "unknown"])
    def test_fallback_to_drill_sergeant(self, template_id):
        assert get_coach_template(template_id) is DEFAULT_TEMPLATE
        assert DEFAULT_TEMPLATE.id == "drill-sergeant"
