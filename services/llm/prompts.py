"""
LLM prompt templates for workout analysis and routine generation.

Both prompts are deterministic functions of their inputs: the same
workouts, analysis, catalog and philosophy always yield the same text.
User-supplied philosophy text is sanitized before interpolation.
"""

import json
from typing import List, Optional

from core.constants import MAX_CATALOG_CANDIDATES, MAX_PROMPT_WORKOUTS
from core.sanitization import sanitize_user_input
from domain.models import AnalysisResult, ExerciseTemplate, SimplifiedWorkout

DEFAULT_ANALYSIS_SYSTEM_PROMPT = (
    "You are HevySpotter, an elite AI strength coach. You only speak in JSON."
)
JSON_REPLY_DIRECTIVE = " You must return valid JSON."

ROUTINE_SYSTEM_PROMPT = "You are an expert workout programmer. Return JSON only."

ANALYSIS_PHILOSOPHY_SECTION = """
TRAINING CONTEXT / PHILOSOPHY:
The user is following this specific plan or philosophy. Evaluate progress against THESE principles:
"{philosophy}"
"""

ANALYSIS_USER_PROMPT = """Analyze the following recent workout history (last {workout_count} sessions).

Data Format:
List of workouts with date, title, duration and exercises (name + sets).
{philosophy_section}
Your Goal:
Act as the coach described in the system prompt. Provide specific, actionable, data-backed analysis.
Avoid generic advice like "sleep more" or "eat protein" unless the data shows a crash in performance.

Output Format:
Return strictly a JSON object with this schema:
{{
  "summary": "A 1-2 sentence high-level summary of recent performance, in the coach's tone.",
  "trends": ["2-3 progressive overload observations that quote numbers from the history."],
  "neglect": ["2-3 specific muscle groups or movement patterns that are missing."],
  "recommendations": ["2-3 actionable tips, each with an example exercise and set/rep range."]
}}

Rules:
1. SPECIFICITY: Never say "work on legs". Say "Add Squats or Lunges".
2. EXAMPLES: Every recommended exercise comes with a set/rep range (e.g. "3x12").
3. DATA: Trends quote the exact numbers from the history.
4. CONTEXT: Do not invent gaps when the history is short.
5. PHILOSOPHY: If a philosophy is given above, frame every recommendation within it.

Do NOT include markdown formatting. Return only the raw JSON object.

Workouts:
{workouts_json}
"""

ROUTINE_USER_PROMPT = """Based on the following training analysis, design a COMPLETE structured workout routine.

ANALYSIS SUMMARY: "{summary}"
NEGLECTED AREAS: {neglect}
RECOMMENDATIONS: {recommendations}
{philosophy_line}
Your Task:
Create a workout that targets the neglected areas and implements the recommendations.

Constraints:
1. Select exercises ONLY from the AVAILABLE EXERCISES list below. Do not invent exercises.
2. SETS & REPS:
   - If the user context mentions a style, match it.
   - Otherwise default to 3-4 sets of 8-12 reps.
   - The "sets" array MUST contain one object per set (e.g. [{{}}, {{}}, {{}}]), never a single object describing "3 sets".
3. Give the workout a descriptive title (e.g. "Leg Destruction AI").

AVAILABLE EXERCISES (JSON):
{exercises_json}

Output Format (JSON):
{{
  "title": "Workout Title",
  "exercises": [
    {{
      "exercise_template_id": "Must match 'id' from the available list",
      "exercise_name": "Must match 'name' from the available list",
      "sets": [
        {{"type": "normal", "reps": 10, "weight_kg": 20}}
      ]
    }}
  ]
}}
"""


def _clean_philosophy(philosophy: Optional[str]) -> str:
    return sanitize_user_input(philosophy) if philosophy else ""


def workout_prompt_payload(workouts: List[SimplifiedWorkout]) -> List[dict]:
    """Prompt view of workouts: display summaries only, newest first, capped."""
    return [
        {
            "date": w.date,
            "startTime": w.start_time,
            "title": w.title,
            "durationMinutes": w.duration_minutes,
            "exercises": [{"name": ex.name, "sets": list(ex.sets)} for ex in w.exercises],
        }
        for w in workouts[:MAX_PROMPT_WORKOUTS]
    ]


def build_analysis_system_prompt(persona_prompt: Optional[str] = None) -> str:
    """System prompt for analysis: the persona (or default) plus the JSON directive."""
    return (persona_prompt or DEFAULT_ANALYSIS_SYSTEM_PROMPT) + JSON_REPLY_DIRECTIVE


def build_analysis_prompt(
    workouts: List[SimplifiedWorkout],
    philosophy: Optional[str] = None,
) -> str:
    """
    Build the user prompt for workout analysis.

    Args:
        workouts: Workouts to analyze, newest first; only the first
                  MAX_PROMPT_WORKOUTS are included
        philosophy: Optional free-text training philosophy

    Returns:
        Formatted user prompt string
    """
    clean = _clean_philosophy(philosophy)
    philosophy_section = ANALYSIS_PHILOSOPHY_SECTION.format(philosophy=clean) if clean else ""

    return ANALYSIS_USER_PROMPT.format(
        workout_count=len(workouts),
        philosophy_section=philosophy_section,
        workouts_json=json.dumps(workout_prompt_payload(workouts), indent=2),
    )


def build_routine_prompt(
    analysis: AnalysisResult,
    catalog: List[ExerciseTemplate],
    philosophy: Optional[str] = None,
) -> str:
    """
    Build the user prompt for routine generation.

    Args:
        analysis: The coaching analysis to act on
        catalog: Candidate exercises; only the first MAX_CATALOG_CANDIDATES
                 are offered to the model
        philosophy: Optional free-text training philosophy

    Returns:
        Formatted user prompt string
    """
    candidates = [{"id": t.id, "name": t.title} for t in catalog[:MAX_CATALOG_CANDIDATES]]
    clean = _clean_philosophy(philosophy)
    philosophy_line = f'USER CONTEXT / PHILOSOPHY: "{clean}"\n' if clean else ""

    return ROUTINE_USER_PROMPT.format(
        summary=sanitize_user_input(analysis.summary),
        neglect=json.dumps(analysis.neglect),
        recommendations=json.dumps(analysis.recommendations),
        philosophy_line=philosophy_line,
        exercises_json=json.dumps(candidates),
    )
