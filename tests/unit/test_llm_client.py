"""
Unit tests for OpenAICoachClient.

The AsyncOpenAI client is replaced with a mock; tests cover request shape,
JSON parsing into the domain models and error mapping.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import APIConnectionError, APIStatusError, AuthenticationError

from application.exceptions import AuthError, ParseError, RemoteError, RemoteUnavailableError
from domain.models import AnalysisResult, ExerciseTemplate, GeneratedRoutine
from services.llm.client import OpenAICoachClient
from tests.factories import make_workout

OPENAI_URL = "https://api.openai.com/v1/chat/completions"

ANALYSIS_JSON = json.dumps({
    "summary": "Consistent upper body work.",
    "trends": ["Bench 80kg -> 85kg"],
    "neglect": ["Legs"],
    "recommendations": ["Squat 3x8"],
})


def _completion(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


def _status_error(cls, status_code):
    request = httpx.Request("POST", OPENAI_URL)
    response = httpx.Response(status_code, request=request)
    return cls(
        message=f"Error {status_code}",
        response=response,
        body={"error": {"message": f"Error {status_code}"}},
    )


def _coach(create):
    openai_client = MagicMock()
    openai_client.chat.completions.create = create
    return OpenAICoachClient(api_key="sk-test", client=openai_client)


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCoachingAnalysis:
    @pytest.mark.asyncio
    async def test_parses_analysis(self):
        coach = _coach(AsyncMock(return_value=_completion(ANALYSIS_JSON)))

        result = await coach.request_coaching_analysis([make_workout()])

        assert isinstance(result, AnalysisResult)
        assert result.neglect == ["Legs"]

    @pytest.mark.asyncio
    async def test_request_shape(self):
        create = AsyncMock(return_value=_completion(ANALYSIS_JSON))
        coach = _coach(create)

        await coach.request_coaching_analysis(
            [make_workout()], philosophy="5/3/1", system_prompt="You are a scientist."
        )

        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_tokens"] == 1000
        system, user = kwargs["messages"]
        assert system == {"role": "system", "content": "You are a scientist. You must return valid JSON."}
        assert user["role"] == "user"
        assert "5/3/1" in user["content"]

    @pytest.mark.asyncio
    async def test_invalid_json_raises_parse_error(self):
        coach = _coach(AsyncMock(return_value=_completion("Sure! Here is your analysis")))
        with pytest.raises(ParseError):
            await coach.request_coaching_analysis([make_workout()])

    @pytest.mark.asyncio
    async def test_schema_mismatch_raises_parse_error(self):
        coach = _coach(AsyncMock(return_value=_completion(json.dumps({"trends": []}))))
        with pytest.raises(ParseError):
            await coach.request_coaching_analysis([make_workout()])

    @pytest.mark.asyncio
    async def test_empty_reply_raises_parse_error(self):
        coach = _coach(AsyncMock(return_value=_completion(None)))
        with pytest.raises(ParseError):
            await coach.request_coaching_analysis([make_workout()])


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestErrorMapping:
    @pytest.mark.asyncio
    async def test_authentication_error(self):
        coach = _coach(AsyncMock(side_effect=_status_error(AuthenticationError, 401)))
        with pytest.raises(AuthError):
            await coach.request_coaching_analysis([make_workout()])

    @pytest.mark.asyncio
    async def test_status_error_carries_status_and_body(self):
        coach = _coach(AsyncMock(side_effect=_status_error(APIStatusError, 500)))
        with pytest.raises(RemoteError) as exc_info:
            await coach.request_coaching_analysis([make_workout()])
        assert exc_info.value.status_code == 500
        assert "Error 500" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_connection_error(self):
        error = APIConnectionError(message="Connection failed", request=httpx.Request("POST", OPENAI_URL))
        coach = _coach(AsyncMock(side_effect=error))
        with pytest.raises(RemoteUnavailableError):
            await coach.request_coaching_analysis([make_workout()])

    @pytest.mark.asyncio
    async def test_single_attempt_no_retry(self):
        create = AsyncMock(side_effect=_status_error(APIStatusError, 503))
        coach = _coach(create)
        with pytest.raises(RemoteError):
            await coach.request_coaching_analysis([make_workout()])
        assert create.await_count == 1


# ---------------------------------------------------------------------------
# Routine generation
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestGeneratedRoutine:
    @pytest.mark.asyncio
    async def test_parses_routine_with_string_numbers(self):
        content = json.dumps({
            "title": "Leg Destruction AI",
            "exercises": [
                {
                    "exercise_template_id": "A",
                    "exercise_name": "Squat",
                    "sets": [{"type": "normal", "reps": "10", "weight_kg": "60"}],
                }
            ],
        })
        create = AsyncMock(return_value=_completion(content))
        coach = _coach(create)
        analysis = AnalysisResult(summary="s", neglect=["Legs"], recommendations=["Squat"])

        routine = await coach.request_generated_routine(analysis, [ExerciseTemplate(id="A", title="Squat")])

        assert isinstance(routine, GeneratedRoutine)
        assert routine.exercises[0].sets[0].reps == 10
        assert routine.exercises[0].sets[0].weight_kg == 60.0
        system, user = create.call_args.kwargs["messages"]
        assert '"id": "A"' in user["content"]
        assert "max_tokens" not in create.call_args.kwargs

    @pytest.mark.asyncio
    async def test_missing_title_raises_parse_error(self):
        coach = _coach(AsyncMock(return_value=_completion(json.dumps({"exercises": []}))))
        analysis = AnalysisResult(summary="s")
        with pytest.raises(ParseError):
            await coach.request_generated_routine(analysis, [])

    @pytest.mark.asyncio
    async def test_non_finite_numbers_are_dropped(self):
        content = (
            '{"title": "T", "exercises": [{"exercise_template_id": "A",'
            ' "sets": [{"reps": 1e999, "weight_kg": 1e999}]}]}'
        )
        coach = _coach(AsyncMock(return_value=_completion(content)))
        analysis = AnalysisResult(summary="s")

        routine = await coach.request_generated_routine(analysis, [])

        assert routine.exercises[0].sets[0].reps is None
        assert routine.exercises[0].sets[0].weight_kg is None
