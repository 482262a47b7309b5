"""
OpenAI client wrapper for workout coaching.

Provides the OpenAICoachClient class, which asks the model for a strict
JSON object and validates the reply into AnalysisResult or
GeneratedRoutine. There are no automatic retries: the SDK's built-in
retries are disabled and every retry is a fresh user action.
"""

import json
import logging
from typing import List, Optional, Type, TypeVar

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from application.exceptions import AuthError, ParseError, RemoteError, RemoteUnavailableError
from domain.models import (
    AnalysisResult,
    ExerciseTemplate,
    GeneratedRoutine,
    SimplifiedWorkout,
)
from services.llm.prompts import (
    ROUTINE_SYSTEM_PROMPT,
    build_analysis_prompt,
    build_analysis_system_prompt,
    build_routine_prompt,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class OpenAICoachClient:
    """
    OpenAI-powered coach for workout analysis and routine design.

    Uses gpt-4o-mini by default for cost-effective structured output.
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    ANALYSIS_MAX_TOKENS = 1000

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the coach client.

        Args:
            api_key: OpenAI API key
            model: Chat model to use (default: gpt-4o-mini)
            timeout: Optional request timeout in seconds
            client: Pre-built AsyncOpenAI client (tests)
        """
        if client is None:
            kwargs = {"api_key": api_key, "max_retries": 0}
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = AsyncOpenAI(**kwargs)
        self._client = client
        self._model = model

    async def request_coaching_analysis(
        self,
        workouts: List[SimplifiedWorkout],
        philosophy: Optional[str] = None,
        system_prompt: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Analyze recent workouts.

        Args:
            workouts: Workouts to analyze, newest first (at most 20 are sent)
            philosophy: Optional free-text training philosophy
            system_prompt: Coach persona prompt; defaults to HevySpotter

        Returns:
            Parsed AnalysisResult

        Raises:
            AuthError: OpenAI rejected the key
            RemoteError: Any other API failure
            ParseError: Reply was not a JSON object matching AnalysisResult
        """
        logger.info(f"Requesting coaching analysis for {len(workouts)} workouts")
        content = await self._complete(
            system_prompt=build_analysis_system_prompt(system_prompt),
            user_prompt=build_analysis_prompt(workouts, philosophy),
            max_tokens=self.ANALYSIS_MAX_TOKENS,
        )
        return self._parse(content, AnalysisResult, "AI analysis")

    async def request_generated_routine(
        self,
        analysis: AnalysisResult,
        catalog: List[ExerciseTemplate],
        philosophy: Optional[str] = None,
    ) -> GeneratedRoutine:
        """
        Design a routine that addresses an analysis.

        Args:
            analysis: Analysis whose neglect/recommendations drive the design
            catalog: Exercise templates the model may choose from (capped at 300)
            philosophy: Optional free-text training philosophy

        Returns:
            Parsed GeneratedRoutine (not yet validated against the catalog)
        """
        logger.info(f"Requesting generated routine from {len(catalog)} catalog entries")
        content = await self._complete(
            system_prompt=ROUTINE_SYSTEM_PROMPT,
            user_prompt=build_routine_prompt(analysis, catalog, philosophy),
        )
        return self._parse(content, GeneratedRoutine, "AI workout")

    async def _complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Call the chat completions endpoint and return the raw content.

        Raises:
            AuthError, RemoteError, RemoteUnavailableError, ParseError
        """
        kwargs = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "response_format": {"type": "json_object"},
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except openai.AuthenticationError as e:
            logger.error("OpenAI rejected the API key")
            raise AuthError("Invalid OpenAI API key") from e
        except openai.APIStatusError as e:
            body = json.dumps(e.body) if e.body is not None else ""
            logger.error(f"OpenAI API error: {e.status_code} - {body}")
            raise RemoteError(
                f"OpenAI API error: {e.status_code}",
                status_code=e.status_code,
                body=body,
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"OpenAI API unavailable: {e}")
            raise RemoteUnavailableError("OpenAI API is not available") from e

        if not response.choices or not response.choices[0].message.content:
            raise ParseError("Empty response from LLM")
        return response.choices[0].message.content

    @staticmethod
    def _parse(content: str, model: Type[ModelT], label: str) -> ModelT:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"JSON parse error for {label}: {e}")
            raise ParseError(f"Failed to parse {label} response") from e

        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"{label} response did not match schema: {e.error_count()} errors")
            raise ParseError(f"Failed to parse {label} response") from e
