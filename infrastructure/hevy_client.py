"""
HTTP client for the Hevy public API.

This client handles communication with Hevy for reading workout history
and the exercise catalog, and for writing routine folders and routines.
Authentication is a static per-request ``api-key`` header.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from application.exceptions import AuthError, ParseError, RemoteError, RemoteUnavailableError
from core.constants import (
    EXERCISE_CATALOG_PAGE_SIZE,
    EXERCISE_CATALOG_PAGES,
    WORKOUTS_PAGE_SIZE,
)
from domain.models import ExerciseTemplate, HevyWorkout, RoutineFolder

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.hevyapp.com/v1"


class HevyClient:
    """
    HTTP client for Hevy API communication.

    Every call opens its own ``httpx.AsyncClient``; there is no shared
    connection state and no retry. A 401 from any endpoint raises
    AuthError, any other non-2xx raises RemoteError with the response body.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ):
        """
        Initialize the Hevy client.

        Args:
            api_key: Hevy API key (sent as the ``api-key`` header)
            base_url: Base URL of the Hevy API
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        return {
            "api-key": self._api_key,
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        action: str = "call Hevy API",
    ) -> Any:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method, url, params=params, json=json, headers=self._headers()
                )
        except httpx.ConnectError as e:
            logger.error(f"Hevy API unavailable: {e}")
            raise RemoteUnavailableError(f"Hevy API is not available at {self._base_url}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Hevy API timeout: {e}")
            raise RemoteUnavailableError("Hevy API request timed out") from e

        if response.status_code == 401:
            logger.error(f"Hevy API rejected credential: {method} {path}")
            raise AuthError("Invalid Hevy API key")

        if not 200 <= response.status_code < 300:
            body = response.text
            logger.error(f"Hevy API error: {response.status_code} - {body}")
            raise RemoteError(
                f"Failed to {action}: {response.status_code} {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Hevy API returned a non-JSON body for {path}") from e

    # -------------------------------------------------------------------------
    # Workouts
    # -------------------------------------------------------------------------

    async def fetch_workouts_page(
        self,
        page: int = 1,
        page_size: int = WORKOUTS_PAGE_SIZE,
    ) -> List[HevyWorkout]:
        """
        Fetch one page of workouts.

        Args:
            page: 1-based page number
            page_size: Number of workouts per page

        Returns:
            Raw workouts on this page (possibly empty)

        Raises:
            AuthError: On HTTP 401
            RemoteError: On any other non-2xx response
            ParseError: If the body does not contain a workouts list
        """
        logger.info(f"Fetching workouts page {page} with page size {page_size}")
        data = await self._request(
            "GET",
            "/workouts",
            params={"page": page, "pageSize": page_size},
            action="fetch workouts",
        )
        try:
            return [HevyWorkout.model_validate(w) for w in (data or {}).get("workouts") or []]
        except (AttributeError, PydanticValidationError) as e:
            raise ParseError(f"Unexpected workouts payload on page {page}") from e

    async def fetch_all_workouts(self) -> List[HevyWorkout]:
        """
        Fetch the full workout history.

        Pages are requested strictly sequentially starting at page 1; the
        first page shorter than the page size ends the sync. Any page
        failure propagates immediately and discards what was fetched.

        Returns:
            All workouts in source order (newest first)
        """
        workouts: List[HevyWorkout] = []
        page = 1
        while True:
            batch = await self.fetch_workouts_page(page, WORKOUTS_PAGE_SIZE)
            workouts.extend(batch)
            if len(batch) < WORKOUTS_PAGE_SIZE:
                break
            page += 1

        logger.info(f"Fetched {len(workouts)} workouts across {page} pages")
        return workouts

    # -------------------------------------------------------------------------
    # Exercise catalog
    # -------------------------------------------------------------------------

    async def fetch_exercise_catalog_page(
        self,
        page: int = 1,
        page_size: int = EXERCISE_CATALOG_PAGE_SIZE,
    ) -> List[ExerciseTemplate]:
        """Fetch one page of exercise templates."""
        data = await self._request(
            "GET",
            "/exercise_templates",
            params={"page": page, "pageSize": page_size},
            action="fetch exercises",
        )
        try:
            return [
                ExerciseTemplate.model_validate(t)
                for t in (data or {}).get("exercise_templates") or []
            ]
        except (AttributeError, PydanticValidationError) as e:
            raise ParseError(f"Unexpected exercise_templates payload on page {page}") from e

    async def _catalog_page_or_empty(self, page: int) -> List[ExerciseTemplate]:
        try:
            return await self.fetch_exercise_catalog_page(page, EXERCISE_CATALOG_PAGE_SIZE)
        except (RemoteError, ParseError, AuthError) as e:
            logger.warning(f"Failed to fetch exercise page {page}: {e}")
            return []

    async def fetch_top_exercise_catalog(self) -> List[ExerciseTemplate]:
        """
        Fetch the first catalog pages concurrently.

        Best-effort: a failing page contributes an empty list instead of
        failing the whole call.

        Returns:
            Up to EXERCISE_CATALOG_PAGES * EXERCISE_CATALOG_PAGE_SIZE templates
        """
        pages = range(1, EXERCISE_CATALOG_PAGES + 1)
        results = await asyncio.gather(*(self._catalog_page_or_empty(p) for p in pages))
        catalog = [template for result in results for template in result]
        logger.info(f"Fetched {len(catalog)} exercise templates")
        return catalog

    # -------------------------------------------------------------------------
    # Routines
    # -------------------------------------------------------------------------

    async def list_routine_folders(self) -> List[RoutineFolder]:
        """List the user's routine folders."""
        data = await self._request("GET", "/routine_folders", action="fetch folders")
        try:
            return [
                RoutineFolder.model_validate(f)
                for f in (data or {}).get("routine_folders") or []
            ]
        except (AttributeError, PydanticValidationError) as e:
            raise ParseError("Unexpected routine_folders payload") from e

    async def create_routine_folder(self, title: str) -> RoutineFolder:
        """
        Create a routine folder.

        Args:
            title: Folder title

        Returns:
            The created folder
        """
        data = await self._request(
            "POST",
            "/routine_folders",
            json={"routine_folder": {"title": title}},
            action="create folder",
        )
        try:
            return RoutineFolder.model_validate((data or {}).get("routine_folder"))
        except (AttributeError, PydanticValidationError) as e:
            raise ParseError("Unexpected routine_folder payload") from e

    async def create_routine(self, routine: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a routine.

        Args:
            routine: Routine body (title, folder_id, exercises)

        Returns:
            Raw response body
        """
        data = await self._request(
            "POST",
            "/routines",
            json={"routine": routine},
            action="create routine",
        )
        logger.info(f"Created routine '{routine.get('title')}'")
        return data or {}
