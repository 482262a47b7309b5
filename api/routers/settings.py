"""
Settings router for credentials, training philosophy and coach persona.

Values are persisted through UserSettingsStore and override the
environment configuration. Keys are returned masked.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from api.deps import get_container
from api.schemas.settings import SettingsResponse, SettingsUpdateRequest
from backend.container import Container
from services.coach_templates import COACH_TEMPLATES

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.get("", response_model=SettingsResponse)
def get_user_settings(container: Container = Depends(get_container)) -> SettingsResponse:
    """Return the effective settings with masked keys."""
    return SettingsResponse.from_settings(container.user_settings())


@router.put("", response_model=SettingsResponse)
def update_user_settings(
    request: SettingsUpdateRequest,
    background_tasks: BackgroundTasks,
    container: Container = Depends(get_container),
) -> SettingsResponse:
    """
    Update stored settings.

    Changing the Hevy key mounts the coordinator for the new credential in
    the background, which loads its cache or fetches.

    Raises:
        HTTPException: 422 for an unknown coach persona, 500 if the store
            cannot be written
    """
    known_ids = {template.id for template in COACH_TEMPLATES}
    if request.selected_template_id is not None and request.selected_template_id not in known_ids:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown coach template '{request.selected_template_id}'",
        )

    stored = container.settings_store.load()
    previous_key = container.user_settings().hevy_api_key

    update = {}
    for field in ("hevy_api_key", "openai_api_key", "training_philosophy", "selected_template_id"):
        value = getattr(request, field)
        if value is None:
            continue
        if field.endswith("_key"):
            value = value.strip() or None
        update[field] = value

    try:
        container.settings_store.save(stored.model_copy(update=update))
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save user settings: {str(e)}",
        ) from e

    effective = container.user_settings()
    if effective.hevy_api_key != previous_key:
        logger.info("Hevy credential changed, mounting coordinator")
        background_tasks.add_task(container.coordinator().load)

    return SettingsResponse.from_settings(effective)
