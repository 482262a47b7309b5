"""Settings schemas. Keys are never echoed back in full."""

from typing import Optional

from pydantic import BaseModel, Field

from core.constants import MAX_PHILOSOPHY_LENGTH
from domain.models import UserSettings


def mask_key(key: Optional[str]) -> Optional[str]:
    """Show only the last four characters of a secret."""
    if not key:
        return None
    if len(key) <= 4:
        return "****"
    return "****" + key[-4:]


class SettingsResponse(BaseModel):
    """Current effective settings with masked credentials."""

    hevy_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    training_philosophy: Optional[str] = None
    selected_template_id: str

    @classmethod
    def from_settings(cls, settings: UserSettings) -> "SettingsResponse":
        return cls(
            hevy_api_key=mask_key(settings.hevy_api_key),
            openai_api_key=mask_key(settings.openai_api_key),
            training_philosophy=settings.training_philosophy,
            selected_template_id=settings.selected_template_id,
        )


class SettingsUpdateRequest(BaseModel):
    """
    Partial settings update.

    Omitted fields are left unchanged; an empty string clears a key.
    """

    hevy_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    training_philosophy: Optional[str] = Field(default=None, max_length=MAX_PHILOSOPHY_LENGTH)
    selected_template_id: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "hevy_api_key": "your-hevy-key",
                "training_philosophy": "Upper/lower split, 4 days a week",
                "selected_template_id": "scientist",
            }
        }
    }
