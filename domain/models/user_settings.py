"""User-entered settings persisted in the local store."""

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_COACH_TEMPLATE_ID = "drill-sergeant"


class UserSettings(BaseModel):
    """Credentials, training philosophy and the selected coach persona."""

    hevy_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    training_philosophy: Optional[str] = None
    selected_template_id: str = Field(default=DEFAULT_COACH_TEMPLATE_ID)
