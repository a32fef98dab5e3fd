"""
Pydantic schemas for data validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from models.setting import SettingKey


# ============ Progress Schemas ============

class PlayerProgress(BaseModel):
    """Persisted progress and statistics."""
    model_config = ConfigDict(frozen=True, strict=True)

    highest_score: int = Field(default=0, ge=0)
    current_level: int = Field(default=1, ge=1)
    total_games_played: int = Field(default=0, ge=0)


# ============ Preference Schemas ============

class PreferenceSettings(BaseModel):
    """User-facing toggles."""
    model_config = ConfigDict(frozen=True, strict=True)

    sound_enabled: bool = True
    color_blind_mode: bool = False
    has_completed_onboarding: bool = False


def validate_setting(key: SettingKey, value: object) -> object:
    """
    Validate a value for a setting key.

    Raises:
        pydantic.ValidationError: if the value has the wrong type or range
    """
    schema = PlayerProgress if key.value in PlayerProgress.model_fields else PreferenceSettings
    return getattr(schema.model_validate({key.value: value}), key.value)
