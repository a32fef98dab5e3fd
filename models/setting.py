"""
Persisted key/value settings and player statistics.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class SettingKey(enum.Enum):
    """Names of the persisted values the game reads and writes."""
    HAS_COMPLETED_ONBOARDING = "has_completed_onboarding"
    CURRENT_LEVEL = "current_level"
    HIGHEST_SCORE = "highest_score"
    SOUND_ENABLED = "sound_enabled"
    COLOR_BLIND_MODE = "color_blind_mode"
    TOTAL_GAMES_PLAYED = "total_games_played"


# Default value for every key; also fixes each key's value type
SETTING_DEFAULTS: dict[SettingKey, object] = {
    SettingKey.HAS_COMPLETED_ONBOARDING: False,
    SettingKey.CURRENT_LEVEL: 1,
    SettingKey.HIGHEST_SCORE: 0,
    SettingKey.SOUND_ENABLED: True,
    SettingKey.COLOR_BLIND_MODE: False,
    SettingKey.TOTAL_GAMES_PLAYED: 0,
}


class StoredSetting(Base):
    """
    A single persisted setting.

    Values are stored as text and converted back using the type of the
    key's default.
    """
    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<StoredSetting(key='{self.key}', value='{self.value}')>"

    @staticmethod
    def encode(value: object) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

    @staticmethod
    def decode(key: SettingKey, raw: str) -> object:
        default = SETTING_DEFAULTS[key]
        if isinstance(default, bool):
            return raw == "1"
        return int(raw)
