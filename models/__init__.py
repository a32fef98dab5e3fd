"""
ColorQuest Models

Puzzle data types and the SQLAlchemy settings store.
"""

from models.base import Base, create_db_engine, create_session_factory, get_session, init_db
from models.symbol import Symbol, PaletteMode, PALETTES, STANDARD_PALETTE, HIGH_CONTRAST_PALETTE
from models.pattern import Pattern, Difficulty
from models.setting import StoredSetting, SettingKey, SETTING_DEFAULTS
from models.schemas import PlayerProgress, PreferenceSettings, validate_setting

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_session",
    "init_db",
    "Symbol",
    "PaletteMode",
    "PALETTES",
    "STANDARD_PALETTE",
    "HIGH_CONTRAST_PALETTE",
    "Pattern",
    "Difficulty",
    "StoredSetting",
    "SettingKey",
    "SETTING_DEFAULTS",
    "PlayerProgress",
    "PreferenceSettings",
    "validate_setting",
]
