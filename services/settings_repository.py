"""
Settings Repository - Persistence boundary for progress and preferences.

The game engine never touches storage directly; it is handed a repository
and calls get/set for the named keys it needs. Calls are synchronous and
assumed to succeed.
"""

from typing import Optional

from sqlalchemy import Engine, select

from models.base import create_db_engine, create_session_factory, get_session, init_db
from models.schemas import PlayerProgress, PreferenceSettings, validate_setting
from models.setting import SettingKey, SETTING_DEFAULTS, StoredSetting


# Keys cleared by "Reset Game Progress"; preferences survive
PROGRESS_KEYS = (
    SettingKey.CURRENT_LEVEL,
    SettingKey.HIGHEST_SCORE,
    SettingKey.TOTAL_GAMES_PLAYED,
    SettingKey.HAS_COMPLETED_ONBOARDING,
)


class SettingsRepository:
    """
    Base repository with the shared convenience API.

    Subclasses implement _load() and _store().
    """

    def get(self, key: SettingKey):
        """Get a setting value, falling back to its default."""
        value = self._load(key)
        if value is None:
            return SETTING_DEFAULTS[key]
        return value

    def set(self, key: SettingKey, value) -> None:
        """
        Validate and persist a setting value.

        Raises:
            ValueError: if the value has the wrong type or range
        """
        self._store(key, validate_setting(key, value))

    def increment(self, key: SettingKey, amount: int = 1) -> int:
        """Add to an integer setting and return the new value."""
        value = self.get(key) + amount
        self.set(key, value)
        return value

    def progress(self) -> PlayerProgress:
        """Statistics view of the stored progress."""
        return PlayerProgress(
            highest_score=self.get(SettingKey.HIGHEST_SCORE),
            current_level=self.get(SettingKey.CURRENT_LEVEL),
            total_games_played=self.get(SettingKey.TOTAL_GAMES_PLAYED),
        )

    def preferences(self) -> PreferenceSettings:
        return PreferenceSettings(
            sound_enabled=self.get(SettingKey.SOUND_ENABLED),
            color_blind_mode=self.get(SettingKey.COLOR_BLIND_MODE),
            has_completed_onboarding=self.get(SettingKey.HAS_COMPLETED_ONBOARDING),
        )

    def reset_progress(self) -> None:
        """Reset level, scores and onboarding. Preferences are kept."""
        for key in PROGRESS_KEYS:
            self.set(key, SETTING_DEFAULTS[key])

    def delete_all(self) -> None:
        """Return every setting to its default."""
        for key, default in SETTING_DEFAULTS.items():
            self.set(key, default)

    def _load(self, key: SettingKey):
        raise NotImplementedError

    def _store(self, key: SettingKey, value) -> None:
        raise NotImplementedError


class InMemorySettingsRepository(SettingsRepository):
    """Dictionary-backed repository for tests and headless use."""

    def __init__(self, initial: Optional[dict] = None):
        self._values: dict[SettingKey, object] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def _load(self, key: SettingKey):
        return self._values.get(key)

    def _store(self, key: SettingKey, value) -> None:
        self._values[key] = value


class SqlSettingsRepository(SettingsRepository):
    """
    SQLite-backed repository.

    Usage:
        repo = SqlSettingsRepository()              # user data dir
        repo = SqlSettingsRepository("sqlite://")   # in-memory database
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None):
        self._engine = engine or create_db_engine(url)
        init_db(self._engine)
        self._session_factory = create_session_factory(self._engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _load(self, key: SettingKey):
        with get_session(self._session_factory) as session:
            row = session.scalar(select(StoredSetting).where(StoredSetting.key == key.value))
            if row is None:
                return None
            return StoredSetting.decode(key, row.value)

    def _store(self, key: SettingKey, value) -> None:
        with get_session(self._session_factory) as session:
            row = session.get(StoredSetting, key.value)
            if row is None:
                session.add(StoredSetting(key=key.value, value=StoredSetting.encode(value)))
            else:
                row.value = StoredSetting.encode(value)
