"""
ColorQuest Application Controller

Top-level controller that wires together the game session, the practice
round, persistence and the event bus. UI layers talk to this object.
"""

from typing import Optional

from PySide6.QtCore import QObject

from config import GAME_SETTINGS, GameSettings
from engine.pattern_generator import PatternGenerator
from engine.practice import PracticeRound
from engine.session import GameSession
from models.schemas import PlayerProgress, PreferenceSettings
from models.setting import SettingKey
from models.symbol import Symbol
from services.event_bus import EventBus
from services.settings_repository import SettingsRepository, SqlSettingsRepository


class ColorQuestApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, repository: Optional[SettingsRepository] = None,
                 generator: Optional[PatternGenerator] = None,
                 settings: GameSettings = GAME_SETTINGS):
        super().__init__()

        # Persistence (SQLite in the user data dir unless injected)
        self.repository = repository or SqlSettingsRepository()

        # Core services
        self.event_bus = EventBus()
        self.session = GameSession(self.repository, generator, settings, parent=self)
        self.practice = PracticeRound(parent=self)

        self._connect_session()
        self.practice.completed.connect(self.event_bus.practice_completed.emit)

    def _connect_session(self) -> None:
        """Forward session signals to the event bus."""
        self.session.game_started.connect(self.event_bus.game_started.emit)
        self.session.state_changed.connect(self.event_bus.state_changed.emit)
        self.session.snapshot_updated.connect(self.event_bus.snapshot_updated.emit)
        self.session.countdown_tick.connect(self.event_bus.countdown_tick.emit)
        self.session.response_tick.connect(self.event_bus.response_tick.emit)
        self.session.round_started.connect(self.event_bus.round_started.emit)
        self.session.round_resolved.connect(self.event_bus.round_resolved.emit)
        self.session.high_score_beaten.connect(self._on_high_score)
        self.session.game_over.connect(self._on_game_over)

    # ============ Game Commands ============

    def start_new_game(self) -> None:
        self.session.start_new_game()

    def select_color(self, symbol: Symbol) -> None:
        self.session.select_color(symbol)

    def remove_last_selection(self) -> None:
        self.session.remove_last_selection()

    def quit_game(self) -> None:
        """Leave the game screen; pending timers are cancelled."""
        self.session.cleanup()

    def shutdown(self) -> None:
        """Tear down every timer owned by the controller."""
        self.session.cleanup()
        self.practice.cleanup()

    # ============ Onboarding ============

    def start_practice(self) -> None:
        self.practice.start()

    def complete_onboarding(self) -> None:
        self.practice.cleanup()
        self._set(SettingKey.HAS_COMPLETED_ONBOARDING, True)

    @property
    def needs_onboarding(self) -> bool:
        return not self.repository.get(SettingKey.HAS_COMPLETED_ONBOARDING)

    # ============ Settings ============

    def set_color_blind_mode(self, enabled: bool) -> None:
        """Takes effect from the next round."""
        self._set(SettingKey.COLOR_BLIND_MODE, enabled)

    def set_sound_enabled(self, enabled: bool) -> None:
        self._set(SettingKey.SOUND_ENABLED, enabled)

    def preferences(self) -> PreferenceSettings:
        return self.repository.preferences()

    def statistics(self) -> PlayerProgress:
        return self.repository.progress()

    def reset_progress(self) -> None:
        """Reset level, high score, games played and onboarding."""
        self.session.cleanup()
        self.repository.reset_progress()
        self.event_bus.progress_reset.emit()
        self.event_bus.emit_message("info", "Game progress reset")

    def delete_all_data(self) -> None:
        """Return every stored value, preferences included, to its default."""
        self.session.cleanup()
        self.repository.delete_all()
        self.event_bus.progress_reset.emit()
        self.event_bus.emit_message("info", "All data deleted")

    def _set(self, key: SettingKey, value) -> None:
        self.repository.set(key, value)
        self.event_bus.settings_changed.emit(key.value)

    # ============ Session Events ============

    def _on_high_score(self, score: int) -> None:
        self.event_bus.high_score_updated.emit(score)
        self.event_bus.emit_message("info", f"New high score: {score}")

    def _on_game_over(self, score: int) -> None:
        self.event_bus.game_over.emit(score)
        self.event_bus.emit_message("info", f"Game over with {score} points")
