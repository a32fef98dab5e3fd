"""
Practice Round - Guided first puzzle shown during onboarding.

A fixed-length pattern of distinct symbols is shown briefly, then hidden.
A wrong answer clears the selection after a short delay so the player can
try again; there are no lives or score.
"""

import random
from typing import Optional

from PySide6.QtCore import QObject, Signal, QTimer

from config import PRACTICE_SETTINGS, PracticeSettings
from engine.validator import validate_names
from models.symbol import PaletteMode, Symbol


class PracticeRound(QObject):
    """
    Practice puzzle state.

    Usage:
        practice = PracticeRound()
        practice.completed.connect(on_completed)
        practice.start()
        practice.select_color(symbol)
    """

    # Signals
    pattern_hidden = Signal()
    selection_changed = Signal(list)    # current selection
    attempt_failed = Signal()
    completed = Signal()

    def __init__(self, settings: PracticeSettings = PRACTICE_SETTINGS,
                 rng: Optional[random.Random] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings = settings
        self.rng = rng or random.Random()

        self._generation = 0
        self._pattern: list[Symbol] = []
        self._selection: list[Symbol] = []
        self._is_pattern_visible = False
        self._is_complete = False

        # Pending callbacks remember the generation they were scheduled in
        self._hide_generation: Optional[int] = None
        self._retry_generation: Optional[int] = None

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.setInterval(settings.display_duration_ms)
        self._hide_timer.timeout.connect(self._on_hide_timeout)

        self._retry_timer = QTimer(self)
        self._retry_timer.setSingleShot(True)
        self._retry_timer.setInterval(settings.retry_delay_ms)
        self._retry_timer.timeout.connect(self._on_retry_timeout)

    @property
    def pattern(self) -> list[Symbol]:
        return list(self._pattern)

    @property
    def selection(self) -> list[Symbol]:
        return list(self._selection)

    @property
    def is_pattern_visible(self) -> bool:
        return self._is_pattern_visible

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def available_colors(self) -> list[Symbol]:
        """Symbols offered during practice."""
        return list(PaletteMode.STANDARD.symbols[:self.settings.symbol_pool_size])

    def start(self) -> None:
        """Set up a fresh practice pattern and show it."""
        self.cleanup()
        self._selection = []
        self._is_complete = False
        self._pattern = self.rng.sample(self.available_colors, self.settings.pattern_length)
        self._is_pattern_visible = True

        self._hide_generation = self._generation
        self._hide_timer.start()

    def select_color(self, symbol: Symbol) -> None:
        """Add a symbol; check the answer once the selection is full."""
        if self._is_complete or not self._pattern:
            return
        if len(self._selection) >= len(self._pattern):
            return

        self._selection.append(symbol)
        self.selection_changed.emit(list(self._selection))

        if len(self._selection) == len(self._pattern):
            self._check_completion()

    def cleanup(self) -> None:
        """Cancel pending callbacks."""
        self._hide_timer.stop()
        self._retry_timer.stop()
        self._hide_generation = None
        self._retry_generation = None
        self._generation += 1

    def _check_completion(self) -> None:
        if validate_names(self._selection, self._pattern):
            self._is_complete = True
            self._retry_timer.stop()
            self.completed.emit()
        else:
            self.attempt_failed.emit()
            self._retry_generation = self._generation
            self._retry_timer.start()

    def _on_hide_timeout(self) -> None:
        if self._hide_generation != self._generation:
            return
        self._hide_generation = None
        self._is_pattern_visible = False
        self.pattern_hidden.emit()

    def _on_retry_timeout(self) -> None:
        if self._retry_generation != self._generation:
            return
        self._retry_generation = None
        self._selection = []
        self.selection_changed.emit([])
