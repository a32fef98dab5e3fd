"""
Game Session - Round state machine for ColorQuest.

The GameSession runs independently of any UI. It owns score, level, lives
and the performance history, drives the memorize countdown, and asks the
PatternGenerator and validator for the puzzle logic.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal, QTimer

from config import GAME_SETTINGS, GameSettings
from engine.countdown import Countdown
from engine.pattern_generator import PatternGenerator
from engine.validator import validate
from models.pattern import Pattern
from models.setting import SettingKey
from models.symbol import PaletteMode, Symbol
from services.settings_repository import SettingsRepository


class GameState(Enum):
    """State machine states for the round lifecycle."""
    READY = "ready"
    SHOWING = "showing"
    MEMORIZING = "memorizing"
    PLAYING = "playing"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Immutable snapshot of the observable session state.
    Emitted after every transition for UI updates.
    """
    state: GameState = GameState.READY
    score: int = 0
    level: int = 1
    lives: int = 3
    round_number: int = 0
    current_pattern: Optional[Pattern] = None
    user_selection: tuple[Symbol, ...] = ()
    available_colors: tuple[Symbol, ...] = ()
    memory_time_remaining: float = 0.0
    response_time_remaining: float = 0.0
    is_pattern_visible: bool = False
    feedback_message: str = ""
    performance_history: tuple[float, ...] = ()


class GameSession(QObject):
    """
    Core game logic for one player session.
    Emits Qt Signals so UI layers can react without polling.

    Illegal commands (selecting outside the Playing state, undo with an
    empty selection) are ignored. Every delayed callback is tied to the
    generation it was scheduled in and does nothing once cleanup() or a
    new game has started another generation.
    """

    # Signals
    state_changed = Signal(str)             # new state value
    game_started = Signal(int)              # games played so far
    snapshot_updated = Signal(object)       # SessionSnapshot
    countdown_tick = Signal(float)          # memorize seconds remaining
    response_tick = Signal(float)           # response window seconds remaining
    round_started = Signal(int)             # round number
    round_resolved = Signal(bool, int)      # correct, points awarded
    high_score_beaten = Signal(int)         # new high score
    game_over = Signal(int)                 # final score

    CORRECT_VALUE = 1.0
    INCORRECT_VALUE = 0.0

    def __init__(self, repository: SettingsRepository,
                 generator: Optional[PatternGenerator] = None,
                 settings: GameSettings = GAME_SETTINGS,
                 resume_level: bool = False,
                 parent: Optional[QObject] = None):
        """
        Initialize the session.

        Args:
            repository: Persisted settings and statistics
            generator: Pattern source (default: unseeded PatternGenerator)
            settings: Timing, lives and scoring constants
            resume_level: Start new games at the persisted level instead of 1
            parent: Owning QObject
        """
        super().__init__(parent)
        self.repository = repository
        self.settings = settings
        self.generator = generator or PatternGenerator(settings)
        self.resume_level = resume_level

        self._generation = 0
        self._pending_generation: Optional[int] = None

        # Memorize phase countdown
        self._memory_countdown = Countdown(self, settings.tick_interval_ms)
        self._memory_countdown.tick.connect(self._on_memory_tick)
        self._memory_countdown.expired.connect(self._on_memory_expired)

        # Response window while Playing (drives the time bonus)
        self._response_countdown = Countdown(self, settings.tick_interval_ms)
        self._response_countdown.tick.connect(self._on_response_tick)

        # Delay between a resolved round and the next one
        self._advance_timer = QTimer(self)
        self._advance_timer.setSingleShot(True)
        self._advance_timer.setInterval(settings.round_advance_delay_ms)
        self._advance_timer.timeout.connect(self._on_advance_timeout)

        self._state = GameState.READY
        self._reset_state()
        if resume_level:
            self._level = self._saved_level()

    def _reset_state(self) -> None:
        """Reset all session values to a fresh game."""
        self._score: int = 0
        self._level: int = 1
        self._lives: int = self.settings.starting_lives
        self._round_number: int = 0
        self._performance_history: deque[float] = deque(maxlen=self.settings.performance_window)
        self._clear_round()

    def _clear_round(self) -> None:
        self._current_pattern: Optional[Pattern] = None
        self._user_selection: list[Symbol] = []
        self._available_colors: list[Symbol] = []
        self._memory_time_ms: int = 0
        self._memory_remaining_ms: int = 0
        self._response_remaining_ms: int = 0
        self._is_pattern_visible: bool = False
        self._feedback_message: str = ""

    # ============ Observable State ============

    @property
    def state(self) -> GameState:
        """Current state of the session."""
        return self._state

    @state.setter
    def state(self, new_state: GameState) -> None:
        """Set the state and emit signal."""
        self._state = new_state
        self.state_changed.emit(new_state.value)

    @property
    def score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._level

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def current_pattern(self) -> Optional[Pattern]:
        return self._current_pattern

    @property
    def user_selection(self) -> list[Symbol]:
        return list(self._user_selection)

    @property
    def available_colors(self) -> list[Symbol]:
        """The palette in this round's shuffled presentation order."""
        return list(self._available_colors)

    @property
    def memory_time(self) -> float:
        """Total memorize budget of the current round in seconds."""
        return self._memory_time_ms / 1000.0

    @property
    def memory_time_remaining(self) -> float:
        return self._memory_remaining_ms / 1000.0

    @property
    def response_time_remaining(self) -> float:
        return self._response_remaining_ms / 1000.0

    @property
    def is_pattern_visible(self) -> bool:
        return self._is_pattern_visible

    @property
    def feedback_message(self) -> str:
        return self._feedback_message

    @property
    def performance_history(self) -> list[float]:
        return list(self._performance_history)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def palette_mode(self) -> PaletteMode:
        return PaletteMode.from_colorblind(self.repository.get(SettingKey.COLOR_BLIND_MODE))

    @property
    def average_performance(self) -> float:
        """Mean of the recent outcomes, or the default when there are none."""
        if not self._performance_history:
            return self.settings.default_performance
        return sum(self._performance_history) / len(self._performance_history)

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def can_select(self) -> bool:
        return (
            self.state == GameState.PLAYING
            and self._current_pattern is not None
            and len(self._user_selection) < len(self._current_pattern)
        )

    # ============ Commands ============

    def start_new_game(self) -> None:
        """Reset score, level and lives and start the first round."""
        self._cancel_timers()
        self._generation += 1
        self._reset_state()
        self._level = self._saved_level() if self.resume_level else 1
        games_played = self.repository.increment(SettingKey.TOTAL_GAMES_PLAYED)

        self.state = GameState.READY
        self.game_started.emit(games_played)
        self.start_new_round()

    def start_new_round(self) -> None:
        """
        Generate the next pattern and begin the memorize phase.

        The pattern stays visible until the memorize countdown expires,
        then the session moves to Playing. Ignored after game over until
        start_new_game() is called.
        """
        if self.state == GameState.GAME_OVER:
            return

        self._cancel_timers()
        self._user_selection = []
        self._feedback_message = ""
        self._round_number += 1

        palette_mode = self.palette_mode
        self._current_pattern = self.generator.generate_pattern(
            level=self._level,
            palette_mode=palette_mode,
            performance_score=self.average_performance,
        )

        colors = list(palette_mode.symbols)
        self.generator.rng.shuffle(colors)
        self._available_colors = colors

        self._memory_time_ms = self.generator.calculate_memory_time_ms(
            self._current_pattern.difficulty, self._level
        )
        self._response_remaining_ms = 0

        self.state = GameState.SHOWING
        self.round_started.emit(self._round_number)
        self._show_pattern()

    def select_color(self, symbol: Symbol) -> None:
        """Append a symbol to the selection; validate once it is complete."""
        if not self.can_select:
            return

        self._user_selection.append(symbol)

        if len(self._user_selection) == len(self._current_pattern):
            self._validate_selection()
        else:
            self._emit_snapshot()

    def remove_last_selection(self) -> None:
        """Undo the last selected symbol."""
        if self.state != GameState.PLAYING or not self._user_selection:
            return

        self._user_selection.pop()
        self._emit_snapshot()

    def cleanup(self) -> None:
        """
        Tear down the active round.

        Cancels every pending timer and invalidates callbacks already
        scheduled, then returns to Ready.
        """
        self._cancel_timers()
        self._generation += 1
        self._user_selection = []
        self._feedback_message = ""
        self._is_pattern_visible = False
        self._current_pattern = None
        self._memory_remaining_ms = 0
        self._response_remaining_ms = 0
        self.state = GameState.READY
        self._emit_snapshot()

    # ============ Round Flow ============

    def _show_pattern(self) -> None:
        self._is_pattern_visible = True
        self.state = GameState.MEMORIZING
        self._emit_snapshot()
        self._memory_countdown.start(self._memory_time_ms)

    def _on_memory_tick(self, remaining_ms: int) -> None:
        self._memory_remaining_ms = remaining_ms
        self.countdown_tick.emit(remaining_ms / 1000.0)

    def _on_memory_expired(self) -> None:
        if self.state != GameState.MEMORIZING:
            return
        self._transition_to_playing()

    def _transition_to_playing(self) -> None:
        self._is_pattern_visible = False
        self.state = GameState.PLAYING
        self._emit_snapshot()
        self._response_countdown.start(self._memory_time_ms)

    def _on_response_tick(self, remaining_ms: int) -> None:
        self._response_remaining_ms = remaining_ms
        self.response_tick.emit(remaining_ms / 1000.0)

    def _validate_selection(self) -> None:
        self._response_countdown.stop()

        if validate(self._user_selection, self._current_pattern):
            self._handle_correct_answer()
        else:
            self._handle_incorrect_answer()

    def _handle_correct_answer(self) -> None:
        self.state = GameState.CORRECT

        points = self.generator.calculate_points(
            self._current_pattern.difficulty,
            time_remaining=self.response_time_remaining,
            total_time=self.memory_time,
        )
        self._score += points
        self._feedback_message = f"Perfect! +{points} points"
        self._performance_history.append(self.CORRECT_VALUE)

        if self._score > self.repository.get(SettingKey.HIGHEST_SCORE):
            self.repository.set(SettingKey.HIGHEST_SCORE, self._score)
            self.high_score_beaten.emit(self._score)

        self._level += 1
        self.repository.set(SettingKey.CURRENT_LEVEL, self._level)

        self.round_resolved.emit(True, points)
        self._emit_snapshot()
        self._schedule_next_round()

    def _handle_incorrect_answer(self) -> None:
        self.state = GameState.INCORRECT

        self._lives = max(0, self._lives - 1)
        self._feedback_message = f"Incorrect! {self._lives} lives remaining"
        self._performance_history.append(self.INCORRECT_VALUE)

        self.round_resolved.emit(False, 0)

        if self._lives <= 0:
            self._game_over()
        else:
            self._emit_snapshot()
            self._schedule_next_round()

    def _game_over(self) -> None:
        self._cancel_timers()
        self.state = GameState.GAME_OVER
        self._feedback_message = f"Game Over! Final Score: {self._score}"
        self.game_over.emit(self._score)
        self._emit_snapshot()

    # ============ Timers ============

    def _schedule_next_round(self) -> None:
        """Start the next round after the advance delay, unless torn down first."""
        self._pending_generation = self._generation
        self._advance_timer.start()

    def _on_advance_timeout(self) -> None:
        scheduled_generation = self._pending_generation
        self._pending_generation = None

        if scheduled_generation is None or scheduled_generation != self._generation:
            return
        if self.state not in (GameState.CORRECT, GameState.INCORRECT):
            return
        self.start_new_round()

    def _cancel_timers(self) -> None:
        self._memory_countdown.stop()
        self._response_countdown.stop()
        self._advance_timer.stop()
        self._pending_generation = None

    @property
    def has_pending_timers(self) -> bool:
        return (
            self._memory_countdown.is_running
            or self._response_countdown.is_running
            or self._advance_timer.isActive()
        )

    # ============ Helpers ============

    def _saved_level(self) -> int:
        return max(1, self.repository.get(SettingKey.CURRENT_LEVEL))

    def get_snapshot(self) -> SessionSnapshot:
        """Get the current session state snapshot."""
        return SessionSnapshot(
            state=self.state,
            score=self._score,
            level=self._level,
            lives=self._lives,
            round_number=self._round_number,
            current_pattern=self._current_pattern,
            user_selection=tuple(self._user_selection),
            available_colors=tuple(self._available_colors),
            memory_time_remaining=self.memory_time_remaining,
            response_time_remaining=self.response_time_remaining,
            is_pattern_visible=self._is_pattern_visible,
            feedback_message=self._feedback_message,
            performance_history=tuple(self._performance_history),
        )

    def _emit_snapshot(self) -> None:
        """Emit the current session state."""
        self.snapshot_updated.emit(self.get_snapshot())
