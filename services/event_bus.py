"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the game session, the UI, and persistence.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for ColorQuest.

    The EventBus acts as a mediator between application components:
    - GameSession emits round and scoring events
    - UI components listen and update displays
    - The application controller posts system messages

    Usage:
        # In the application controller
        session.round_started.connect(event_bus.round_started.emit)

        # In a scoreboard widget
        event_bus.snapshot_updated.connect(self._on_snapshot)
    """

    # ============ Game Lifecycle ============
    game_started = Signal(int)          # games played so far
    game_over = Signal(int)             # final score

    # ============ Round Lifecycle ============
    round_started = Signal(int)         # round number
    round_resolved = Signal(bool, int)  # correct, points awarded
    state_changed = Signal(str)         # GameState value
    snapshot_updated = Signal(object)   # SessionSnapshot

    # ============ Timer Events ============
    countdown_tick = Signal(float)      # memorize seconds remaining
    response_tick = Signal(float)       # response window seconds remaining

    # ============ Progress Events ============
    high_score_updated = Signal(int)    # new high score
    progress_reset = Signal()
    settings_changed = Signal(str)      # SettingKey value

    # ============ Practice Events ============
    practice_completed = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "New high score")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
