"""
Countdown - Cancellable fixed-tick countdown for the memorize phase
and the response window.

Each tick removes a fixed step from the remaining time, so the number of
ticks for a given duration is deterministic regardless of event-loop jitter.
"""

from typing import Optional

from PySide6.QtCore import QObject, Qt, Signal, QTimer


class Countdown(QObject):
    """
    Repeating-tick countdown built on QTimer.

    Stops itself when the remaining time reaches zero. After stop() no
    further tick or expired signal is emitted, even if a timer event was
    already queued.

    Usage:
        countdown = Countdown(parent=session)
        countdown.tick.connect(on_tick)
        countdown.expired.connect(on_expired)
        countdown.start(5_000)
    """

    # Signals
    tick = Signal(int)      # milliseconds remaining
    expired = Signal()      # reached zero

    # Constants
    TICK_INTERVAL_MS = 100
    STEP_MS = 100

    def __init__(self, parent: Optional[QObject] = None,
                 tick_interval_ms: int = TICK_INTERVAL_MS, step_ms: int = STEP_MS):
        """
        Args:
            parent: Owning QObject; the timer dies with it
            tick_interval_ms: Wall-clock interval between ticks
            step_ms: Time removed from the countdown per tick
        """
        super().__init__(parent)

        self._step_ms = step_ms
        self._remaining_ms = 0
        self._is_running = False

        self._timer = QTimer(self)
        self._timer.setInterval(tick_interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    def start(self, duration_ms: int) -> None:
        """Start (or restart) counting down from duration_ms."""
        self._timer.stop()
        self._remaining_ms = duration_ms
        self._is_running = True
        self._timer.start()

        # Emit initial tick
        self.tick.emit(self._remaining_ms)

    def stop(self) -> None:
        """Cancel the countdown, keeping the remaining time."""
        self._timer.stop()
        self._is_running = False

    def _on_tick(self) -> None:
        """Handle timer tick."""
        if not self._is_running:
            return

        self._remaining_ms = max(0, self._remaining_ms - self._step_ms)
        self.tick.emit(self._remaining_ms)

        if self._remaining_ms <= 0:
            self.stop()
            self.expired.emit()
