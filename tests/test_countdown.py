"""
Unit tests for the Countdown.
"""

from unittest.mock import MagicMock

from engine.countdown import Countdown


class TestCountdown:
    """Tests for the Countdown class."""

    def setup_method(self):
        self.countdown = Countdown()
        self.tick_mock = MagicMock()
        self.expired_mock = MagicMock()
        self.countdown.tick.connect(self.tick_mock)
        self.countdown.expired.connect(self.expired_mock)

    def teardown_method(self):
        self.countdown.stop()

    def test_initial_state(self):
        assert not self.countdown.is_running
        assert self.countdown.remaining_ms == 0

    def test_start_sets_running_and_emits_initial_tick(self):
        self.countdown.start(500)

        assert self.countdown.is_running
        assert self.countdown.remaining_ms == 500
        self.tick_mock.assert_called_once_with(500)

    def test_each_tick_removes_fixed_step(self):
        self.countdown.start(500)
        self.countdown._on_tick()
        self.countdown._on_tick()

        assert self.countdown.remaining_ms == 300
        assert self.tick_mock.call_args_list[-1][0][0] == 300

    def test_expires_at_zero(self):
        self.countdown.start(300)
        for _ in range(3):
            self.countdown._on_tick()

        assert not self.countdown.is_running
        assert self.countdown.remaining_ms == 0
        self.expired_mock.assert_called_once()

    def test_remaining_never_negative(self):
        self.countdown.start(250)
        for _ in range(3):
            self.countdown._on_tick()

        assert self.countdown.remaining_ms == 0
        self.expired_mock.assert_called_once()

    def test_no_ticks_after_stop(self):
        """A queued tick after stop() must not fire."""
        self.countdown.start(200)
        self.countdown.stop()
        self.tick_mock.reset_mock()

        self.countdown._on_tick()
        self.countdown._on_tick()

        assert self.countdown.remaining_ms == 200
        self.tick_mock.assert_not_called()
        self.expired_mock.assert_not_called()

    def test_no_ticks_after_expiry(self):
        self.countdown.start(100)
        self.countdown._on_tick()
        self.countdown._on_tick()

        self.expired_mock.assert_called_once()

    def test_restart_resets_remaining(self):
        self.countdown.start(500)
        self.countdown._on_tick()
        self.countdown.start(800)

        assert self.countdown.remaining_ms == 800
        assert self.countdown.is_running
