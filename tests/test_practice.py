"""
Unit tests for the PracticeRound.
"""

import random
from unittest.mock import MagicMock

from engine.practice import PracticeRound
from models.symbol import STANDARD_PALETTE


class TestPracticeRound:
    """Tests for the onboarding practice puzzle."""

    def setup_method(self):
        self.practice = PracticeRound(rng=random.Random(5))
        self.completed_mock = MagicMock()
        self.failed_mock = MagicMock()
        self.hidden_mock = MagicMock()
        self.practice.completed.connect(self.completed_mock)
        self.practice.attempt_failed.connect(self.failed_mock)
        self.practice.pattern_hidden.connect(self.hidden_mock)
        self.practice.start()

    def teardown_method(self):
        self.practice.cleanup()

    def wrong_answer(self) -> list:
        pattern = self.practice.pattern
        wrong = next(s for s in self.practice.available_colors if s not in pattern)
        return [wrong] + pattern[1:]

    def test_pattern_uses_distinct_symbols_from_pool(self):
        pattern = self.practice.pattern

        assert len(pattern) == 3
        assert len(set(pattern)) == 3
        assert all(symbol in STANDARD_PALETTE[:4] for symbol in pattern)

    def test_available_colors_are_first_four_standard(self):
        assert self.practice.available_colors == list(STANDARD_PALETTE[:4])

    def test_pattern_visible_until_hide_timeout(self):
        assert self.practice.is_pattern_visible

        self.practice._on_hide_timeout()

        assert not self.practice.is_pattern_visible
        self.hidden_mock.assert_called_once()

    def test_correct_answer_completes(self):
        for symbol in self.practice.pattern:
            self.practice.select_color(symbol)

        assert self.practice.is_complete
        self.completed_mock.assert_called_once()

    def test_selection_ignored_after_completion(self):
        for symbol in self.practice.pattern:
            self.practice.select_color(symbol)
        self.practice.select_color(STANDARD_PALETTE[0])

        assert len(self.practice.selection) == 3

    def test_wrong_answer_retries_after_delay(self):
        for symbol in self.wrong_answer():
            self.practice.select_color(symbol)

        assert not self.practice.is_complete
        self.failed_mock.assert_called_once()
        assert len(self.practice.selection) == 3
        assert self.practice._retry_timer.isActive()

        self.practice._on_retry_timeout()

        assert self.practice.selection == []

    def test_full_selection_blocks_input_until_retry(self):
        for symbol in self.wrong_answer():
            self.practice.select_color(symbol)
        self.practice.select_color(STANDARD_PALETTE[0])

        assert len(self.practice.selection) == 3

    def test_cleanup_cancels_hide(self):
        self.practice.cleanup()
        self.practice._on_hide_timeout()

        assert self.practice.is_pattern_visible
        self.hidden_mock.assert_not_called()

    def test_cleanup_cancels_retry(self):
        for symbol in self.wrong_answer():
            self.practice.select_color(symbol)
        self.practice.cleanup()
        self.practice._on_retry_timeout()

        assert len(self.practice.selection) == 3

    def test_restart_gives_fresh_round(self):
        for symbol in self.practice.pattern:
            self.practice.select_color(symbol)
        self.practice.start()

        assert not self.practice.is_complete
        assert self.practice.selection == []
        assert self.practice.is_pattern_visible
