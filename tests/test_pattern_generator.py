"""
Unit tests for the PatternGenerator.

Tests cover adaptive difficulty thresholds, pattern construction,
memory-time budgets and round points.
"""

import random

import pytest

from engine.pattern_generator import PatternGenerator
from models.pattern import Difficulty, Pattern
from models.symbol import PaletteMode, STANDARD_PALETTE, HIGH_CONTRAST_PALETTE


class TestDifficulty:
    """Tests for the Difficulty enum."""

    def test_sequence_lengths_are_fixed(self):
        """Each difficulty maps to a fixed pattern length."""
        assert Difficulty.EASY.sequence_length == 3
        assert Difficulty.MEDIUM.sequence_length == 4
        assert Difficulty.HARD.sequence_length == 5
        assert Difficulty.EXPERT.sequence_length == 6

    def test_ordinals(self):
        assert [d.ordinal for d in Difficulty] == [1, 2, 3, 4]

    def test_display_name(self):
        assert Difficulty.EXPERT.display_name == "Expert"

    def test_pattern_rejects_wrong_length(self):
        """A pattern must match its difficulty's length."""
        with pytest.raises(ValueError, match="needs 3 symbols"):
            Pattern(STANDARD_PALETTE[:4], Difficulty.EASY)


class TestCalculateDifficulty:
    """Tests for adaptive difficulty selection."""

    @pytest.mark.parametrize("level, performance, expected", [
        (2999, 0.001, Difficulty.EASY),      # 2.999
        (3, 1.0, Difficulty.MEDIUM),         # 3.0
        (6999, 0.001, Difficulty.MEDIUM),    # 6.999
        (7, 1.0, Difficulty.HARD),           # 7.0
        (11999, 0.001, Difficulty.HARD),     # 11.999
        (12, 1.0, Difficulty.EXPERT),        # 12.0
        (24, 0.5, Difficulty.EXPERT),
        (0, 1.0, Difficulty.EASY),
    ])
    def test_threshold_boundaries(self, level, performance, expected):
        """Adjusted level bands select the right difficulty."""
        assert PatternGenerator.calculate_difficulty(level, performance) == expected

    def test_first_level_with_default_performance_is_easy(self):
        assert PatternGenerator.calculate_difficulty(1, 0.5) == Difficulty.EASY

    def test_zero_performance_is_always_easy(self):
        assert PatternGenerator.calculate_difficulty(500, 0.0) == Difficulty.EASY

    def test_monotonic_in_level(self):
        """Difficulty never drops as the level rises."""
        ordinals = [
            PatternGenerator.calculate_difficulty(level, 0.8).ordinal
            for level in range(0, 30)
        ]
        assert ordinals == sorted(ordinals)

    def test_performance_is_clamped(self):
        """Out-of-range performance is clamped to [0, 1]."""
        assert PatternGenerator.calculate_difficulty(5, 2.0) == Difficulty.MEDIUM
        assert PatternGenerator.calculate_difficulty(20, -1.0) == Difficulty.EASY


class TestGeneratePattern:
    """Tests for pattern construction."""

    def setup_method(self):
        self.generator = PatternGenerator(rng=random.Random(7))

    def test_length_matches_difficulty(self):
        pattern = self.generator.generate_pattern(level=8, performance_score=1.0)

        assert pattern.difficulty == Difficulty.HARD
        assert len(pattern) == 5

    def test_symbols_come_from_standard_palette(self):
        for _ in range(20):
            pattern = self.generator.generate_pattern(level=20, performance_score=1.0)
            assert all(symbol in STANDARD_PALETTE for symbol in pattern)

    def test_symbols_come_from_high_contrast_palette(self):
        pattern = self.generator.generate_pattern(
            level=20, palette_mode=PaletteMode.HIGH_CONTRAST, performance_score=1.0
        )

        assert all(symbol in HIGH_CONTRAST_PALETTE for symbol in pattern)

    def test_same_seed_gives_same_pattern(self):
        first = PatternGenerator(rng=random.Random(99)).generate_pattern(12, performance_score=1.0)
        second = PatternGenerator(rng=random.Random(99)).generate_pattern(12, performance_score=1.0)

        assert first == second

    def test_symbols_may_repeat(self):
        """Sampling is with replacement."""
        seen_repeat = False
        for _ in range(200):
            pattern = self.generator.generate_pattern(level=12, performance_score=1.0)
            if len({symbol.name for symbol in pattern}) < len(pattern):
                seen_repeat = True
                break

        assert seen_repeat


class TestMemoryTime:
    """Tests for the memorize-phase budget."""

    def setup_method(self):
        self.generator = PatternGenerator()

    def test_expert_level_10(self):
        """8.0 - 4*0.5 - 10*0.1 = 5.0 seconds."""
        assert self.generator.calculate_memory_time(Difficulty.EXPERT, level=10) == 5.0

    def test_easy_level_1(self):
        assert self.generator.calculate_memory_time(Difficulty.EASY, level=1) == 7.4

    def test_floors_at_minimum(self):
        assert self.generator.calculate_memory_time(Difficulty.EASY, level=100) == 3.0

    def test_milliseconds_variant(self):
        assert self.generator.calculate_memory_time_ms(Difficulty.MEDIUM, level=3) == 6_700

    def test_non_increasing_in_level_and_difficulty(self):
        for difficulty in Difficulty:
            times = [self.generator.calculate_memory_time(difficulty, level) for level in range(80)]
            assert times == sorted(times, reverse=True)

        by_difficulty = [self.generator.calculate_memory_time(d, 5) for d in Difficulty]
        assert by_difficulty == sorted(by_difficulty, reverse=True)


class TestCalculatePoints:
    """Tests for round scoring."""

    def setup_method(self):
        self.generator = PatternGenerator()

    def test_medium_half_time_remaining(self):
        """base=200, bonus=floor(0.5*200*1.5)=150."""
        assert self.generator.calculate_points(Difficulty.MEDIUM, 2.0, 4.0) == 350

    def test_no_time_remaining_is_base_only(self):
        assert self.generator.calculate_points(Difficulty.EXPERT, 0.0, 5.0) == 400

    def test_full_time_remaining(self):
        assert self.generator.calculate_points(Difficulty.EASY, 7.4, 7.4) == 250

    def test_bonus_is_floored(self):
        """base=300, bonus=floor(0.25*300*1.5)=floor(112.5)=112."""
        assert self.generator.calculate_points(Difficulty.HARD, 1.0, 4.0) == 412

    def test_zero_total_time_raises(self):
        with pytest.raises(ValueError, match="total_time"):
            self.generator.calculate_points(Difficulty.EASY, 1.0, 0.0)
