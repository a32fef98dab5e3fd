"""
Pattern Generator - Builds puzzles with adaptive difficulty.

Also owns the timing and scoring formulas for a round, so the session
state machine never hard-codes game balance.
"""

import math
import random
from typing import Optional

from config import GAME_SETTINGS, GameSettings
from models.pattern import Difficulty, Pattern
from models.symbol import PaletteMode


# Adjusted-level lower bounds for each difficulty, highest first.
# Fixed game design constants, intentionally not part of GameSettings.
DIFFICULTY_THRESHOLDS = (
    (12.0, Difficulty.EXPERT),
    (7.0, Difficulty.HARD),
    (3.0, Difficulty.MEDIUM),
    (0.0, Difficulty.EASY),
)


class PatternGenerator:
    """
    Generates patterns and computes round timing and points.

    Usage:
        generator = PatternGenerator()
        pattern = generator.generate_pattern(level=4, palette_mode=PaletteMode.STANDARD,
                                             performance_score=0.8)
        seconds = generator.calculate_memory_time(pattern.difficulty, level=4)
    """

    def __init__(self, settings: GameSettings = GAME_SETTINGS,
                 rng: Optional[random.Random] = None):
        """
        Args:
            settings: Timing and scoring constants
            rng: Random source (pass a seeded Random for reproducible patterns)
        """
        self.settings = settings
        self.rng = rng or random.Random()

    @staticmethod
    def calculate_difficulty(level: int, performance_score: float) -> Difficulty:
        """
        Adaptive difficulty from level and rolling performance.

        Args:
            level: Current level (negative values count as 0)
            performance_score: 0.0 (poor) to 1.0 (excellent), clamped

        Returns:
            The difficulty whose threshold band contains level * performance
        """
        performance_score = min(max(performance_score, 0.0), 1.0)
        adjusted_level = max(level, 0) * performance_score

        for threshold, difficulty in DIFFICULTY_THRESHOLDS:
            if adjusted_level >= threshold:
                return difficulty
        return Difficulty.EASY

    def generate_pattern(self, level: int, palette_mode: PaletteMode = PaletteMode.STANDARD,
                         performance_score: float = 0.5) -> Pattern:
        """Build a pattern by sampling the palette uniformly, with replacement."""
        difficulty = self.calculate_difficulty(level, performance_score)
        palette = palette_mode.symbols
        symbols = tuple(self.rng.choice(palette) for _ in range(difficulty.sequence_length))
        return Pattern(symbols, difficulty)

    def calculate_memory_time_ms(self, difficulty: Difficulty, level: int) -> int:
        """Memorize-phase budget in milliseconds, floored at the minimum."""
        s = self.settings
        calculated = (
            s.max_memory_time_ms
            - difficulty.ordinal * s.difficulty_time_step_ms
            - level * s.level_time_step_ms
        )
        return max(calculated, s.min_memory_time_ms)

    def calculate_memory_time(self, difficulty: Difficulty, level: int) -> float:
        """Memorize-phase budget in seconds."""
        return self.calculate_memory_time_ms(difficulty, level) / 1000.0

    def calculate_points(self, difficulty: Difficulty, time_remaining: float,
                         total_time: float) -> int:
        """
        Points for a solved pattern.

        base = base_points * ordinal, plus a bonus proportional to the
        fraction of time left.

        Raises:
            ValueError: if total_time is not positive
        """
        if total_time <= 0:
            raise ValueError(f"total_time must be positive, got {total_time}")

        base = self.settings.base_points * difficulty.ordinal
        fraction = min(max(time_remaining, 0.0), total_time) / total_time
        bonus = math.floor(fraction * base * self.settings.time_bonus_multiplier)
        return base + bonus
