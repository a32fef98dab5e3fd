"""
Pattern and Difficulty models for a single puzzle round.
"""

import enum
from dataclasses import dataclass

from models.symbol import Symbol


class Difficulty(enum.Enum):
    """
    Pattern difficulty. The value is the ordinal used for scoring and
    memory-time reduction.
    """
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def sequence_length(self) -> int:
        """Number of symbols a pattern of this difficulty contains."""
        return SEQUENCE_LENGTHS[self]

    @property
    def display_name(self) -> str:
        return self.name.title()


SEQUENCE_LENGTHS = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 5,
    Difficulty.EXPERT: 6,
}


@dataclass(frozen=True)
class Pattern:
    """
    The target sequence for one round.

    Created by the PatternGenerator and owned by the active round.
    """
    symbols: tuple[Symbol, ...]
    difficulty: Difficulty

    def __post_init__(self):
        if len(self.symbols) != self.difficulty.sequence_length:
            raise ValueError(
                f"{self.difficulty.display_name} pattern needs "
                f"{self.difficulty.sequence_length} symbols, got {len(self.symbols)}"
            )

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __getitem__(self, index: int) -> Symbol:
        return self.symbols[index]
