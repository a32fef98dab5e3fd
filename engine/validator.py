"""
Validator - Compares a player's submission against the target pattern.
"""

from typing import Sequence

from models.pattern import Pattern
from models.symbol import Symbol


def validate_names(selection: Sequence[Symbol], target: Sequence[Symbol]) -> bool:
    """Exact, order-sensitive match by symbol name."""
    if len(selection) != len(target):
        return False
    return all(chosen.name == expected.name for chosen, expected in zip(selection, target))


def validate(selection: Sequence[Symbol], pattern: Pattern) -> bool:
    """
    Check a submission against a pattern.

    No partial credit: a wrong length or any differing symbol fails.
    """
    return validate_names(selection, pattern.symbols)
