"""
ColorQuest Game Engine

Core game logic: pattern generation, validation and the round state machine.
This module contains no GUI dependencies.
"""

from engine.pattern_generator import PatternGenerator
from engine.validator import validate, validate_names
from engine.countdown import Countdown
from engine.session import GameSession, GameState, SessionSnapshot
from engine.practice import PracticeRound

__all__ = [
    "PatternGenerator",
    "validate",
    "validate_names",
    "Countdown",
    "GameSession",
    "GameState",
    "SessionSnapshot",
    "PracticeRound",
]
