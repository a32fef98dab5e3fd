"""
ColorQuest Configuration

Centralized settings, paths, and constants for the game engine.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "ColorQuest"
APP_AUTHOR = "ColorQuest"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores database)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    @property
    def database(self) -> Path:
        return self.data_dir / "colorquest.db"

    def ensure_directories(self) -> None:
        """Create the data directory."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Round, scoring and timing settings."""
    starting_lives: int = 3

    # Points per difficulty ordinal, before the time bonus
    base_points: int = 100
    time_bonus_multiplier: float = 1.5

    # Memorize phase budget in milliseconds
    max_memory_time_ms: int = 8_000
    min_memory_time_ms: int = 3_000
    difficulty_time_step_ms: int = 500
    level_time_step_ms: int = 100

    # Countdown tick interval in milliseconds
    tick_interval_ms: int = 100

    # Pause between a resolved round and the next one
    round_advance_delay_ms: int = 1_500

    # Rolling performance window
    performance_window: int = 5
    default_performance: float = 0.5


@dataclass(frozen=True)
class PracticeSettings:
    """Tutorial practice round settings."""
    pattern_length: int = 3

    # Practice symbols come from the first N standard symbols
    symbol_pool_size: int = 4

    display_duration_ms: int = 2_000
    retry_delay_ms: int = 1_000


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()
PRACTICE_SETTINGS = PracticeSettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()
