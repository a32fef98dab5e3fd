"""
ColorQuest Services

Application services for event handling and settings persistence.
"""

from services.event_bus import EventBus
from services.settings_repository import (
    SettingsRepository,
    InMemorySettingsRepository,
    SqlSettingsRepository,
)

__all__ = [
    "EventBus",
    "SettingsRepository",
    "InMemorySettingsRepository",
    "SqlSettingsRepository",
]
