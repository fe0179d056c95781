"""Game service module.

Provides:
- Game engine processing (engine/)
- State stores and notification sinks
- The GameModule facade the host drives
"""

# Re-export from engine for convenience
from .engine import (
    ConfigureWagerAction,
    FatalInvariantError,
    GameAction,
    HostInterface,
    PlayAction,
    ProcessResult,
    build_action_from_payload,
    process_action,
)
from .module import GameModule
from .notifications import (
    InMemoryNotificationSink,
    NotificationSink,
    RedisNotificationSink,
)
from .store import GameStateStore, InMemoryGameStateStore, RedisGameStateStore

__all__ = [
    # Module
    "GameModule",
    # Storage
    "GameStateStore",
    "InMemoryGameStateStore",
    "RedisGameStateStore",
    # Notifications
    "NotificationSink",
    "InMemoryNotificationSink",
    "RedisNotificationSink",
    # Engine
    "GameAction",
    "ConfigureWagerAction",
    "PlayAction",
    "HostInterface",
    "ProcessResult",
    "FatalInvariantError",
    "process_action",
    "build_action_from_payload",
]
