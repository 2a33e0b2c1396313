"""
Ship, Captain & Crew Session Hosting.

Isolated, lock-guarded game sessions with event delivery and snapshots.
"""

from ship_captain_crew.session.events import EventPayload, GameEvent
from ship_captain_crew.session.manager import GameSession, GameSessionManager, SessionNotFound
from ship_captain_crew.session.models import DieSnapshot, GameSnapshot, PlayerSnapshot

__all__ = [
    "DieSnapshot",
    "EventPayload",
    "GameEvent",
    "GameSession",
    "GameSessionManager",
    "GameSnapshot",
    "PlayerSnapshot",
    "SessionNotFound",
]
