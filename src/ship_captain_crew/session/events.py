"""
Ship, Captain & Crew - Session Event Definitions

Event types and payloads emitted when a hosted game changes.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a hosted game."""

    SESSION_CREATED = auto()
    DICE_ROLLED = auto()
    DIE_HELD = auto()
    PLAYER_SCORED = auto()
    TURN_ADVANCED = auto()
    ROUND_FINALIZED = auto()
    ROUND_STARTED = auto()
    SESSION_CLOSED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    session_id: str
    player_number: int | None = None
    data: dict[str, Any] = field(default_factory=dict)
