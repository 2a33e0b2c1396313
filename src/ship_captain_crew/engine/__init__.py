"""
Ship, Captain & Crew Game Engine.

Pure Python game logic with zero UI/storage dependencies.
Handles dice rolling, holding, scoring and round/game winners.
"""

from ship_captain_crew.engine.base import (
    DiceType,
    DieNotFound,
    DieView,
    GameConfig,
    GameEngineError,
    InvalidConfiguration,
    PlayerStanding,
    RoundResult,
    TurnPhase,
)
from ship_captain_crew.engine.die import Die
from ship_captain_crew.engine.player import Player
from ship_captain_crew.engine.ship_captain_crew import ShipCaptainCrewEngine

__all__ = [
    # Data Classes
    "GameConfig",
    "DieView",
    "PlayerStanding",
    "RoundResult",
    # Enums
    "DiceType",
    "TurnPhase",
    # Errors
    "GameEngineError",
    "InvalidConfiguration",
    "DieNotFound",
    # Game objects
    "Die",
    "Player",
    "ShipCaptainCrewEngine",
]
