"""
Ship, Captain & Crew - Game Engine Base Classes

This module defines the foundational data structures, enums and errors used
throughout the game engine. Value objects handed to callers are frozen
dataclasses so that no caller can reach back into engine-owned state.
"""

from dataclasses import dataclass
from enum import Enum, auto


class DiceType(Enum):
    """Type of dice used in the game."""
    D6 = 6


class TurnPhase(Enum):
    """Where the current player is within their turn."""
    AWAITING_ROLL = auto()
    ROLLED = auto()
    SCORED = auto()


# Faces that must all be showing to score
SHIP = 6
CAPTAIN = 5
CREW = 4
CREW_TOTAL = SHIP + CAPTAIN + CREW


class GameEngineError(Exception):
    """Base class for game engine errors."""


class InvalidConfiguration(GameEngineError, ValueError):
    """Raised when an engine is configured with impossible counts."""


class DieNotFound(GameEngineError, LookupError):
    """Raised when no die carries the requested die number."""

    def __init__(self, die_number: int) -> None:
        super().__init__(f"No die with number {die_number}.")
        self.die_number = die_number


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        num_players: Number of seats (at least 2)
        num_dice: Number of dice on the table
        max_rolls: Rolls each player may take per turn
    """
    num_players: int
    num_dice: int = 5
    max_rolls: int = 3

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.num_players < 2:
            raise InvalidConfiguration("Enter at least two players.")
        if self.num_dice < 1:
            raise InvalidConfiguration(
                f"Number of dice must be positive, got {self.num_dice}."
            )
        if self.max_rolls < 1:
            raise InvalidConfiguration(
                f"Max rolls per turn must be positive, got {self.max_rolls}."
            )


@dataclass(frozen=True)
class PlayerStanding:
    """
    Read-only view of a player's position in the game.

    Attributes:
        player_number: Seat number assigned at creation (1-based)
        score: Points scored this round
        rolls_used: Rolls taken this turn
        wins: Rounds won so far
        losses: Rounds lost so far
    """
    player_number: int
    score: int
    rolls_used: int
    wins: int
    losses: int

    def __str__(self) -> str:
        return (
            f"Player {self.player_number}: Score {self.score}, "
            f"Wins {self.wins}, Losses {self.losses}"
        )


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a finished round.

    Attributes:
        standings: Players in their new turn order, after wins/losses were awarded
        winners: Player numbers that shared the top score
        top_score: The highest score of the round
    """
    standings: tuple[PlayerStanding, ...]
    winners: tuple[int, ...]
    top_score: int

    def __str__(self) -> str:
        return "\n".join(str(standing) for standing in self.standings)


@dataclass(frozen=True)
class DieView:
    """
    Read-only view of one die.

    Attributes:
        die_number: Stable identifier (1-based)
        face_value: Face currently showing
        is_held: Whether the die sits out of the next roll
    """
    die_number: int
    face_value: int
    is_held: bool
