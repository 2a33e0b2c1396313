"""
Ship, Captain & Crew - Player

Per-seat score and roll counters plus the win/loss record kept across rounds.
"""

from ship_captain_crew.engine.base import PlayerStanding


class Player:
    """A seat at the table."""

    def __init__(self, player_number: int) -> None:
        self._player_number = player_number
        self.score = 0
        self.rolls_used = 0
        self.wins = 0
        self.losses = 0

    @property
    def player_number(self) -> int:
        return self._player_number

    def roll(self) -> None:
        """Record a roll. The engine decides whether the roll was allowed."""
        self.rolls_used += 1

    def add_to_score(self, delta: int) -> int:
        """
        Add points to this round's score.

        Returns:
            New score
        """
        self.score += delta
        return self.score

    def add_win(self) -> None:
        self.wins += 1

    def add_loss(self) -> None:
        self.losses += 1

    def reset(self) -> None:
        """Clear per-round state. Wins and losses are kept."""
        self.score = 0
        self.rolls_used = 0

    def standing(self) -> PlayerStanding:
        return PlayerStanding(
            player_number=self._player_number,
            score=self.score,
            rolls_used=self.rolls_used,
            wins=self.wins,
            losses=self.losses,
        )

    def __str__(self) -> str:
        return str(self.standing())
