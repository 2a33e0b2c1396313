"""
Ship, Captain & Crew - Game Engine

Stateful engine for the Ship, Captain & Crew dice game. A driver calls the
engine imperatively; the engine never performs I/O.

Game Rules:
    - Each player gets up to max_rolls rolls per turn, holding dice between rolls
    - A turn scores only if a 6 (ship), a 5 (captain) and a 4 (crew) are showing
    - The score is the sum of all dice minus 15, i.e. the remaining dice (cargo)
    - After every player has had a turn, the top score(s) win the round and
      everyone else takes a loss
    - Players are re-seated by score so the round leader goes first next round

The combination check looks at every die on the table, held or not. The
traditional game requires ship, captain and crew to be held; this engine
keeps the presence-only rule.
"""

from __future__ import annotations

import logging
import random
from typing import ClassVar, Sequence

from ship_captain_crew.engine.base import (
    CAPTAIN,
    CREW,
    CREW_TOTAL,
    SHIP,
    DiceType,
    DieNotFound,
    DieView,
    GameConfig,
    PlayerStanding,
    RoundResult,
    TurnPhase,
)
from ship_captain_crew.engine.die import Die
from ship_captain_crew.engine.player import Player
from ship_captain_crew.engine.validators import (
    validate_dice_values,
    validate_player_count,
    validate_positive,
)

logger = logging.getLogger(__name__)


class ShipCaptainCrewEngine:
    """
    Game state for one table of players.

    Owns its players and dice exclusively. Callers only see read-only views
    (PlayerStanding, DieView, tuples of dice values) and act through engine
    methods.
    """

    DICE_TYPE: ClassVar[DiceType] = DiceType.D6
    DEFAULT_DICE: ClassVar[int] = 5
    DEFAULT_MAX_ROLLS: ClassVar[int] = 3

    def __init__(
        self,
        num_players: int,
        num_dice: int = DEFAULT_DICE,
        max_rolls: int = DEFAULT_MAX_ROLLS,
        rng: random.Random | None = None,
    ) -> None:
        """
        Args:
            num_players: Number of seats (at least 2)
            num_dice: Number of dice on the table
            max_rolls: Rolls each player may take per turn
            rng: Optional random source for reproducible games

        Raises:
            InvalidConfiguration: If any count is out of range
        """
        validate_player_count(num_players)
        validate_positive(num_dice, "Number of dice")
        validate_positive(max_rolls, "Max rolls per turn")

        self._random = rng if rng is not None else random.Random()
        self._players = [Player(number) for number in range(1, num_players + 1)]
        self._dice = [
            Die(number, self.DICE_TYPE, self._random)
            for number in range(1, num_dice + 1)
        ]
        self._max_rolls = max_rolls
        self._current_index = 0
        self._turn_counter = 0
        self._phase = TurnPhase.AWAITING_ROLL

        logger.debug(
            "Created engine: %d players, %d dice, %d rolls per turn",
            num_players, num_dice, max_rolls,
        )

    @classmethod
    def from_config(
        cls, config: GameConfig, rng: random.Random | None = None
    ) -> ShipCaptainCrewEngine:
        """Create an engine from a validated GameConfig."""
        return cls(config.num_players, config.num_dice, config.max_rolls, rng=rng)

    # -- Read-only views ---------------------------------------------------

    @property
    def max_rolls(self) -> int:
        return self._max_rolls

    @property
    def num_players(self) -> int:
        return len(self._players)

    @property
    def current_player_index(self) -> int:
        return self._current_index

    @property
    def turn_counter(self) -> int:
        return self._turn_counter

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def current_player_number(self) -> int:
        return self._current_player.player_number

    @property
    def current_player_score(self) -> int:
        return self._current_player.score

    @property
    def current_player_rolls_used(self) -> int:
        return self._current_player.rolls_used

    @property
    def dice_values(self) -> tuple[int, ...]:
        """Face values in die-number order."""
        return tuple(die.face_value for die in self._dice)

    @property
    def held_dice_numbers(self) -> frozenset[int]:
        return frozenset(die.die_number for die in self._dice if die.is_held)

    @property
    def dice(self) -> tuple[DieView, ...]:
        """Dice in die-number order."""
        return tuple(die.view() for die in self._dice)

    def standings(self) -> tuple[PlayerStanding, ...]:
        """Players in current turn order."""
        return tuple(player.standing() for player in self._players)

    def dice_results(self) -> str:
        """One line per die: number, face value and held marker."""
        return "\n".join(str(die) for die in self._dice)

    @property
    def _current_player(self) -> Player:
        return self._players[self._current_index]

    # -- Rolling and holding -----------------------------------------------

    def can_current_player_roll(self) -> bool:
        """True while the current player has rolls left. Held dice are not considered."""
        return self._current_player.rolls_used < self._max_rolls

    def can_current_player_keep_rolling(self) -> bool:
        """True if the current player has rolls left and at least one die is free."""
        return self.can_current_player_roll() and not self.all_dice_held()

    def roll_dice(self, values: Sequence[int] | None = None) -> tuple[int, ...]:
        """
        Record a roll for the current player and roll every unheld die.

        The roll limit is not enforced here; check can_current_player_roll()
        first when it matters.

        Args:
            values: Optional predetermined faces, one per die in die-number
                order. Held dice ignore their entry.

        Returns:
            Face values after the roll

        Raises:
            ValueError: If values has the wrong length or an invalid face
        """
        if values is not None:
            values = validate_dice_values(values, self.DICE_TYPE, len(self._dice))

        self._current_player.roll()
        if values is None:
            for die in self._dice:
                die.roll()
        else:
            for die, value in zip(self._dice, values):
                die.roll(value)

        self._phase = TurnPhase.ROLLED
        logger.debug(
            "Player %d roll %d: %s",
            self.current_player_number, self.current_player_rolls_used, self.dice_values,
        )
        return self.dice_values

    def auto_hold(self, face_value: int) -> bool:
        """
        Hold one die showing face_value.

        Returns:
            False if no die shows face_value. True if a held die already
            shows it, or after holding the first unheld match by die number.
        """
        matches = [die for die in self._dice if die.face_value == face_value]
        if not matches:
            return False

        if any(die.is_held for die in matches):
            return True

        die = matches[0]
        die.hold()
        logger.debug("Auto-held die %d showing %d", die.die_number, face_value)
        return True

    def hold_by_die_number(self, die_number: int) -> None:
        """
        Hold the die with the given stable number (not face value).

        Raises:
            DieNotFound: If no die has that number
        """
        die = next((d for d in self._dice if d.die_number == die_number), None)
        if die is None:
            raise DieNotFound(die_number)
        die.hold()
        logger.debug("Held die %d showing %d", die_number, die.face_value)

    def all_dice_held(self) -> bool:
        return all(die.is_held for die in self._dice)

    def reset_dice(self) -> None:
        """Release every die. Face values are left as they are."""
        for die in self._dice:
            die.reset()

    # -- Scoring -------------------------------------------------------------

    def has_ship_captain_crew(self) -> bool:
        """True if a 6, a 5 and a 4 are all showing, held or not."""
        faces = set(self.dice_values)
        return {SHIP, CAPTAIN, CREW} <= faces

    def cargo(self) -> int:
        """Points the dice on the table are worth right now."""
        if not self.has_ship_captain_crew():
            return 0
        return sum(self.dice_values) - CREW_TOTAL

    def score_current_player(self) -> int:
        """
        Add the cargo to the current player's score.

        Call exactly once per turn; a second call counts the cargo again.

        Returns:
            Points awarded (0 without ship, captain and crew)
        """
        points = self.cargo()
        self._current_player.add_to_score(points)
        self._phase = TurnPhase.SCORED
        logger.debug(
            "Player %d scored %d (total %d)",
            self.current_player_number, points, self.current_player_score,
        )
        return points

    # -- Turn and round flow -------------------------------------------------

    def advance_to_next_player(self) -> bool:
        """
        Move to the next player in turn order.

        Returns:
            True if another player takes a turn this round, False if the
            current player was the last one (nothing changes)
        """
        if self._turn_counter + 1 >= len(self._players):
            return False

        self._turn_counter += 1
        self._current_index = self._turn_counter
        self._phase = TurnPhase.AWAITING_ROLL
        logger.debug("Turn passes to player %d", self.current_player_number)
        return True

    def reset_players(self) -> None:
        """Zero every player's score and roll count."""
        for player in self._players:
            player.reset()

    def finalize_round(self) -> RoundResult:
        """
        Rank players by score and award wins and losses.

        Players are re-seated by descending score (stable, so ties keep their
        previous order). Everyone on the top score gets a win; everyone else
        gets a loss.

        Returns:
            RoundResult; str() gives one line per player in the new order
        """
        self._players.sort(key=lambda player: player.score, reverse=True)
        top_score = self._players[0].score

        winners = []
        for player in self._players:
            if player.score == top_score:
                player.add_win()
                winners.append(player.player_number)
            else:
                player.add_loss()

        logger.info("Round finished: top score %d by players %s", top_score, winners)
        return RoundResult(
            standings=self.standings(),
            winners=tuple(winners),
            top_score=top_score,
        )

    def start_new_round(self) -> None:
        """
        Start the next round with the first seated player.

        After finalize_round() the list is sorted by score, so the previous
        round's leader goes first.
        """
        self._current_index = 0
        self._turn_counter = 0
        self._phase = TurnPhase.AWAITING_ROLL
        self.reset_players()
        logger.debug("New round; player %d starts", self.current_player_number)

    def overall_winner(self) -> PlayerStanding:
        """Player with the most wins. Ties go to the first in turn order."""
        best = self._players[0]
        for player in self._players[1:]:
            if player.wins > best.wins:
                best = player
        return best.standing()

    def overall_winner_report(self) -> str:
        return str(self.overall_winner())
