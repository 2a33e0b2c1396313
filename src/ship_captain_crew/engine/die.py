"""
Ship, Captain & Crew - Die

A single die with a stable number, a face value and a held flag.
"""

import random

from ship_captain_crew.engine.base import DiceType, DieView
from ship_captain_crew.engine.validators import validate_die_value


class Die:
    """
    One die on the table.

    The face value only changes through roll(), and never while held.
    """

    def __init__(
        self,
        die_number: int,
        dice_type: DiceType = DiceType.D6,
        rng: random.Random | None = None,
    ) -> None:
        """
        Args:
            die_number: Stable identifier, distinct from the face value
            dice_type: Number of sides
            rng: Random source, shared between dice of one game (fresh when omitted)
        """
        self._die_number = die_number
        self._dice_type = dice_type
        self._random = rng if rng is not None else random.Random()
        self._face_value = 1
        self._is_held = False

    @property
    def die_number(self) -> int:
        return self._die_number

    @property
    def sides(self) -> int:
        return self._dice_type.value

    @property
    def face_value(self) -> int:
        return self._face_value

    @property
    def is_held(self) -> bool:
        return self._is_held

    def roll(self, value: int | None = None) -> int:
        """
        Roll the die unless it is held.

        Args:
            value: Optional predetermined face (for testing and scripted drivers)

        Returns:
            The face value after the roll
        """
        if self._is_held:
            return self._face_value

        if value is None:
            self._face_value = self._random.randint(1, self.sides)
        else:
            self._face_value = validate_die_value(value, self._dice_type)
        return self._face_value

    def hold(self) -> None:
        self._is_held = True

    def reset(self) -> None:
        """Release the die. The face value stays until the next roll."""
        self._is_held = False

    def view(self) -> DieView:
        return DieView(
            die_number=self._die_number,
            face_value=self._face_value,
            is_held=self._is_held,
        )

    def __str__(self) -> str:
        marker = " (held)" if self._is_held else ""
        return f"Die {self._die_number}: {self._face_value}{marker}"

    def __repr__(self) -> str:
        return (
            f"Die(die_number={self._die_number}, face_value={self._face_value}, "
            f"is_held={self._is_held})"
        )
