"""
Ship, Captain & Crew - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from ship_captain_crew.engine.base import DiceType, InvalidConfiguration


def validate_die_value(value: int, dice_type: DiceType = DiceType.D6) -> int:
    """
    Validate a single face value.

    Raises:
        ValueError: If the value is not an integer within the die's range
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Die value must be an integer, got {type(value).__name__}.")

    max_value = dice_type.value
    if not (1 <= value <= max_value):
        raise ValueError(
            f"Invalid die value {value} for {dice_type.name}. "
            f"Must be between 1 and {max_value}."
        )
    return value


def validate_dice_values(
    values: Sequence[int],
    dice_type: DiceType = DiceType.D6,
    expected_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize a set of predetermined dice values.

    Args:
        values: Sequence of dice values to validate
        dice_type: Type of dice (determines valid range)
        expected_count: Exact number of values required (None = any)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if expected_count is not None and count != expected_count:
        raise ValueError(f"Expected {expected_count} dice values, got {count}.")

    for value in values_tuple:
        validate_die_value(value, dice_type)

    return values_tuple


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        InvalidConfiguration: If fewer than two players are requested
    """
    if not isinstance(count, int):
        raise InvalidConfiguration(
            f"Player count must be an integer, got {type(count).__name__}."
        )

    if count < 2:
        raise InvalidConfiguration("Enter at least two players.")

    return count


def validate_positive(count: int, name: str) -> int:
    """Validate a count that must be at least one."""
    if not isinstance(count, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise InvalidConfiguration(f"{name} must be positive, got {count}.")

    return count
