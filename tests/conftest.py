"""
Ship, Captain & Crew - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from ship_captain_crew.engine.ship_captain_crew import ShipCaptainCrewEngine


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Five-dice rolls with the points they are worth.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        "low_cargo": ((6, 5, 4, 1, 1), 2, "Ship, captain, crew + 1, 1"),
        "mixed_cargo": ((6, 5, 4, 2, 3), 5, "Ship, captain, crew + 2, 3"),
        "max_cargo": ((6, 6, 5, 4, 6), 12, "Ship, captain, crew + 6, 6"),
        "shuffled": ((3, 4, 2, 6, 5), 5, "Order does not matter"),
        "no_crew": ((6, 5, 3, 3, 3), 0, "Missing the 4"),
        "no_captain": ((6, 6, 4, 4, 1), 0, "Missing the 5"),
        "no_ship": ((5, 4, 5, 4, 3), 0, "Missing the 6"),
    }


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def engine(rng) -> ShipCaptainCrewEngine:
    """Two players, five dice, three rolls."""
    return ShipCaptainCrewEngine(num_players=2, num_dice=5, max_rolls=3, rng=rng)


@pytest.fixture
def four_player_engine(rng) -> ShipCaptainCrewEngine:
    return ShipCaptainCrewEngine(num_players=4, num_dice=5, max_rolls=3, rng=rng)


def play_round(engine: ShipCaptainCrewEngine, rolls: list[tuple[int, ...]]):
    """Give each player in turn order one scripted roll and score it."""
    for index, values in enumerate(rolls):
        engine.roll_dice(values)
        engine.score_current_player()
        engine.reset_dice()
        advanced = engine.advance_to_next_player()
        assert advanced == (index < len(rolls) - 1)
    return engine.finalize_round()


@pytest.fixture
def round_player():
    """The play_round helper, for tests that script whole rounds."""
    return play_round
