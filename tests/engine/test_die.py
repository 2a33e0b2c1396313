"""
Tests for Die and Player.
"""

import random

import pytest

from ship_captain_crew.engine.die import Die
from ship_captain_crew.engine.player import Player


class TestDie:
    """Tests for Die."""

    def test_new_die(self):
        die = Die(3)
        assert die.die_number == 3
        assert die.sides == 6
        assert die.face_value == 1
        assert not die.is_held

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        die = Die(1, rng=random.Random(7))
        for _ in range(200):
            assert 1 <= die.roll() <= 6

    def test_randomness(self):
        die = Die(1, rng=random.Random(7))
        assert len({die.roll() for _ in range(100)}) > 1

    def test_roll_with_value(self):
        die = Die(1)
        assert die.roll(4) == 4
        assert die.face_value == 4

    def test_roll_with_invalid_value(self):
        with pytest.raises(ValueError, match="Invalid die value 7"):
            Die(1).roll(7)

    def test_held_die_does_not_change(self):
        die = Die(1)
        die.roll(2)
        die.hold()
        for _ in range(50):
            die.roll()
        assert die.roll(6) == 2
        assert die.face_value == 2

    def test_hold_is_idempotent(self):
        die = Die(1)
        die.hold()
        die.hold()
        assert die.is_held

    def test_reset_keeps_face(self):
        die = Die(1)
        die.roll(5)
        die.hold()
        die.reset()
        assert not die.is_held
        assert die.face_value == 5

    def test_str(self):
        die = Die(2)
        die.roll(6)
        assert str(die) == "Die 2: 6"
        die.hold()
        assert str(die) == "Die 2: 6 (held)"

    def test_view(self):
        die = Die(4)
        die.roll(3)
        die.hold()
        view = die.view()
        assert (view.die_number, view.face_value, view.is_held) == (4, 3, True)


class TestPlayer:
    """Tests for Player."""

    def test_new_player(self):
        player = Player(4)
        assert player.player_number == 4
        assert (player.score, player.rolls_used, player.wins, player.losses) == (0, 0, 0, 0)

    def test_roll_counts_without_limit(self):
        player = Player(1)
        for _ in range(10):
            player.roll()
        assert player.rolls_used == 10

    def test_add_to_score(self):
        player = Player(1)
        assert player.add_to_score(5) == 5
        assert player.add_to_score(0) == 5
        assert player.add_to_score(7) == 12

    def test_wins_and_losses(self):
        player = Player(1)
        player.add_win()
        player.add_win()
        player.add_loss()
        assert player.wins == 2
        assert player.losses == 1

    def test_reset_keeps_record(self):
        player = Player(1)
        player.roll()
        player.add_to_score(9)
        player.add_win()
        player.add_loss()
        player.reset()
        assert player.score == 0
        assert player.rolls_used == 0
        assert player.wins == 1
        assert player.losses == 1

    def test_standing_and_str(self):
        player = Player(3)
        player.add_to_score(8)
        player.add_win()
        standing = player.standing()
        assert standing.player_number == 3
        assert standing.score == 8
        assert str(player) == "Player 3: Score 8, Wins 1, Losses 0"
