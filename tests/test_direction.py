"""
Tests for orientation and the turn table.
"""

import pytest

from langtons_ant.model.direction import (
    Direction, TurnOrder, TURN_TABLE, TURN_RULES, turn,
)
from langtons_ant.model.grid import WHITE, BLACK


class TestDirection:
    """Tests for the Direction enum."""

    def test_ordinals(self):
        """Ordinal mapping is Up=0, Right=1, Down=2, Left=3."""
        assert [int(d) for d in (Direction.UP, Direction.RIGHT,
                                 Direction.DOWN, Direction.LEFT)] == [0, 1, 2, 3]

    def test_clockwise_cycle(self):
        """Four right turns return to the start, visiting each direction."""
        d = Direction.UP
        seen = []
        for _ in range(4):
            d = d.turn_right()
            seen.append(d)
        assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]

    @pytest.mark.parametrize("d", list(Direction))
    def test_left_undoes_right(self, d):
        assert d.turn_right().turn_left() == d

    def test_offsets(self):
        """Up decreases y; Right increases x."""
        assert Direction.UP.offset == (0, -1)
        assert Direction.RIGHT.offset == (1, 0)
        assert Direction.DOWN.offset == (0, 1)
        assert Direction.LEFT.offset == (-1, 0)


class TestTurnTable:
    """Tests for the turn table."""

    def test_total(self):
        """Every (color, direction) pair has exactly one entry."""
        assert set(TURN_TABLE) == {(c, d) for c in (WHITE, BLACK) for d in Direction}

    @pytest.mark.parametrize("d", list(Direction))
    def test_white_turns_right(self, d):
        assert turn(WHITE, d) == d.turn_right()

    @pytest.mark.parametrize("d", list(Direction))
    def test_black_turns_left(self, d):
        assert turn(BLACK, d) == d.turn_left()


class TestTurnOrder:
    """Tests for the toggle/turn ordering option."""

    def test_values(self):
        assert TurnOrder("decide_then_toggle") is TurnOrder.DECIDE_THEN_TOGGLE
        assert TurnOrder("toggle_then_decide") is TurnOrder.TOGGLE_THEN_DECIDE

    def test_rule_per_order(self):
        """Toggle-then-decide inverts the color the turn is based on."""
        canonical = TURN_RULES[TurnOrder.DECIDE_THEN_TOGGLE]
        variant = TURN_RULES[TurnOrder.TOGGLE_THEN_DECIDE]
        assert canonical(WHITE, Direction.UP) == Direction.RIGHT
        assert variant(WHITE, Direction.UP) == Direction.LEFT
        assert variant(BLACK, Direction.UP) == Direction.RIGHT
