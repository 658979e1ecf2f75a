"""Ant orientation and the Langton's Ant turn rule."""

from enum import Enum, IntEnum
from typing import Callable, Dict, Tuple

from .grid import WHITE, BLACK


class Direction(IntEnum):
    """
    Four-valued clockwise orientation.

    The ordinals are observable through AntEngine.direction() and must not change.
    """
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn_right(self) -> "Direction":
        """Quarter-turn clockwise."""
        return Direction((self + 1) % 4)

    def turn_left(self) -> "Direction":
        """Quarter-turn counter-clockwise."""
        return Direction((self - 1) % 4)

    @property
    def offset(self) -> Tuple[int, int]:
        """Move vector (dx, dy). y grows downward."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


# (color, current direction) -> next direction
# White turns clockwise, black turns counter-clockwise.
TURN_TABLE: Dict[Tuple[int, Direction], Direction] = {
    (WHITE, Direction.UP): Direction.RIGHT,
    (WHITE, Direction.RIGHT): Direction.DOWN,
    (WHITE, Direction.DOWN): Direction.LEFT,
    (WHITE, Direction.LEFT): Direction.UP,
    (BLACK, Direction.UP): Direction.LEFT,
    (BLACK, Direction.RIGHT): Direction.UP,
    (BLACK, Direction.DOWN): Direction.RIGHT,
    (BLACK, Direction.LEFT): Direction.DOWN,
}


def turn(color: int, direction: Direction) -> Direction:
    """Look up the next direction for an ant on a cell of the given color."""
    return TURN_TABLE[(color, direction)]


class TurnOrder(Enum):
    """Which color the turn is decided from within a step."""
    DECIDE_THEN_TOGGLE = "decide_then_toggle"  # canonical Langton's Ant
    TOGGLE_THEN_DECIDE = "toggle_then_decide"


# Each rule receives the color *before* this step's toggle.
TurnRule = Callable[[int, Direction], Direction]

TURN_RULES: Dict[TurnOrder, TurnRule] = {
    TurnOrder.DECIDE_THEN_TOGGLE: turn,
    TurnOrder.TOGGLE_THEN_DECIDE: lambda color, direction: turn(1 - color, direction),
}
