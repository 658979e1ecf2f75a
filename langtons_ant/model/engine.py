"""Stepping engine for Langton's Ant on a bounded grid."""

import numpy as np
from typing import Union, TYPE_CHECKING

from .grid import GridState
from .direction import Direction, TurnOrder, TURN_RULES
from .state import SimulationState, AntSnapshot

if TYPE_CHECKING:
    from ..config import SimulationConfig


class AntEngine:
    """
    Single ant walking a fixed-size two-color grid.

    Each call to step() performs one atomic cycle:
    1. Read the color under the ant
    2. Decide the new direction from that color
    3. Toggle the cell under the ant
    4. Turn
    5. Move one cell, clamped at the grid edge (no wraparound)
    6. Return a copy of the grid

    The engine is the only mutator of its grid and direction. It does no
    locking; callers sharing an engine across threads must serialize step().
    """

    def __init__(self, size: int,
                 turn_order: Union[TurnOrder, str] = TurnOrder.DECIDE_THEN_TOGGLE):
        # Both checks run before any state is assigned
        turn_order = TurnOrder(turn_order)
        grid = GridState(size)

        self.grid = grid
        self.size = grid.size
        self.turn_order = turn_order
        self._rule = TURN_RULES[turn_order]

        self._x = self.size // 2
        self._y = self.size // 2
        self._direction = Direction.UP

        self.current_step = 0
        self.wall_hits = 0

    @classmethod
    def from_config(cls, config: "SimulationConfig") -> "AntEngine":
        """Create an engine from a loaded configuration."""
        return cls(config.grid.size, config.turn_order)

    def step(self) -> np.ndarray:
        """Advance the ant by one step and return a flat row-major copy of the grid."""
        color = self.grid.read(self._x, self._y)
        new_direction = self._rule(color, self._direction)
        self.grid.toggle(self._x, self._y)
        self._direction = new_direction
        self._advance()

        self.current_step += 1
        return self.grid.snapshot()

    def _advance(self) -> None:
        """Move one cell forward, holding position against the wall."""
        dx, dy = self._direction.offset
        nx, ny = self._x + dx, self._y + dy

        if self.grid.in_bounds(nx, ny):
            self._x, self._y = nx, ny
        else:
            self.wall_hits += 1

    def run(self, steps: int) -> SimulationState:
        """Execute a number of steps and return the resulting state snapshot."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        for _ in range(steps):
            self.step()
        return self.get_state()

    def x(self) -> int:
        return self._x

    def y(self) -> int:
        return self._y

    def direction(self) -> int:
        """Current orientation as Up=0, Right=1, Down=2, Left=3."""
        return int(self._direction)

    def is_finished(self, max_steps: int) -> bool:
        """Check if the driver has issued its step budget."""
        return self.current_step >= max_steps

    def get_state(self) -> SimulationState:
        """Create a snapshot of the current engine state."""
        black_cells = self.grid.count_black()
        total_cells = self.size * self.size

        metrics = {
            'black_cells': black_cells,
            'black_ratio': black_cells / total_cells,
            'wall_hits': self.wall_hits,
        }

        return SimulationState(
            step=self.current_step,
            ant=AntSnapshot(
                x=self._x,
                y=self._y,
                direction=int(self._direction),
                direction_name=self._direction.name.lower()
            ),
            grid=self.grid.as_rows(),
            metrics=metrics
        )

    def __repr__(self) -> str:
        return (f"AntEngine(size={self.size}, pos=({self._x}, {self._y}), "
                f"direction={self._direction.name.lower()}, step={self.current_step})")
