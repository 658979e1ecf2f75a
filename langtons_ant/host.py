"""
Host-facing adapter for the Langton's Ant engine.

Exposes exactly the four operations a rendering host calls (construct, step,
position, direction) using plain Python values, so the host never holds a
numpy array or any reference into engine storage.
"""

from typing import List

from .model.engine import AntEngine


class Ant:
    """Thin wrapper around AntEngine for foreign callers."""

    def __init__(self, size: int):
        self._engine = AntEngine(size)

    def step(self) -> List[int]:
        """Advance one step and return the row-major grid as a new list."""
        return self._engine.step().tolist()

    def x(self) -> int:
        return self._engine.x()

    def y(self) -> int:
        return self._engine.y()

    def direction(self) -> int:
        return self._engine.direction()
