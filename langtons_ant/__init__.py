"""
Langton's Ant

A single-ant, two-color Langton's Ant stepper on a bounded, clamped grid.
"""

__version__ = "0.1.0"

from .model import AntEngine, Direction, GridState, InvalidSize, TurnOrder
from .host import Ant

__all__ = [
    "AntEngine",
    "Direction",
    "GridState",
    "InvalidSize",
    "TurnOrder",
    "Ant",
    "__version__",
]
