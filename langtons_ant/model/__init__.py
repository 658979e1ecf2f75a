"""Model package for the Langton's Ant engine."""

from .grid import GridState, InvalidSize, WHITE, BLACK
from .direction import Direction, TurnOrder, TURN_TABLE, turn
from .state import AntSnapshot, SimulationState
from .engine import AntEngine

__all__ = [
    'GridState',
    'InvalidSize',
    'WHITE',
    'BLACK',
    'Direction',
    'TurnOrder',
    'TURN_TABLE',
    'turn',
    'AntSnapshot',
    'SimulationState',
    'AntEngine',
]
