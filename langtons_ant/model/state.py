"""State snapshot dataclasses for the Langton's Ant engine."""

from dataclasses import dataclass
from typing import Dict, Any
import numpy as np


@dataclass(frozen=True)
class AntSnapshot:
    """Immutable snapshot of the ant at a given time step."""
    x: int
    y: int
    direction: int       # Up=0, Right=1, Down=2, Left=3
    direction_name: str  # "up", "right", "down", "left"


@dataclass
class SimulationState:
    """Complete snapshot of engine state at a given time step."""
    step: int
    ant: AntSnapshot
    grid: np.ndarray           # Copy of the grid, indexed [y, x]
    metrics: Dict[str, float]  # black_cells, black_ratio, wall_hits

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    def to_csv_row(self) -> Dict[str, Any]:
        """Convert to CSV-compatible format."""
        return {
            "step": self.step,
            "x": self.ant.x,
            "y": self.ant.y,
            "direction": self.ant.direction_name,
            "black_cells": int(self.metrics.get("black_cells", 0)),
            "wall_hits": int(self.metrics.get("wall_hits", 0)),
        }
