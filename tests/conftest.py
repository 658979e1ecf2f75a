"""
Pytest configuration and fixtures for Langton's Ant tests.
"""

import pytest

from langtons_ant.config import SimulationConfig, GridConfig
from langtons_ant.model.engine import AntEngine
from langtons_ant.model.grid import GridState


@pytest.fixture
def small_grid() -> GridState:
    """3x3 all-white grid."""
    return GridState(3)


@pytest.fixture
def engine() -> AntEngine:
    """Canonical engine on the 3x3 grid used for the reference trace."""
    return AntEngine(3)


@pytest.fixture
def large_engine() -> AntEngine:
    """Grid large enough that the ant stays clear of the walls for a while."""
    return AntEngine(41)


@pytest.fixture
def quick_config(tmp_path) -> SimulationConfig:
    """Short run writing into a temporary directory."""
    return SimulationConfig(
        grid=GridConfig(size=9),
        max_steps=60,
        gif_interval=20,
        out_dir=tmp_path / "out",
    )
