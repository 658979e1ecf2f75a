"""Configuration dataclasses and YAML loader for the Langton's Ant simulation."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path
import yaml

from .model.direction import TurnOrder


@dataclass
class GridConfig:
    size: int = 101


@dataclass
class SimulationConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    max_steps: int = 11000
    turn_order: TurnOrder = TurnOrder.DECIDE_THEN_TOGGLE

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    gif_interval: int = 100  # buffer a GIF frame every N steps
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))

    def __post_init__(self) -> None:
        self.turn_order = _parse_turn_order(self.turn_order)
        self.validate()

    def validate(self) -> None:
        """Check that driver parameters are in valid ranges."""
        # grid.size is validated by the engine itself (InvalidSize)
        for name in ("max_steps", "gif_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")


def _parse_turn_order(value: Any) -> TurnOrder:
    """Accept a TurnOrder or its string value."""
    try:
        return TurnOrder(value)
    except ValueError:
        valid = [t.value for t in TurnOrder]
        raise ValueError(f"turn_order must be one of {valid}, got {value!r}") from None


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section; a missing or empty section is {}."""
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping, got {type(section).__name__}")
    return section


def config_from_dict(raw: Optional[Dict[str, Any]]) -> SimulationConfig:
    """Build a config from parsed YAML data. Missing sections use defaults."""
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping, got {type(raw).__name__}")

    defaults = SimulationConfig()

    grid_raw = _section(raw, 'grid')
    grid = GridConfig(size=grid_raw.get('size', defaults.grid.size))

    sim_raw = _section(raw, 'simulation')
    rule_raw = _section(raw, 'rule')
    export_raw = _section(raw, 'export')

    return SimulationConfig(
        grid=grid,
        max_steps=sim_raw.get('max_steps', defaults.max_steps),
        turn_order=rule_raw.get('turn_order', defaults.turn_order),
        csv_enabled=export_raw.get('csv', defaults.csv_enabled),
        snapshot_enabled=export_raw.get('snapshot', defaults.snapshot_enabled),
        gif_enabled=export_raw.get('gif', defaults.gif_enabled),
        gif_interval=export_raw.get('gif_interval', defaults.gif_interval)
    )


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return config_from_dict(raw)
