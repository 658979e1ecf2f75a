"""Summary report generation for the Langton's Ant simulation."""

from typing import Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: Optional[str], turn_order: str):
        self.config_path = config_path
        self.turn_order = turn_order
        self.peak_black_cells = 0
        self.first_wall_step: Optional[int] = None
        self.longest_wall_run = 0
        self._wall_run = 0
        self._prev_wall_hits = 0

    def update(self, step: int, black_cells: int, wall_hits: int) -> None:
        """Accumulate metrics per step from the engine counters."""
        if black_cells > self.peak_black_cells:
            self.peak_black_cells = black_cells

        # A step pressed against the wall bumps the wall_hits counter
        if wall_hits > self._prev_wall_hits:
            if self.first_wall_step is None:
                self.first_wall_step = step
            self._wall_run += 1
            self.longest_wall_run = max(self.longest_wall_run, self._wall_run)
        else:
            self._wall_run = 0

        self._prev_wall_hits = wall_hits

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        black_cells = int(metrics.get('black_cells', 0))
        black_pct = metrics.get('black_ratio', 0) * 100
        wall_hits = int(metrics.get('wall_hits', 0))
        ant = final_state.ant

        lines = [
            "",
            "=" * 80,
            "                    LANGTON'S ANT SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path or '(defaults)'}",
            f"Turn Order:    {self.turn_order}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Grid Size:             {final_state.size}x{final_state.size}",
            f"Total Steps:           {final_state.step}",
            f"Black Cells:           {black_cells} ({black_pct:.1f}%)",
            f"Peak Black Cells:      {self.peak_black_cells}",
            f"Final Position:        ({ant.x}, {ant.y}) facing {ant.direction_name}",
            "",
            "BOUNDARY CONTACT",
            "-" * 40,
            f"[{'X' if wall_hits > 0 else ' '}] Wall Hits: {wall_hits}",
            f"First Wall Contact:    "
            f"{'step ' + str(self.first_wall_step) if self.first_wall_step else '(none)'}",
            f"Longest Wall Run:      {self.longest_wall_run} steps",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'trajectory.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
