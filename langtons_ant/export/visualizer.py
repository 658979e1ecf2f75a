"""Visualization and export for the Langton's Ant simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Visualizer:
    """
    Renders grid snapshots using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation

    Row 0 is drawn at the top, so "up" on screen is decreasing y.
    """

    # Color scheme
    COLORS = {
        'white': '#ECF0F1',  # Light gray
        'black': '#2C3E50',  # Dark blue-gray
        'ant': '#E74C3C',    # Red
    }

    # Marker per direction ordinal (Up, Right, Down, Left)
    MARKERS = ['^', '>', 'v', '<']

    def __init__(self, size: int):
        self.size = size
        self.frames: List[Image.Image] = []

    def _grid_to_rgb(self, grid: np.ndarray) -> np.ndarray:
        """Map a [size, size] color grid to an RGB image."""
        rgb = np.empty(grid.shape + (3,))
        rgb[:, :] = to_rgb(self.COLORS['white'])
        rgb[grid == 1] = to_rgb(self.COLORS['black'])
        return rgb

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        fig, ax = plt.subplots(figsize=(6, 6))

        ax.imshow(self._grid_to_rgb(state.grid), origin='upper', aspect='equal',
                  extent=[-0.5, self.size - 0.5, self.size - 0.5, -0.5],
                  interpolation='nearest')

        # Ant marker scaled to the cell size, with a floor for large grids
        markersize = max(3, min(12, 300 / self.size))
        ax.plot(state.ant.x, state.ant.y, self.MARKERS[state.ant.direction],
                color=self.COLORS['ant'], markersize=markersize,
                markeredgecolor='white', markeredgewidth=0.3)

        ax.set_title(f'Step {state.step} | Black cells: '
                     f'{int(state.metrics.get("black_cells", 0))} | '
                     f'Ant: ({state.ant.x}, {state.ant.y}) {state.ant.direction_name}')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')

        ax.set_xlim(-0.5, self.size - 0.5)
        ax.set_ylim(self.size - 0.5, -0.5)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
