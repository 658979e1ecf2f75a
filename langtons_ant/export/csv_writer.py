"""CSV trajectory export for the Langton's Ant simulation."""

import csv
from pathlib import Path
from typing import Optional, TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import SimulationState


class CSVWriter:
    """
    Exports the ant trajectory to CSV format incrementally.

    Output format:
        step,x,y,direction,black_cells,wall_hits
        1,51,50,right,1,0
        ...
    """

    FIELDNAMES = ['step', 'x', 'y', 'direction', 'black_cells', 'wall_hits']

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.file: Optional[TextIO] = None
        self.writer: Optional[csv.DictWriter] = None
        self._is_open = False

    def open(self) -> None:
        """Initialize file and write header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.FIELDNAMES)
        self.writer.writeheader()
        self._is_open = True

    def append(self, state: "SimulationState") -> None:
        """Write one row for the current step."""
        if not self._is_open:
            self.open()
        self.writer.writerow(state.to_csv_row())
        self.file.flush()  # Keep rows from an interrupted run

    def close(self) -> None:
        """Close file handle."""
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None
            self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
