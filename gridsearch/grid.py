"""
gridsearch/grid.py
------------------
Obstacle grid shared by every search run, plus a per-run visited overlay.

Key ideas:
- The obstacle matrix is built once and frozen (numpy array, not writeable).
- Each search run works on its own visited overlay. `fresh()` hands out a new
  Grid that shares the obstacles and starts with nothing visited, so two runs
  never see each other's marks.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

# Type alias for grid coordinates
Coord = Tuple[int, int]

# Character that marks a blocked cell in the textual grid layout
BLOCKED = "1"


class InvalidGridError(ValueError):
    """Declared grid dimensions disagree with the supplied obstacle data."""


class InvalidCoordinateError(ValueError):
    """A start or goal coordinate lies outside the grid."""


class Grid:
    """
    rows x cols map of passable / blocked cells.

    Args:
        obstacles: 2-D array-like, truthy where the cell is blocked.
    """

    def __init__(self, obstacles):
        blocked = np.array(obstacles, dtype=bool)
        if blocked.ndim != 2 or blocked.shape[0] < 1 or blocked.shape[1] < 1:
            raise InvalidGridError(f"Grid must be a non-empty 2-D matrix (got shape {blocked.shape}).")
        blocked.flags.writeable = False
        self._blocked = blocked
        self._visited = np.zeros(blocked.shape, dtype=bool)

    @classmethod
    def from_rows(cls, rows: int, cols: int, data: Sequence[Sequence], blocked: str = BLOCKED) -> "Grid":
        """
        Build a grid from raw row data (strings or sequences of cells).

        Only the first `cols` entries of each row are read. Boolean cells are
        blocked when True; any other cell is blocked when it equals `blocked`
        (compared as a string).

        Raises:
            InvalidGridError if the row count differs from `rows`, a row is
            shorter than `cols`, or either dimension is < 1.
        """
        if rows < 1 or cols < 1:
            raise InvalidGridError(f"Grid dimensions must be positive (got {rows}x{cols}).")
        if len(data) != rows:
            raise InvalidGridError(f"Expected {rows} rows, got {len(data)}.")

        matrix = np.zeros((rows, cols), dtype=bool)
        for r, row in enumerate(data):
            if len(row) < cols:
                raise InvalidGridError(f"Row {r} has {len(row)} columns, expected {cols}.")
            for c in range(cols):
                cell = row[c]
                if isinstance(cell, (bool, np.bool_)):
                    matrix[r, c] = bool(cell)
                else:
                    matrix[r, c] = str(cell) == blocked
        return cls(matrix)

    # --- shape ---
    @property
    def rows(self) -> int:
        return int(self._blocked.shape[0])

    @property
    def cols(self) -> int:
        return int(self._blocked.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def obstacles(self) -> np.ndarray:
        """Read-only boolean matrix, True where blocked."""
        return self._blocked

    # --- cell queries ---
    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_blocked(self, coord: Coord) -> bool:
        r, c = coord
        return bool(self._blocked[r, c])

    def is_passable(self, coord: Coord) -> bool:
        """True iff `coord` is inside the grid and not blocked."""
        return self.in_bounds(coord) and not self.is_blocked(coord)

    # --- run-scoped state ---
    def mark_visited(self, coord: Coord) -> None:
        r, c = coord
        self._visited[r, c] = True

    def is_visited(self, coord: Coord) -> bool:
        r, c = coord
        return bool(self._visited[r, c])

    def visited_count(self) -> int:
        return int(self._visited.sum())

    def fresh(self) -> "Grid":
        """Same obstacles, empty visited overlay."""
        twin = Grid.__new__(Grid)
        twin._blocked = self._blocked
        twin._visited = np.zeros(self._blocked.shape, dtype=bool)
        return twin

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, blocked={int(self._blocked.sum())})"
