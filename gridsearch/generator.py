# Random obstacle grids for benchmarking the heuristics against each other.
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from gridsearch.grid import Coord, Grid


def generate_grid(
    rows: int = 99,
    cols: int = 99,
    density: float = 0.2,
    margin: int = 10,
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    """
    Random obstacle grid.

    Cells with row >= margin and col >= margin are blocked with probability
    `density`. The top/left margin band and the last row and column stay
    clear, so the default start (0, 0) and goal (rows-1, cols-1) are open.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1] (got {density}).")
    rng = rng if rng is not None else np.random.default_rng()

    blocked = rng.random((rows, cols)) < density
    blocked[:margin, :] = False
    blocked[:, :margin] = False
    blocked[rows - 1, :] = False
    blocked[:, cols - 1] = False
    return Grid(blocked)


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """Top-left start, bottom-right goal."""
    return (0, 0), (rows - 1, cols - 1)
