"""
gridsearch/grid_io.py
---------------------
Read and write the plain-text grid layout:

    <rows> <cols>
    <row 0 cells>          # '1' = blocked, anything else = passable
    ...
    <row rows-1 cells>
    <startRow> <startCol>
    <goalRow> <goalCol>
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from gridsearch.grid import BLOCKED, Coord, Grid, InvalidGridError


@dataclass
class GridSpec:
    """A parsed grid file: the obstacle grid plus its start and goal cells."""
    grid: Grid
    start: Coord
    goal: Coord


def _ints(tokens: List[str], what: str) -> List[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError as e:
        raise InvalidGridError(f"Could not read {what}: {e}") from e


def parse_grid_text(text: str, blocked: str = BLOCKED) -> GridSpec:
    """
    Parse the textual layout into a GridSpec.

    Raises:
        InvalidGridError on a bad header, missing/short rows, or missing start/goal.
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines or len(lines[0].split()) < 2:
        raise InvalidGridError("First line must hold '<rows> <cols>'.")
    rows, cols = _ints(lines[0].split()[:2], "grid dimensions")

    body = lines[1:1 + rows]
    if len(body) < rows:
        raise InvalidGridError(f"Expected {rows} grid rows, found {len(body)}.")
    grid = Grid.from_rows(rows, cols, body, blocked=blocked)

    tail = " ".join(lines[1 + rows:]).split()
    if len(tail) < 4:
        raise InvalidGridError("Missing start and goal coordinates after the grid rows.")
    sr, sc, gr, gc = _ints(tail[:4], "start/goal coordinates")
    return GridSpec(grid=grid, start=(sr, sc), goal=(gr, gc))


def load_grid(path: Union[str, Path], blocked: str = BLOCKED) -> GridSpec:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")
    return parse_grid_text(path.read_text(), blocked=blocked)


def format_grid_text(grid: Grid, start: Coord, goal: Coord) -> str:
    """Inverse of parse_grid_text. No newline after the goal line."""
    out = [f"{grid.rows} {grid.cols}"]
    for row in grid.obstacles:
        out.append("".join("1" if cell else "0" for cell in row))
    out.append(f"{start[0]} {start[1]}")
    out.append(f"{goal[0]} {goal[1]}")
    return "\n".join(out)


def save_grid(path: Union[str, Path], grid: Grid, start: Coord, goal: Coord) -> Path:
    path = Path(path)
    path.write_text(format_grid_text(grid, start, goal))
    return path


def format_path(path: Iterable[Coord]) -> str:
    """'(0, 0) (0, 1) ...' in path order."""
    return " ".join(f"({r}, {c})" for r, c in path)
