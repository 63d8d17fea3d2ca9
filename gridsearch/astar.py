"""
astar.py
========

A* search over a `Grid`, and a helper that compares several heuristics on
the same obstacle layout.

How this file fits in:
- `grid.py` answers "can I step here?" and keeps the per-run visited marks.
- `heuristics.py` supplies the h-cost functions.
- Scripts call `compare_heuristics(...)` and print / plot the PathResults.

Search rules:
- 4-connected moves only, step cost = 1.
- Neighbors are tried in the order right, down, left, up: (0,1), (1,0), (0,-1), (-1,0).
- Frontier is ordered by f = g + h; equal f pops first-in first-out.
- A finalized (visited) cell is never re-expanded, even if a cheaper route
  turns up later. With a consistent heuristic (Manhattan, Euclidean) this
  still returns a shortest path; with an inconsistent one it may not.
- "No path" is a normal result (`found=False`), never an exception.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from gridsearch.grid import Coord, Grid, InvalidCoordinateError
from gridsearch.heuristics import Heuristic

Cost = Union[int, float]

# Right, Down, Left, Up in (row, col)
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


# ──────────────────────────────────────────────────────────────────────────────
# Search state
# ──────────────────────────────────────────────────────────────────────────────
@dataclass
class SearchNode:
    """A cell reached during one run. `parent` is None only for the start node."""
    coord: Coord
    g: int
    h: Cost
    parent: Optional["SearchNode"] = None

    @property
    def f(self) -> Cost:
        return self.g + self.h


class Frontier:
    """
    Open set keyed by coordinate, popped in ascending f.

    Heap entries are [f, seq, node]; `seq` grows with every insertion so equal
    f values pop in insertion order. Replacing a coordinate's entry blanks the
    old one (node -> None) and pushes a new entry, which counts as a fresh
    insertion for tie-breaking.
    """

    def __init__(self):
        self._heap: List[list] = []
        self._entries: Dict[Coord, list] = {}
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        if node.coord in self._entries:
            self._entries[node.coord][-1] = None
        entry = [node.f, next(self._counter), node]
        self._entries[node.coord] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> SearchNode:
        """Remove and return the lowest-f node. Raises KeyError when empty."""
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not None:
                del self._entries[node.coord]
                return node
        raise KeyError("pop from an empty frontier")

    def get(self, coord: Coord) -> Optional[SearchNode]:
        entry = self._entries.get(coord)
        return entry[-1] if entry is not None else None

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class PathResult:
    """Outcome of one run. An unreachable goal gives found=False and an empty path."""
    heuristic: str
    path: List[Coord] = field(default_factory=list)
    expanded: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def cost(self) -> Optional[int]:
        """Number of moves along the path, or None if no path was found."""
        return len(self.path) - 1 if self.path else None


def reconstruct_path(node: SearchNode) -> List[Coord]:
    """Walk parent links back to the start and return the path start -> node."""
    path = []
    while node is not None:
        path.append(node.coord)
        node = node.parent
    path.reverse()
    return path


def neighbors(grid: Grid, coord: Coord) -> Iterator[Coord]:
    """In-bounds, passable orthogonal neighbors in DIRECTIONS order."""
    r, c = coord
    for dr, dc in DIRECTIONS:
        nb = (r + dr, c + dc)
        if grid.is_passable(nb):
            yield nb


# ──────────────────────────────────────────────────────────────────────────────
# A*
# ──────────────────────────────────────────────────────────────────────────────
def search(grid: Grid, start: Coord, goal: Coord, heuristic: Heuristic, name: Optional[str] = None) -> PathResult:
    """
    Run one A* search from `start` to `goal` on `grid`.

    Marks cells visited on `grid` itself; pass `grid.fresh()` to keep runs apart.

    Returns:
        PathResult with path [start, ..., goal], or found=False if unreachable.

    Raises:
        InvalidCoordinateError if `start` or `goal` is outside the grid.
    """
    start, goal = tuple(start), tuple(goal)
    for label, coord in (("start", start), ("goal", goal)):
        if not grid.in_bounds(coord):
            raise InvalidCoordinateError(f"{label} {coord} is outside the {grid.rows}x{grid.cols} grid.")

    result = PathResult(heuristic=name or getattr(heuristic, "__name__", "heuristic"))
    frontier = Frontier()
    frontier.push(SearchNode(start, 0, heuristic(start, goal)))

    while len(frontier):
        current = frontier.pop()

        if current.coord == goal:
            result.path = reconstruct_path(current)
            return result

        # Only a blocked start can get here; neighbors are pre-filtered.
        if grid.is_blocked(current.coord):
            continue

        grid.mark_visited(current.coord)
        result.expanded += 1

        for nb in neighbors(grid, current.coord):
            if grid.is_visited(nb):
                continue
            g_new = current.g + 1

            held = frontier.get(nb)
            if held is not None and g_new >= held.g:
                continue
            frontier.push(SearchNode(nb, g_new, heuristic(nb, goal), current))

    return result  # no path


def compare_heuristics(grid: Grid, start: Coord, goal: Coord, heuristics: Mapping[str, Heuristic]) -> List[PathResult]:
    """
    Run `search` once per heuristic, in mapping order, each on a fresh overlay.

    The visited state of `grid` itself is left untouched.
    """
    return [search(grid.fresh(), start, goal, fn, name=name) for name, fn in heuristics.items()]
