# Distance estimates from a cell to the goal, plus a small name -> function registry.
from __future__ import annotations

import math
from typing import Callable, Dict, List, Union

from gridsearch.grid import Coord

Heuristic = Callable[[Coord, Coord], Union[int, float]]


def manhattan(a: Coord, b: Coord) -> int:
    """|r1-r2| + |c1-c2|. Admissible and consistent for 4-connected unit moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance. Never exceeds the 4-connected path length."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def euclidean_int(a: Coord, b: Coord) -> int:
    """Euclidean distance truncated toward zero (integer cost arithmetic)."""
    return int(euclidean(a, b))


_HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "euclidean_int": euclidean_int,
}

# Labels used when printing results
LABELS: Dict[str, str] = {
    "manhattan": "Manhattan Distance",
    "euclidean": "Euclidean Distance",
    "euclidean_int": "Euclidean Distance",
}


def list_heuristics() -> List[str]:
    return sorted(_HEURISTICS.keys())


def get_heuristic(name: str) -> Heuristic:
    """
    Look up a heuristic by name.

    Raises:
        ValueError if `name` is not registered.
    """
    if name not in _HEURISTICS:
        available = ", ".join(list_heuristics())
        raise ValueError(f"Unknown heuristic: '{name}'. Available: {available}")
    return _HEURISTICS[name]
