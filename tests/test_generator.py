import numpy as np
import pytest

from gridsearch.astar import search
from gridsearch.generator import default_endpoints, generate_grid
from gridsearch.heuristics import manhattan


def test_seeded_generation_is_reproducible():
    a = generate_grid(20, 20, rng=np.random.default_rng(3))
    b = generate_grid(20, 20, rng=np.random.default_rng(3))
    assert (a.obstacles == b.obstacles).all()


def test_margin_and_last_row_col_stay_clear():
    grid = generate_grid(30, 25, density=0.9, margin=10, rng=np.random.default_rng(0))
    blocked = grid.obstacles
    assert not blocked[:10, :].any(), "top margin band must be clear"
    assert not blocked[:, :10].any(), "left margin band must be clear"
    assert not blocked[-1, :].any() and not blocked[:, -1].any()
    assert blocked.any()


def test_density_extremes():
    assert not generate_grid(15, 15, density=0.0).obstacles.any()
    full = generate_grid(15, 15, density=1.0, margin=10)
    assert full.obstacles[10:14, 10:14].all()
    assert int(full.obstacles.sum()) == 16


def test_bad_density_raises():
    with pytest.raises(ValueError):
        generate_grid(10, 10, density=1.5)


def test_default_endpoints_always_connected():
    rows, cols = 40, 40
    start, goal = default_endpoints(rows, cols)
    assert (start, goal) == ((0, 0), (39, 39))
    for seed in range(5):
        grid = generate_grid(rows, cols, rng=np.random.default_rng(seed))
        result = search(grid, start, goal, manhattan)
        assert result.cost == manhattan(start, goal)
