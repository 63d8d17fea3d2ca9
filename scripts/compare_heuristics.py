# scripts/compare_heuristics.py
# Load one grid file and run A* once per heuristic, each on its own visited overlay.
import sys
import argparse
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from gridsearch.astar import PathResult, compare_heuristics
from gridsearch.grid import Grid
from gridsearch.grid_io import format_path, load_grid
from gridsearch.heuristics import LABELS, get_heuristic, list_heuristics

# ----- config (tweak here) -----
# Euclidean first, then Manhattan; integer-cast Euclidean matches integer cost arithmetic.
DEFAULT_HEURISTICS = ["euclidean_int", "manhattan"]


@dataclass
class CompareConfig:
    """Configuration for one comparison run."""
    grid_file: Path
    heuristics: List[str] = field(default_factory=lambda: list(DEFAULT_HEURISTICS))
    plot: bool = False
    save: Optional[Path] = None   # write the figure here instead of showing it


def run_comparison(config: CompareConfig):
    """Return (GridSpec, list[PathResult]) for the configured grid file."""
    spec = load_grid(config.grid_file)
    heuristics = {name: get_heuristic(name) for name in config.heuristics}
    results = compare_heuristics(spec.grid, spec.start, spec.goal, heuristics)
    return spec, results


def report(result: PathResult) -> str:
    """Text block for one run, e.g. 'Path using Manhattan Distance' + the path."""
    label = LABELS.get(result.heuristic, result.heuristic)
    if not result.found:
        return f"Path using {label}\nNo path found. (expanded {result.expanded} cells)"
    return (f"Path using {label}\n"
            f"Path: {format_path(result.path)}\n"
            f"Length: {result.cost} moves, expanded {result.expanded} cells")


def plot_paths(grid: Grid, results: List[PathResult], save: Optional[Path] = None):
    """Draw obstacles and each heuristic's path on one axis."""
    import matplotlib
    if save is not None:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(grid.obstacles, cmap="Greys", interpolation="nearest")
    for result in results:
        if not result.found:
            continue
        rows = [r for r, _ in result.path]
        cols = [c for _, c in result.path]
        ax.plot(cols, rows, linewidth=2, label=f"{result.heuristic} ({result.cost} moves)")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    ax.set_title(f"A* paths on a {grid.rows}x{grid.cols} grid")
    if any(r.found for r in results):
        ax.legend()

    if save is not None:
        fig.savefig(save, dpi=120, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()
    return fig


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare A* heuristics on one grid file.")
    parser.add_argument("grid_file", type=Path, help="Grid file in the rows/cols + map + start/goal layout")
    parser.add_argument(
        "--heuristics",
        nargs="+",
        default=DEFAULT_HEURISTICS,
        choices=list_heuristics(),
        help="Heuristics to run, in order")
    parser.add_argument("--plot", action="store_true", help="Show the grid with both paths")
    parser.add_argument("--save", type=Path, default=None, help="Save the plot to this path")
    args = parser.parse_args(argv)

    config = CompareConfig(grid_file=args.grid_file, heuristics=args.heuristics,
                           plot=args.plot or args.save is not None, save=args.save)
    spec, results = run_comparison(config)

    for result in results:
        print(report(result))
        print()

    if config.plot:
        plot_paths(spec.grid, results, save=config.save)


if __name__ == "__main__":
    main()
