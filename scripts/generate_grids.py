# Section 0: Standard library imports
import sys
import argparse
from pathlib import Path
from dataclasses import dataclass
from typing import List, Optional

# Third-party imports
import numpy as np

# Add project root to Python path for imports
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Project imports
from gridsearch.generator import default_endpoints, generate_grid
from gridsearch.grid_io import save_grid


@dataclass
class GeneratorConfig:
    """Settings for one batch of random grid files."""
    out_dir: Path = ROOT_DIR / "grids"
    rows: int = 99
    cols: int = 99
    count: int = 100
    density: float = 0.2   # 20% of eligible cells become obstacles
    margin: int = 10       # obstacle-free band along the top and left edges
    seed: Optional[int] = None


def generate_files(config: GeneratorConfig) -> List[Path]:
    """
    Write `config.count` grids named '{rows}x{cols}_{k}.txt' into `config.out_dir`.

    Returns:
        Paths of the written files, in order.
    """
    out_dir = Path(config.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng(config.seed)
    start, goal = default_endpoints(config.rows, config.cols)

    written = []
    for k in range(config.count):
        grid = generate_grid(config.rows, config.cols, config.density, config.margin, rng=rng)
        path = out_dir / f"{config.rows}x{config.cols}_{k}.txt"
        written.append(save_grid(path, grid, start, goal))
    return written


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate random obstacle grids in the text layout read by compare_heuristics.py.")
    parser.add_argument("--out", type=Path, default=GeneratorConfig.out_dir, help="Output directory")
    parser.add_argument("--rows", type=int, default=GeneratorConfig.rows)
    parser.add_argument("--cols", type=int, default=GeneratorConfig.cols)
    parser.add_argument("--count", type=int, default=GeneratorConfig.count, help="Number of grids to write")
    parser.add_argument("--density", type=float, default=GeneratorConfig.density, help="Obstacle probability")
    parser.add_argument("--margin", type=int, default=GeneratorConfig.margin)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible grids")
    args = parser.parse_args(argv)

    config = GeneratorConfig(
        out_dir=args.out,
        rows=args.rows,
        cols=args.cols,
        count=args.count,
        density=args.density,
        margin=args.margin,
        seed=args.seed,
    )
    written = generate_files(config)
    print(f"✅ Wrote {len(written)} grids to {config.out_dir}")


if __name__ == "__main__":
    main()
