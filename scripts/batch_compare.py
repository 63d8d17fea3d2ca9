# Section 0: Standard library imports
import sys
import json
import time
import argparse
from pathlib import Path
from datetime import datetime

import numpy as np

# Add project root to Python path
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from scripts.compare_heuristics import DEFAULT_HEURISTICS, CompareConfig, run_comparison
from gridsearch.heuristics import list_heuristics


# Section 1: Run every grid file in a directory
def run_batch(grid_dir: Path, heuristics: list, pattern: str = "*.txt") -> list:
    """
    Compare `heuristics` on every grid file matching `pattern` in `grid_dir`.

    Returns:
        One record per file:
            {"file": name, "start": [r, c], "goal": [r, c],
             "runs": {heuristic: {"found", "length", "expanded"}}}
        Files that fail to load get {"file": name, "error": message} instead.
    """
    files = sorted(Path(grid_dir).glob(pattern))
    if not files:
        raise FileNotFoundError(f"No grid files matching '{pattern}' in {grid_dir}")

    records = []
    for i, grid_file in enumerate(files):
        print(f"[{i+1}/{len(files)}] {grid_file.name}...", end=" ", flush=True)
        try:
            spec, results = run_comparison(CompareConfig(grid_file=grid_file, heuristics=heuristics))
        except (ValueError, OSError) as e:
            print(f"skipped ({e})")
            records.append({"file": grid_file.name, "error": str(e)})
            continue

        runs = {
            r.heuristic: {"found": r.found, "length": r.cost, "expanded": r.expanded}
            for r in results
        }
        records.append({
            "file": grid_file.name,
            "start": list(spec.start),
            "goal": list(spec.goal),
            "runs": runs,
        })
        print("✓ " + ", ".join(f"{name}: {run['length']} / {run['expanded']}" for name, run in runs.items()))
    return records


# Section 2: Summaries
def summarize(records: list, heuristics: list) -> dict:
    """Mean path length and mean expansions per heuristic over files where a path was found."""
    summary = {}
    for name in heuristics:
        runs = [rec["runs"][name] for rec in records if "runs" in rec]
        found = [run for run in runs if run["found"]]
        summary[name] = {
            "grids": len(runs),
            "found": len(found),
            "mean_length": float(np.mean([run["length"] for run in found])) if found else None,
            "mean_expanded": float(np.mean([run["expanded"] for run in runs])) if runs else None,
        }
    return summary


def save_results(out_dir: Path, grid_dir: Path, heuristics: list, records: list, summary: dict) -> Path:
    """Write results.json into a timestamped folder under `out_dir`."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    data_dir = Path(out_dir) / f"{timestamp}_{Path(grid_dir).name}"
    data_dir.mkdir(parents=True, exist_ok=True)

    results_file = data_dir / "results.json"
    with open(results_file, 'w') as f:
        json.dump({
            "grid_dir": str(grid_dir),
            "heuristics": heuristics,
            "summary": summary,
            "grids": records,
        }, f, indent=2)
    return results_file


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare A* heuristics over a directory of grid files.")
    parser.add_argument("grid_dir", type=Path, help="Directory holding grid files")
    parser.add_argument("--pattern", default="*.txt", help="Glob for grid files (default: *.txt)")
    parser.add_argument("--heuristics", nargs="+", default=DEFAULT_HEURISTICS, choices=list_heuristics())
    parser.add_argument("--out", type=Path, default=ROOT_DIR / "data", help="Where to write results")
    args = parser.parse_args(argv)

    start_time = time.perf_counter()
    print(f"\n{'='*60}")
    print(f"BATCH COMPARISON: {args.grid_dir}")
    print(f"Heuristics: {', '.join(args.heuristics)}")
    print(f"{'='*60}\n")

    records = run_batch(args.grid_dir, args.heuristics, pattern=args.pattern)
    summary = summarize(records, args.heuristics)
    results_file = save_results(args.out, args.grid_dir, args.heuristics, records, summary)

    print(f"\n{'='*60}")
    print(f"BATCH COMPLETE ({time.perf_counter() - start_time:.1f}s)")
    print(f"{'='*60}")
    for name, stats in summary.items():
        length = "n/a" if stats["mean_length"] is None else f"{stats['mean_length']:.2f}"
        expanded = "n/a" if stats["mean_expanded"] is None else f"{stats['mean_expanded']:.1f}"
        print(f"  {name:15} found {stats['found']}/{stats['grids']}, "
              f"mean length {length}, mean expanded {expanded}")
    print(f"\nResults saved to: {results_file}")


if __name__ == "__main__":
    main()
