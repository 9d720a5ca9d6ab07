from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

import matplotlib.pyplot as plt

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from pocket_table.core.indexer import build_move_tables  # noqa: E402
from pocket_table.core.state import NUM_STATES  # noqa: E402
from pocket_table.search import explore_all  # noqa: E402
from pocket_table.table import RECORD_SIZE, write_table, write_text_table  # noqa: E402
from pocket_table.viz.plot import plot_depth_distribution  # noqa: E402


def plot_depths(depth_counts: dict[int, int], outpath: Path) -> None:
    plot_depth_distribution(depth_counts)
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()


def main() -> int:
    ap = argparse.ArgumentParser(description="Build the U/F/R pocket cube solution table.")
    ap.add_argument("--outdir", type=Path, default=Path("artifacts"))
    ap.add_argument("--text", action="store_true", help="also write the human-readable table")
    ap.add_argument("--plot", action="store_true", help="also plot the depth distribution")
    args = ap.parse_args()

    args.outdir.mkdir(parents=True, exist_ok=True)

    t0 = time.perf_counter()
    tables = build_move_tables()
    print(f"Move tables: {len(tables.perm)} permutation rows, {len(tables.orient)} orientation rows")

    result = explore_all(tables)
    t1 = time.perf_counter()
    depth_counts = result.depth_counts()
    print(f"Visited {result.visited:,} of {NUM_STATES:,} states in {t1 - t0:.1f}s (max depth {result.max_depth})")
    for d, c in depth_counts.items():
        print(f"  depth {d:2d}: {c:,}")

    bin_path = args.outdir / "pocket_table.bin"
    size = write_table(bin_path, result.solutions())
    print(f"Wrote: {bin_path} ({size:,} bytes, {size // RECORD_SIZE:,} records)")

    if args.text:
        txt_path = args.outdir / "pocket_table.txt"
        n = write_text_table(txt_path, result)
        print(f"Wrote: {txt_path} ({n:,} lines)")

    if args.plot:
        png_path = args.outdir / "depth_distribution.png"
        plot_depths(depth_counts, png_path)
        print(f"Wrote: {png_path}")

    summary = {
        "states": result.visited,
        "max_depth": result.max_depth,
        "depth_counts": {str(d): c for d, c in depth_counts.items()},
        "record_size": RECORD_SIZE,
        "table_bytes": size,
        "seconds": round(time.perf_counter() - t0, 1),
    }
    (args.outdir / "summary.json").write_text(json.dumps(summary, indent=2))
    print(f"Wrote: {args.outdir}/summary.json")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
