from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from pocket_table import PocketCubeCore, scramble  # noqa: E402
from pocket_table.core.moves import apply_moves, format_moves  # noqa: E402
from pocket_table.core.state import SOLVED  # noqa: E402
from pocket_table.table import load_table, lookup  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Scramble and solve with a prebuilt table.")
    ap.add_argument("--table", type=Path, default=Path("artifacts/pocket_table.bin"))
    ap.add_argument("--length", type=int, default=25)
    ap.add_argument("--count", type=int, default=5)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--uniform", action="store_true", help="draw configurations uniformly instead of scrambling")
    args = ap.parse_args()

    table = load_table(args.table)
    cube = PocketCubeCore()
    for k in range(args.count):
        if args.uniform:
            cube.randomize(args.seed + k)
            cube.audit()
            cfg = cube.config
            print(f"index: {cube.index()}")
        else:
            cfg, moves = scramble(args.length, seed=args.seed + k)
            print(f"scramble: {format_moves(moves)}")
        solution = lookup(table, cfg)
        ok = apply_moves(cfg, solution) == SOLVED
        print(f"solution: {format_moves(solution) or '(solved)'}  [{len(solution)} moves, {'ok' if ok else 'FAILED'}]")
        if not ok:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
