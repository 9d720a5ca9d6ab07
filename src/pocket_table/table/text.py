from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pocket_table.core.indexer import decode
from pocket_table.core.moves import format_moves
from pocket_table.core.state import Configuration
from pocket_table.search.bfs import SearchResult


def format_entry(cfg: Configuration, moves: Sequence[int]) -> str:
    """`0 1 2 3 4 5 6 0 0 0 0 0 0 0<TAB>U F' R2`"""
    record = " ".join(str(v) for v in cfg.as_record())
    return f"{record}\t{format_moves(moves)}"


def write_text_table(path: Path, result: SearchResult, *, limit: int | None = None) -> int:
    """Write one line per configuration, shortest solutions first.

    `limit` keeps only the first lines of that order.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    order = sorted(range(len(result.depths)), key=lambda i: (result.depths[i], i))
    if limit is not None:
        order = order[:limit]
    n = 0
    with path.open("w", encoding="utf-8") as fh:
        for i in order:
            fh.write(format_entry(decode(i), result.solution(i)))
            fh.write("\n")
            n += 1
    return n
