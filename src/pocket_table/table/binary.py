"""Fixed-width binary solution table.

Record i sits at byte offset 6 * i and holds up to 12 move ids, two per byte:
move 2b in the low nibble of byte b, move 2b + 1 in the high nibble. Unused
nibbles hold SENTINEL (15). There is no header, footer or length prefix.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from pocket_table.core.indexer import encode
from pocket_table.core.moves import NUM_MOVES
from pocket_table.core.state import NUM_STATES, Configuration

MAX_SOLUTION_LENGTH = 12
RECORD_SIZE = MAX_SOLUTION_LENGTH // 2
SENTINEL = 0xF


def pack_solution(moves: Sequence[int]) -> bytes:
    if len(moves) > MAX_SOLUTION_LENGTH:
        raise AssertionError(f"solution of length {len(moves)} exceeds {MAX_SOLUTION_LENGTH} moves")
    for m in moves:
        if not (0 <= m < NUM_MOVES):
            raise AssertionError(f"move id {m} out of range")
    nibbles = list(moves) + [SENTINEL] * (MAX_SOLUTION_LENGTH - len(moves))
    return bytes(nibbles[2 * b] | (nibbles[2 * b + 1] << 4) for b in range(RECORD_SIZE))


def unpack_solution(record: bytes) -> list[int]:
    if len(record) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes")
    moves: list[int] = []
    for byte in record:
        for nib in (byte & 0xF, byte >> 4):
            if nib == SENTINEL:
                return moves
            if nib >= NUM_MOVES:
                raise ValueError(f"corrupt record: nibble {nib} is not a move id")
            moves.append(nib)
    return moves


def encode_table(solutions: Iterable[Sequence[int]], *, expected: int | None = None) -> bytes:
    """Concatenate packed solutions in index order."""
    buf = bytearray()
    for moves in solutions:
        buf += pack_solution(moves)
    if expected is not None and len(buf) != RECORD_SIZE * expected:
        raise AssertionError(f"table holds {len(buf) // RECORD_SIZE} records, expected {expected}")
    return bytes(buf)


def write_table(path: Path, solutions: Iterable[Sequence[int]], *, expected: int | None = NUM_STATES) -> int:
    data = encode_table(solutions, expected=expected)
    path.write_bytes(data)
    return len(data)


def load_table(path: Path) -> bytes:
    data = path.read_bytes()
    if len(data) != RECORD_SIZE * NUM_STATES:
        raise ValueError(f"{path} is {len(data)} bytes, expected {RECORD_SIZE * NUM_STATES}")
    return data


def read_record(table: bytes, index: int) -> list[int]:
    n = len(table) // RECORD_SIZE
    if not (0 <= index < n):
        raise ValueError(f"index must be in [0..{n - 1}]")
    off = RECORD_SIZE * index
    return unpack_solution(table[off : off + RECORD_SIZE])


def lookup(table: bytes, cfg: Configuration) -> list[int]:
    """Moves that bring `cfg` back to solved, read straight from the table."""
    return read_record(table, encode(cfg))
