from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .moves import NUM_MOVES, apply_move
from .state import (
    NUM_ORIENTATIONS,
    NUM_PERMUTATIONS,
    NUM_PIECES,
    NUM_STATES,
    NUM_STORED_TWISTS,
    Configuration,
)


def rank_permutation(perm: Sequence[int]) -> int:
    """Rank a permutation of 0..6 in [0, 5040). The identity ranks to 0.

    Factorial number system: at position i the digit is the offset of perm[i]
    among the symbols not yet used, weighted by 7 * 6 * ... * (7 - i + 1).
    Unused symbols live in elems[i:]; `pos` is the inverse of `elems`, and a
    used symbol is swapped out to the front of the working array so every
    lookup is O(1). Swapping to the front rather than the end is what puts
    the identity at rank 0.
    """
    n = NUM_PIECES
    elems = list(range(n))  # symbol at position
    pos = list(range(n))  # position of symbol
    k = 0
    w = 1
    for i in range(n - 1):
        s = perm[i]
        p = pos[s]
        k += w * (p - i)
        w *= n - i
        h = elems[i]
        elems[p] = h
        pos[h] = p
        elems[i] = s
        pos[s] = i
    return k


def unrank_permutation(rank: int) -> tuple[int, ...]:
    if not (0 <= rank < NUM_PERMUTATIONS):
        raise ValueError("permutation rank must be in [0..5039]")
    n = NUM_PIECES
    elems = list(range(n))
    m = rank
    for i in range(n):
        m, d = divmod(m, n - i)
        p = i + d
        elems[i], elems[p] = elems[p], elems[i]
    return tuple(elems)


def rank_orientation(orientation: Sequence[int]) -> int:
    # base 3, least significant digit first
    k = 0
    w = 1
    for t in orientation[:NUM_STORED_TWISTS]:
        k += w * t
        w *= 3
    return k


def unrank_orientation(rank: int) -> tuple[int, ...]:
    if not (0 <= rank < NUM_ORIENTATIONS):
        raise ValueError("orientation rank must be in [0..728]")
    out = []
    for _ in range(NUM_STORED_TWISTS):
        rank, t = divmod(rank, 3)
        out.append(t)
    return tuple(out)


def encode(cfg: Configuration) -> int:
    return rank_permutation(cfg.permutation) + rank_orientation(cfg.orientation) * NUM_PERMUTATIONS


def decode(index: int) -> Configuration:
    if not (0 <= index < NUM_STATES):
        raise ValueError(f"index must be in [0..{NUM_STATES - 1}]")
    o, p = divmod(index, NUM_PERMUTATIONS)
    orientation = unrank_orientation(o)
    cfg = Configuration(unrank_permutation(p), orientation)
    if sum(cfg.twists) % 3 != 0:
        raise AssertionError(f"decode({index}) produced an invalid configuration")
    return cfg


@dataclass(frozen=True, slots=True)
class MoveTables:
    """Per-move transition maps for the two index coordinates.

    A move permutes slots and adds twists by slot, so the permutation rank and
    the orientation rank of the successor depend only on their own
    coordinate. `perm[p][m]` and `orient[o][m]` are the successor ranks.
    """

    perm: list[list[int]]
    orient: list[list[int]]

    def next_index(self, index: int, move_id: int) -> int:
        o, p = divmod(index, NUM_PERMUTATIONS)
        return self.perm[p][move_id] + self.orient[o][move_id] * NUM_PERMUTATIONS


def build_move_tables() -> MoveTables:
    """Tabulate decode -> apply_move -> encode on each coordinate."""
    zero = (0,) * NUM_STORED_TWISTS
    identity = tuple(range(NUM_PIECES))

    perm: list[list[int]] = []
    for p in range(NUM_PERMUTATIONS):
        cfg = Configuration(unrank_permutation(p), zero)
        row = [rank_permutation(apply_move(cfg, m).permutation) for m in range(NUM_MOVES)]
        perm.append(row)

    orient: list[list[int]] = []
    for o in range(NUM_ORIENTATIONS):
        cfg = Configuration(identity, unrank_orientation(o))
        row = [rank_orientation(apply_move(cfg, m).orientation) for m in range(NUM_MOVES)]
        orient.append(row)

    for m in range(NUM_MOVES):
        if len({row[m] for row in perm}) != NUM_PERMUTATIONS:
            raise AssertionError("permutation move table is not a bijection")
        if len({row[m] for row in orient}) != NUM_ORIENTATIONS:
            raise AssertionError("orientation move table is not a bijection")
    return MoveTables(perm=perm, orient=orient)
