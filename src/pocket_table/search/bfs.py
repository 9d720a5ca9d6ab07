from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from pocket_table.core.indexer import MoveTables, build_move_tables, encode
from pocket_table.core.moves import NUM_MOVES, inverse_move
from pocket_table.core.state import NUM_STATES, SOLVED

UNSEEN = 0xFF
ROOT = 0xFE


def invert_moves(moves: Sequence[int]) -> list[int]:
    """Turn a solved -> target sequence into target -> solved."""
    return [inverse_move(m) for m in reversed(moves)]


@dataclass(slots=True)
class SearchResult:
    """Shortest paths for every index, stored densely.

    `last_move[i]` is the final move of the first (hence shortest) path that
    reached index i; the rest of the path is the path of its parent, so paths
    are recovered by walking back rather than stored whole.
    """

    last_move: bytearray
    depths: bytearray
    visited: int
    tables: MoveTables

    def depth(self, index: int) -> int:
        self._check_index(index)
        return self.depths[index]

    @property
    def max_depth(self) -> int:
        return max(self.depths)

    def depth_counts(self) -> dict[int, int]:
        counts = Counter(self.depths)
        return {d: counts[d] for d in sorted(counts)}

    def path(self, index: int) -> list[int]:
        """Moves taking solved to `index` (parent_path + [last move])."""
        self._check_index(index)
        back: list[int] = []
        i = index
        while True:
            m = self.last_move[i]
            if m == ROOT:
                break
            if m == UNSEEN:
                raise AssertionError(f"index {i} was never reached")
            back.append(m)
            i = self.tables.next_index(i, inverse_move(m))
            if len(back) > self.depths[index]:
                raise AssertionError(f"parent chain of {index} is longer than its depth")
        back.reverse()
        return back

    def solution(self, index: int) -> list[int]:
        """Moves taking `index` back to solved."""
        return invert_moves(self.path(index))

    def solutions(self) -> Iterator[list[int]]:
        for i in range(len(self.last_move)):
            yield self.solution(i)

    def _check_index(self, index: int) -> None:
        if not (0 <= index < len(self.last_move)):
            raise ValueError(f"index must be in [0..{len(self.last_move) - 1}]")


def explore_all(
    tables: MoveTables | None = None,
    *,
    move_order: Sequence[int] | None = None,
) -> SearchResult:
    """Breadth-first search over every configuration reachable from solved.

    `move_order` fixes which generator wins a tie between equally short
    paths; the depths do not depend on it.
    """
    if tables is None:
        tables = build_move_tables()
    order = list(range(NUM_MOVES)) if move_order is None else list(move_order)
    if sorted(order) != list(range(NUM_MOVES)):
        raise ValueError("move_order must be a permutation of 0..8")

    perm_t = tables.perm
    orient_t = tables.orient
    width = len(perm_t)

    last_move = bytearray([UNSEEN]) * NUM_STATES
    depths = bytearray(NUM_STATES)
    dequeued = bytearray(NUM_STATES)

    start = encode(SOLVED)
    last_move[start] = ROOT
    visited = 1
    frontier: deque[int] = deque([start])

    while frontier:
        s = frontier.popleft()
        if dequeued[s]:
            raise AssertionError(f"index {s} dequeued twice")
        dequeued[s] = 1

        o, p = divmod(s, width)
        prow = perm_t[p]
        orow = orient_t[o]
        d = depths[s] + 1
        for m in order:
            t = prow[m] + orow[m] * width
            if last_move[t] == UNSEEN:
                last_move[t] = m
                depths[t] = d
                visited += 1
                frontier.append(t)

    if visited != NUM_STATES:
        raise AssertionError(f"search visited {visited} states, expected {NUM_STATES}")
    if UNSEEN in last_move:
        raise AssertionError("search left unvisited indices")
    return SearchResult(last_move=last_move, depths=depths, visited=visited, tables=tables)
