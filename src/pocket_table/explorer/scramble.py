from __future__ import annotations

import random

from pocket_table.core.engine import PocketCubeCore
from pocket_table.core.moves import NUM_MOVES
from pocket_table.core.state import Configuration


def scramble(length: int, seed: int = 0) -> tuple[Configuration, list[int]]:
    """Random move walk of `length` moves from solved.

    Returns the reached configuration and the moves applied (solved -> it).
    """
    if length < 0:
        raise ValueError("length must be >= 0")
    rng = random.Random(seed)
    cube = PocketCubeCore()
    moves: list[int] = []
    for _ in range(length):
        m = rng.randrange(NUM_MOVES)
        cube.apply(m)
        cube.audit()
        moves.append(m)
    return cube.config, moves
