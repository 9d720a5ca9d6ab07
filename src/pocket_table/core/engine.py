from __future__ import annotations

import hashlib
import random
import struct
from dataclasses import dataclass

from .indexer import decode, encode
from .moves import MOVES, NUM_MOVES, apply_move, inverse_move
from .state import NUM_PIECES, NUM_STATES, SOLVED, Configuration


@dataclass(slots=True)
class PocketCubeCore:
    """Mutable U/F/R cube holding one configuration at a time."""

    config: Configuration
    last_move: int | None

    def __init__(self, config: Configuration | None = None):
        self.config = SOLVED if config is None else config
        self.last_move = None

    def reset(self) -> None:
        self.config = SOLVED
        self.last_move = None

    def randomize(self, seed: int) -> None:
        """Jump to a uniformly random configuration (every index is reachable)."""
        rng = random.Random(seed)
        self.config = decode(rng.randrange(NUM_STATES))
        self.last_move = None

    def apply(self, move_id: int) -> None:
        if not (0 <= move_id < NUM_MOVES):
            raise ValueError("move_id must be in [0..8]")
        self.config = apply_move(self.config, move_id)
        self.last_move = move_id

    def inverse_op(self, move_id: int) -> int:
        return inverse_move(move_id)

    def index(self) -> int:
        return encode(self.config)

    def is_solved(self) -> bool:
        return self.config == SOLVED

    def state(self) -> dict:
        return {
            "permutation": list(self.config.permutation),
            "twists": list(self.config.twists),
            "index": self.index(),
            "last_move": None if self.last_move is None else MOVES[self.last_move].name,
        }

    def _canonical_bytes(self) -> bytes:
        # 14 unsigned bytes: permutation then all 7 twists
        record = self.config.as_record()
        return struct.pack("<" + "B" * len(record), *record)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before_config = self.config
        before_last = self.last_move
        before_hash = self.hash()

        try:
            self._audit_permutation()
            self._audit_twists()
            self._audit_index_roundtrip()
            self._audit_inverse_roundtrip()
        finally:
            self.config = before_config
            self.last_move = before_last
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated cube state (hash mismatch)")

    def _audit_permutation(self) -> None:
        perm = self.config.permutation
        if len(perm) != NUM_PIECES:
            raise AssertionError("permutation length mismatch")
        if len(set(perm)) != NUM_PIECES:
            raise AssertionError("permutation slots not unique")
        if set(perm) != set(range(NUM_PIECES)):
            raise AssertionError("permutation values out of range")

    def _audit_twists(self) -> None:
        tw = self.config.twists
        if any(t not in (0, 1, 2) for t in tw):
            raise AssertionError("twist out of range")
        if sum(tw) % 3 != 0:
            raise AssertionError("twist sum is not 0 mod 3")

    def _audit_index_roundtrip(self) -> None:
        i = encode(self.config)
        if not (0 <= i < NUM_STATES):
            raise AssertionError("index out of range")
        if decode(i) != self.config:
            raise AssertionError("decode(encode(config)) did not restore config")

    def _audit_inverse_roundtrip(self) -> None:
        if self.last_move is None:
            return

        snap = self._canonical_bytes()
        m = self.last_move
        self.apply(m)
        self.apply(self.inverse_op(m))
        if self._canonical_bytes() != snap:
            raise AssertionError("apply(move); apply(inverse) did not restore state")
