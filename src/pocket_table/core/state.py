from __future__ import annotations

from dataclasses import dataclass

# 7 tracked corners; DBL never moves under U/F/R so it is left out.
NUM_PIECES = 7
NUM_STORED_TWISTS = NUM_PIECES - 1
NUM_PERMUTATIONS = 5040  # 7!
NUM_ORIENTATIONS = 3**NUM_STORED_TWISTS
NUM_STATES = NUM_PERMUTATIONS * NUM_ORIENTATIONS

Record = tuple[int, ...]


def derived_twist(orientation: tuple[int, ...]) -> int:
    """Twist of the last tracked corner, fixed by sum(twists) % 3 == 0."""
    return (3 - sum(orientation) % 3) % 3


@dataclass(frozen=True, slots=True)
class Configuration:
    """One arrangement of the 7 movable corners.

    `permutation[slot]` is the corner currently sitting in `slot`.
    `orientation[slot]` is the number of clockwise twists needed to bring that
    corner's U/D sticker back to the U/D face. Only the first 6 twists are
    stored; the 7th is implied by the twist-sum invariant.
    """

    permutation: tuple[int, ...]
    orientation: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "permutation", tuple(self.permutation))
        object.__setattr__(self, "orientation", tuple(self.orientation))
        if any(type(v) is not int for v in self.permutation + self.orientation):
            raise ValueError("permutation and orientation values must be ints")
        if len(self.permutation) != NUM_PIECES:
            raise ValueError("permutation must have 7 entries")
        if sorted(self.permutation) != list(range(NUM_PIECES)):
            raise ValueError("permutation must be a permutation of 0..6")
        if len(self.orientation) != NUM_STORED_TWISTS:
            raise ValueError("orientation must have 6 entries")
        if any(t not in (0, 1, 2) for t in self.orientation):
            raise ValueError("orientation values must be in {0, 1, 2}")

    @property
    def twists(self) -> tuple[int, ...]:
        return self.orientation + (derived_twist(self.orientation),)

    def as_record(self) -> Record:
        return self.permutation + self.twists

    @classmethod
    def from_record(cls, values) -> Configuration:
        values = tuple(int(v) for v in values)
        if len(values) != 2 * NUM_PIECES:
            raise ValueError("record must have 14 values")
        cfg = cls(values[:NUM_PIECES], values[NUM_PIECES : 2 * NUM_PIECES - 1])
        if values[-1] != cfg.twists[-1]:
            raise ValueError("twist sum must be 0 mod 3")
        return cfg


SOLVED = Configuration(tuple(range(NUM_PIECES)), (0,) * NUM_STORED_TWISTS)
