from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .state import NUM_PIECES, Configuration

NUM_MOVES = 9

# Slots touched by a clockwise quarter turn, in cycle order: the corner in
# cycle[i - 1] moves to cycle[i] and gains FACE_TWISTS[face][i].
FACE_CYCLES: dict[str, tuple[int, int, int, int]] = {
    "U": (0, 1, 2, 3),
    "F": (3, 2, 5, 4),
    "R": (2, 1, 6, 5),
}

# U turns about the axis the twist is measured along, so it never twists.
FACE_TWISTS: dict[str, tuple[int, int, int, int]] = {
    "U": (0, 0, 0, 0),
    "F": (1, 2, 1, 2),
    "R": (1, 2, 1, 2),
}

FACES = ("U", "F", "R")
TURN_SUFFIXES = ((1, ""), (3, "'"), (2, "2"))


@dataclass(frozen=True, slots=True)
class Move:
    move_id: int
    name: str
    face: str
    turns: int
    targets: tuple[int, int, int, int]
    sources: tuple[int, int, int, int]
    deltas: tuple[int, int, int, int]


def _compose_turns(face: str, turns: int) -> tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]:
    cycle = FACE_CYCLES[face]
    twist = FACE_TWISTS[face]
    src = [0, 1, 2, 3]
    delta = [0, 0, 0, 0]
    for _ in range(turns):
        src = [src[i - 1] for i in range(4)]
        delta = [(delta[i - 1] + twist[i]) % 3 for i in range(4)]
    return cycle, tuple(cycle[s] for s in src), tuple(delta)


def generate_moves() -> list[Move]:
    """Build the 9 generators (U, U', U2, F, F', F2, R, R', R2) from the face cycles."""
    moves: list[Move] = []
    for face in FACES:
        for turns, suffix in TURN_SUFFIXES:
            targets, sources, deltas = _compose_turns(face, turns)
            moves.append(
                Move(
                    move_id=len(moves),
                    name=face + suffix,
                    face=face,
                    turns=turns,
                    targets=targets,  # type: ignore[arg-type]
                    sources=sources,  # type: ignore[arg-type]
                    deltas=deltas,  # type: ignore[arg-type]
                )
            )

    if len(moves) != NUM_MOVES:
        raise AssertionError(f"expected {NUM_MOVES} moves, got {len(moves)}")
    for m in moves:
        if sorted(m.sources) != sorted(m.targets):
            raise AssertionError(f"move {m.name} does not permute its own slots")
        if sum(m.deltas) % 3 != 0:
            raise AssertionError(f"move {m.name} breaks the twist-sum invariant")
    return moves


MOVES: list[Move] = generate_moves()
MOVE_NAMES: tuple[str, ...] = tuple(m.name for m in MOVES)
MOVE_INDEX: dict[str, int] = {name: i for i, name in enumerate(MOVE_NAMES)}


def _check_move_id(move_id: int) -> None:
    if not (0 <= move_id < NUM_MOVES):
        raise ValueError("move_id must be in [0..8]")


def _find_inverse(m: Move) -> int:
    inv_turns = (4 - m.turns) % 4
    for other in MOVES:
        if other.face == m.face and other.turns == inv_turns:
            return other.move_id
    raise AssertionError(f"no inverse for {m.name}")


INVERSE_MOVES: tuple[int, ...] = tuple(_find_inverse(m) for m in MOVES)


def inverse_move(move_id: int) -> int:
    _check_move_id(move_id)
    return INVERSE_MOVES[move_id]


def encode_move(name: str) -> int:
    try:
        return MOVE_INDEX[name]
    except KeyError as e:
        raise ValueError(f"unknown move name: {name!r}") from e


def decode_move(move_id: int) -> str:
    _check_move_id(move_id)
    return MOVE_NAMES[move_id]


def parse_moves(text: str) -> list[int]:
    return [encode_move(tok) for tok in text.split()]


def format_moves(moves: Iterable[int]) -> str:
    return " ".join(decode_move(m) for m in moves)


def apply_move(cfg: Configuration, move_id: int) -> Configuration:
    """Return the configuration reached by turning `move_id` on `cfg`."""
    _check_move_id(move_id)
    m = MOVES[move_id]
    old_perm = cfg.permutation
    old_tw = cfg.twists
    perm = list(old_perm)
    tw = list(old_tw)
    for dst, src, d in zip(m.targets, m.sources, m.deltas):
        perm[dst] = old_perm[src]
        tw[dst] = (old_tw[src] + d) % 3
    if sum(tw) % 3 != 0:
        raise AssertionError(f"{m.name} broke the twist-sum invariant")
    return Configuration(tuple(perm), tuple(tw[: NUM_PIECES - 1]))


def apply_moves(cfg: Configuration, moves: Sequence[int]) -> Configuration:
    for m in moves:
        cfg = apply_move(cfg, m)
    return cfg
