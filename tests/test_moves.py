from __future__ import annotations

import random

import pytest

from pocket_table.core.indexer import decode
from pocket_table.core.moves import (
    MOVE_NAMES,
    MOVES,
    NUM_MOVES,
    apply_move,
    apply_moves,
    decode_move,
    encode_move,
    format_moves,
    inverse_move,
    parse_moves,
)
from pocket_table.core.state import NUM_STATES, SOLVED, Configuration


def _random_configs(n: int, seed: int) -> list[Configuration]:
    rng = random.Random(seed)
    return [decode(rng.randrange(NUM_STATES)) for _ in range(n)]


def test_move_names_and_order():
    assert MOVE_NAMES == ("U", "U'", "U2", "F", "F'", "F2", "R", "R'", "R2")
    assert [m.move_id for m in MOVES] == list(range(NUM_MOVES))


def test_name_bijection_is_strict():
    for i, name in enumerate(MOVE_NAMES):
        assert encode_move(name) == i
        assert decode_move(i) == name
    with pytest.raises(ValueError):
        encode_move("D")
    with pytest.raises(ValueError):
        encode_move("u")
    with pytest.raises(ValueError):
        decode_move(9)
    with pytest.raises(ValueError):
        decode_move(-1)


def test_parse_and_format_moves():
    assert parse_moves("U F' R2") == [0, 4, 8]
    assert format_moves([0, 4, 8]) == "U F' R2"
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("U L")


def test_inverse_table():
    assert [inverse_move(m) for m in range(NUM_MOVES)] == [1, 0, 2, 4, 3, 5, 7, 6, 8]
    for m in range(NUM_MOVES):
        assert inverse_move(inverse_move(m)) == m
    with pytest.raises(ValueError):
        inverse_move(9)


def test_move_descriptors_touch_four_slots():
    for m in MOVES:
        assert len(set(m.targets)) == 4
        assert set(m.sources) == set(m.targets)
        assert 6 not in m.targets or m.face == "R"


def test_u_never_twists():
    for m in MOVES:
        if m.face == "U" or m.turns == 2:
            assert m.deltas == (0, 0, 0, 0)
        else:
            assert sorted(m.deltas) == [1, 1, 2, 2]


def test_f_matches_hand_derived_cycle():
    # F: slot3 <- slot4 (+1), slot2 <- slot3 (+2), slot5 <- slot2 (+1), slot4 <- slot5 (+2)
    cfg = Configuration((0, 1, 2, 3, 4, 5, 6), (0, 0, 0, 0, 0, 0))
    out = apply_move(cfg, encode_move("F"))
    assert out.permutation == (0, 1, 3, 4, 5, 2, 6)
    assert out.twists == (0, 0, 2, 1, 2, 1, 0)


def test_r_touches_derived_slot():
    out = apply_move(SOLVED, encode_move("R"))
    assert out.permutation == (0, 2, 5, 3, 4, 6, 1)
    assert out.twists == (0, 2, 1, 0, 0, 2, 1)
    assert sum(out.twists) % 3 == 0


def test_u_then_u_prime_is_solved():
    cfg = apply_move(SOLVED, encode_move("U"))
    assert cfg != SOLVED
    assert apply_move(cfg, encode_move("U'")) == SOLVED


@pytest.mark.parametrize("move_id", range(NUM_MOVES))
def test_apply_inverse_roundtrip_random_states(move_id: int):
    inv = inverse_move(move_id)
    for cfg in _random_configs(200, seed=move_id):
        assert apply_move(apply_move(cfg, move_id), inv) == cfg


@pytest.mark.parametrize("move_id", range(NUM_MOVES))
def test_move_closure(move_id: int):
    for cfg in _random_configs(200, seed=100 + move_id):
        out = apply_move(cfg, move_id)
        assert sorted(out.permutation) == list(range(7))
        assert sum(out.twists) % 3 == 0


@pytest.mark.parametrize("face", [0, 3, 6])
def test_quarter_turn_order_and_composition(face: int):
    quarter, inverse, half = face, face + 1, face + 2
    for cfg in _random_configs(50, seed=face):
        assert apply_moves(cfg, [quarter] * 4) == cfg
        assert apply_moves(cfg, [quarter, quarter]) == apply_move(cfg, half)
        assert apply_moves(cfg, [quarter] * 3) == apply_move(cfg, inverse)


def test_apply_rejects_bad_move_id():
    with pytest.raises(ValueError):
        apply_move(SOLVED, 9)
