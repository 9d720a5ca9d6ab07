from __future__ import annotations

import random

import pytest

from pocket_table.core.indexer import decode, encode
from pocket_table.core.moves import apply_move, apply_moves, encode_move, parse_moves
from pocket_table.core.state import NUM_STATES, SOLVED
from pocket_table.explorer.scramble import scramble
from pocket_table.search.bfs import ROOT, UNSEEN, explore_all, invert_moves
from pocket_table.table.binary import MAX_SOLUTION_LENGTH


def test_invert_moves():
    assert invert_moves([]) == []
    assert invert_moves(parse_moves("U F' R2")) == parse_moves("R2 F U'")
    assert invert_moves(parse_moves("F")) == parse_moves("F'")


def test_invert_moves_undoes_path():
    rng = random.Random(5)
    for _ in range(100):
        moves = [rng.randrange(9) for _ in range(rng.randrange(15))]
        cfg = apply_moves(SOLVED, moves)
        assert apply_moves(cfg, invert_moves(moves)) == SOLVED
        assert len(invert_moves(moves)) == len(moves)


def test_full_coverage(full_search):
    assert full_search.visited == NUM_STATES
    assert len(full_search.last_move) == NUM_STATES
    assert UNSEEN not in full_search.last_move
    assert full_search.last_move.count(ROOT) == 1


def test_depth_distribution(full_search):
    counts = full_search.depth_counts()
    assert sum(counts.values()) == NUM_STATES
    assert counts[0] == 1
    assert counts[1] == 9
    assert counts[2] == 54
    assert full_search.max_depth == 11
    assert full_search.max_depth <= MAX_SOLUTION_LENGTH


def test_solved_has_empty_solution(full_search):
    assert full_search.depth(0) == 0
    assert full_search.path(0) == []
    assert full_search.solution(0) == []


def test_one_f_turn_is_solved_by_f_prime(full_search):
    i = encode(apply_move(SOLVED, encode_move("F")))
    assert full_search.path(i) == [encode_move("F")]
    assert full_search.solution(i) == [encode_move("F'")]


def test_single_moves_have_depth_one(full_search):
    for m in range(9):
        i = encode(apply_move(SOLVED, m))
        assert full_search.depth(i) == 1
        assert full_search.path(i) == [m]


def test_solutions_solve_random_indices(full_search):
    rng = random.Random(2024)
    for _ in range(3000):
        i = rng.randrange(NUM_STATES)
        cfg = decode(i)
        path = full_search.path(i)
        sol = full_search.solution(i)
        assert len(path) == len(sol) == full_search.depth(i)
        assert apply_moves(SOLVED, path) == cfg
        assert apply_moves(cfg, sol) == SOLVED


def test_depth_is_tight_along_edges(full_search, move_tables):
    # neighbours differ in distance by at most one move
    rng = random.Random(99)
    for _ in range(2000):
        i = rng.randrange(NUM_STATES)
        d = full_search.depth(i)
        for m in range(9):
            j = move_tables.next_index(i, m)
            assert abs(full_search.depth(j) - d) <= 1


@pytest.mark.parametrize("length", [0, 3, 20])
def test_solution_never_longer_than_scramble(full_search, length: int):
    for seed in range(20):
        cfg, moves = scramble(length, seed=seed)
        assert full_search.depth(encode(cfg)) <= len(moves)


def test_depths_independent_of_move_order(full_search, move_tables):
    reordered = explore_all(move_tables, move_order=[8, 5, 2, 7, 4, 1, 6, 3, 0])
    assert reordered.depths == full_search.depths
    i = encode(apply_move(SOLVED, encode_move("F")))
    assert reordered.solution(i) == [encode_move("F'")]


def test_explore_rejects_bad_move_order(move_tables):
    with pytest.raises(ValueError):
        explore_all(move_tables, move_order=[0, 1, 2])


def test_path_rejects_bad_index(full_search):
    with pytest.raises(ValueError):
        full_search.path(NUM_STATES)
