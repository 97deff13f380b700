from __future__ import annotations

from math import inf

from c4minimax.core.board import Board
from c4minimax.core.scoring import cell_value, evaluate, run_value
from c4minimax.types import Cell

from helpers import mirrored, sample_positions, swapped

LEFT, RIGHT, UP, UP_LEFT, UP_RIGHT = (0, -1), (0, 1), (-1, 0), (-1, -1), (-1, 1)


def test_empty_board_scores_zero(empty_board):
    assert evaluate(empty_board) == 0


def test_single_center_piece():
    b = Board()
    b.place(5, 3, Cell.COMPUTER)
    # left, right and up are open; both upward diagonals lack support
    assert run_value(b, 5, 3, *LEFT) == 1
    assert run_value(b, 5, 3, *RIGHT) == 1
    assert run_value(b, 5, 3, *UP) == 1
    assert run_value(b, 5, 3, *UP_LEFT) == 0
    assert run_value(b, 5, 3, *UP_RIGHT) == 0
    assert evaluate(b) == 3


def test_human_pieces_count_against_the_computer():
    b = Board()
    b.place(5, 3, Cell.HUMAN)
    assert evaluate(b) == -3
    assert evaluate(b, Cell.HUMAN) == 3


def test_corner_piece_has_no_room_to_the_left():
    b = Board()
    b.place(5, 0, Cell.COMPUTER)
    assert run_value(b, 5, 0, *LEFT) == 0
    assert cell_value(b, 5, 0) == 2


def test_open_run_counts_its_length():
    b = Board.from_rows(["......."] * 5 + ["CC....."])
    assert run_value(b, 5, 0, *RIGHT) == 2
    assert run_value(b, 5, 1, *RIGHT) == 1


def test_run_blocked_by_opponent_is_dead():
    b = Board.from_rows(["......."] * 5 + ["CCH...."])
    assert run_value(b, 5, 0, *RIGHT) == 0
    assert run_value(b, 5, 1, *RIGHT) == 0


def test_vertical_run_capped_by_board_top_is_dead():
    b = Board.from_rows([
        ".......",
        "C......",
        "C......",
        "H......",
        "H......",
        "H......",
    ])
    # not enough rows left above the computer pair
    assert run_value(b, 2, 0, *UP) == 0
    assert run_value(b, 1, 0, *UP) == 0
    # human three capped by the computer pair
    assert run_value(b, 5, 0, *UP) == 0


def test_unsupported_gap_kills_the_run():
    b = Board.from_rows(["......."] * 4 + ["...C...", "..CH..."])
    # (5, 2) -> (4, 3) continues up-right, but (3, 4) has nothing under it
    assert run_value(b, 5, 2, *UP_RIGHT) == 0
    b.place(5, 4, Cell.HUMAN)
    b.place(4, 4, Cell.HUMAN)
    assert run_value(b, 5, 2, *UP_RIGHT) == 2


def test_four_in_a_row_is_infinite():
    b = Board.from_rows(["......."] * 5 + ["...CCCC"])
    assert run_value(b, 5, 3, *RIGHT) == inf
    assert evaluate(b) == inf
    assert evaluate(b, Cell.HUMAN) == -inf


def test_human_four_is_minus_infinity():
    b = Board.from_rows(["......."] * 2 + ["H......"] * 4)
    assert evaluate(b) == -inf
    assert evaluate(b, Cell.HUMAN) == inf


def test_human_four_dominates_when_both_sides_hold_one():
    b = Board.from_rows(["......."] * 2 + ["H......"] * 3 + ["HCCCC.."])
    assert evaluate(b) == -inf


def test_mirror_symmetry():
    for b in sample_positions(12):
        assert evaluate(mirrored(b)) == evaluate(b)


def test_player_swap_symmetry():
    for b in sample_positions(12):
        assert evaluate(swapped(b)) == -evaluate(b)
        assert evaluate(swapped(b), Cell.HUMAN) == evaluate(b)


def test_evaluate_does_not_modify_board():
    for b in sample_positions(4):
        before = b.to_rows()
        evaluate(b)
        assert b.to_rows() == before
