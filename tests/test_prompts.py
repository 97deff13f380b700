from __future__ import annotations

import pytest

from c4minimax.errors import InvalidMove
from c4minimax.ui.prompts import parse_move, parse_yes_no


def test_parse_move_is_one_based():
    assert parse_move("1", 7) == 0
    assert parse_move(" 7 \n", 7) == 6


@pytest.mark.parametrize("raw", ["q", "Quit", "EXIT "])
def test_parse_move_quit(raw):
    assert parse_move(raw, 7) is None


@pytest.mark.parametrize("raw", ["0", "8", "abc", "", "-1"])
def test_parse_move_rejects_bad_input(raw):
    with pytest.raises(InvalidMove):
        parse_move(raw, 7)


def test_parse_yes_no():
    assert parse_yes_no("")
    assert parse_yes_no("Y")
    assert not parse_yes_no("n")
