from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from c4minimax.core.board import Board
from helpers import NEARLY_FULL


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def nearly_full() -> Board:
    return Board.from_rows(NEARLY_FULL)
