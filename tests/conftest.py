"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.core.models import Cell
from src.liquidsort.board import Board

# Two full tubes with alternating colors and two empty ones. Rows are top-down.
DEMO_TOP_MATRIX: list[list[Cell]] = [
    [1, 2, 1, 2],
    [2, 1, 2, 1],
    [None, None, None, None],
    [None, None, None, None],
]


@pytest.fixture
def demo_matrix() -> list[list[Cell]]:
    """Fresh copy every time, so a test can never change it for the next one"""
    return [list(row) for row in DEMO_TOP_MATRIX]


@pytest.fixture
def demo_board(demo_matrix: list[list[Cell]]) -> Board:
    return Board.from_top_matrix(demo_matrix)


@pytest.fixture
def solved_board() -> Board:
    """One full tube of a single color, everything else empty"""
    return Board.from_top_matrix(
        [
            ["red", "red", "red", "red"],
            [None, None, None, None],
            [None, None, None, None],
        ]
    )
