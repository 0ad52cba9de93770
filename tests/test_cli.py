"""Tests for the demo driver in /src/cli.py"""

import pytest
from typer.testing import CliRunner

from src.cli import app

runner = CliRunner()


def test_demo_with_default_board() -> None:
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "Start:" in result.output
    assert "| 1 | 2 | · | · |" in result.output
    assert "Legal moves (from->to): 0->2, 0->3, 1->2, 1->3" in result.output
    assert "After move 0->2" in result.output
    assert "Solved? False" in result.output


def test_demo_reaches_solved_board() -> None:
    result = runner.invoke(app, ["demo", "--board", "[[1, 1], [null, 1]]"])
    assert result.exit_code == 0
    assert "Legal moves (from->to): 0->1" in result.output
    assert "Solved? True" in result.output


def test_demo_without_legal_moves() -> None:
    result = runner.invoke(app, ["demo", "--board", "[[1, 2]]"])
    assert result.exit_code == 0
    assert "After move" not in result.output


def test_demo_with_bad_shape() -> None:
    result = runner.invoke(app, ["demo", "--board", "[[1, 2], [1]]"])
    assert result.exit_code == 1
    assert "error:" in result.output


def test_demo_with_invalid_json() -> None:
    result = runner.invoke(app, ["demo", "--board", "not json"])
    assert result.exit_code == 1
    assert "error:" in result.output


def test_demo_with_board_that_is_not_a_list_of_tubes() -> None:
    result = runner.invoke(app, ["demo", "--board", "{\"tubes\": []}"])
    assert result.exit_code == 1
    assert "error:" in result.output


@pytest.mark.parametrize(
    "board_json",
    [
        "[[[1], null], [null, null]]",  # nested list
        "[[{\"a\": 1}, null]]",
        "[[1.5, null]]",
    ],
)
def test_demo_rejects_cells_that_are_not_colors(board_json: str) -> None:
    """A cell holds a number, a string or null. Nested lists (or objects, floats) are reported as bad input."""
    result = runner.invoke(app, ["demo", "--board", board_json])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "error:" in result.output
