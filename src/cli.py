"""Command line driver: print a board, its legal moves, and play a demonstration move."""

import json
import logging
from typing import Optional

import typer

from src.core.exceptions import InvalidRequestError, PuzzleError
from src.core.models import Cell
from src.liquidsort.board import Board
from src.liquidsort.render import draw

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="liquidsort",
    help="Liquid sort puzzle: tubes, pours and the solved check.",
    add_completion=False,
)

# Two colors in two full tubes, plus two empty tubes. Rows are given top-down, null = empty.
DEMO_TOP_MATRIX: list[list[Cell]] = [
    [1, 2, 1, 2],
    [2, 1, 2, 1],
    [None, None, None, None],
    [None, None, None, None],
]


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _load_board(board_json: Optional[str]) -> Board:
    """Parse the --board option, or fall back to the demo board"""
    if board_json is None:
        return Board.from_top_matrix(DEMO_TOP_MATRIX)
    try:
        rows = json.loads(board_json)
    except json.JSONDecodeError as exc:
        raise InvalidRequestError(f"--board is not valid JSON: {exc}") from exc
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise InvalidRequestError("--board must be a JSON list of lists (one per tube).")
    for row in rows:
        for cell in row:
            # colors are numbers or short labels, null is an empty cell
            if cell is not None and not isinstance(cell, (int, str)):
                raise InvalidRequestError(
                    f"Cannot use {cell!r} as a cell. Expected a number, a string or null."
                )
    return Board.from_top_matrix(rows)


@app.callback()
def main() -> None:
    """Liquid sort puzzle tools."""


@app.command()
def demo(
    board_json: Optional[str] = typer.Option(
        None, "--board", "-b", help="Tubes as JSON, each tube top-down. null = empty."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Show the start board and its legal moves, play the first one and check if solved."""
    _setup_logging(verbose)
    try:
        board = _load_board(board_json)
    except PuzzleError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Start:")
    typer.echo(draw(board))

    moves = board.legal_moves()
    typer.echo(
        "\nLegal moves (from->to): "
        + ", ".join(move.to_notation() for move in moves)
    )

    if not moves:
        logger.info("No legal moves on this board.")
        return

    first_move = moves[0]
    after_move = board.apply_move(first_move)
    typer.echo(f"\nAfter move {first_move.to_notation()}")
    typer.echo(draw(after_move))
    typer.echo(f"\nSolved? {after_move.is_solved()}")


if __name__ == "__main__":
    app()
