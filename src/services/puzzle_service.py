"""Orchestration of communication from API models to the board rules (and the reverse direction)."""

import logging

from src.api.models import (
    BoardRequest,
    BoardResponse,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    TopMatrix,
)
from src.core.models import BoardModel
from src.liquidsort.board import Board
from src.liquidsort.moves import Move

logger = logging.getLogger(__name__)


class PuzzleService:
    """Orchestration of layers for the liquid sort puzzle.

    Nothing is stored: every request carries the full board, every response returns it again.
    """

    # -- API logic ---
    def inspect(self, request: BoardRequest) -> BoardResponse:
        """Describe a board: its shape, whether it is solved and which moves are possible."""
        board = self._load_board(request.top_matrix)
        return self._create_board_response(board)

    def legal_moves(self, request: BoardRequest) -> LegalMovesResponse:
        """retrieve set of legal moves."""
        board = self._load_board(request.top_matrix)
        return LegalMovesResponse(
            legal_moves=[move.to_notation() for move in board.legal_moves()]
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        A strict request raises an IllegalMoveError for a move that is not allowed.
        Otherwise the board is returned unchanged and `applied` is False.
        """
        board = self._load_board(request.top_matrix)
        move = Move(request.from_tube, request.to_tube)

        if request.strict:
            after_move = board.pour(move)
            applied = True
        else:
            applied = board.can_pour(move)
            after_move = board.apply_move(move)

        logger.info(
            "Move %s %s.", move.to_notation(), "applied" if applied else "ignored"
        )
        return MoveResponse(
            move=move.to_notation(),
            applied=applied,
            board=self._create_board_response(after_move),
        )

    # -- Internal helpers --
    def _load_board(self, top_matrix: TopMatrix) -> Board:
        return Board.from_model(BoardModel(top_matrix=top_matrix))

    def _create_board_response(self, board: Board) -> BoardResponse:
        """Convert the Board to a BoardResponse"""
        model = board.to_model()
        return BoardResponse(
            top_matrix=model.top_matrix,
            capacity=board.capacity,
            solved=board.is_solved(),
            legal_moves=[move.to_notation() for move in board.legal_moves()],
        )
