"""The Board implements all rules that act on the whole set of tubes (pouring, listing moves, checking if solved)"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Self, Sequence

from src.core.exceptions import IllegalMoveError, InvalidIndexError, ShapeMismatchError
from src.core.models import BoardModel
from src.liquidsort.moves import Move, can_pour
from src.liquidsort.tube import (
    EMPTY,
    Cell,
    Color,
    Tube,
    compact,
    filled,
    free_space,
    is_sorted,
    top_index,
    top_run,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Board:
    tubes: tuple[Tube, ...]

    @classmethod
    def from_top_matrix(cls, rows: Sequence[Sequence[Cell]]) -> Self:
        """Construct a board from rows given top-down.

        That is, every row is one tube and row[0] is its topmost cell. ex:
        [[1, 2, 1, 2], [None, None, None, None]]
        means:
        * tube 0 has color 1 on top, and color 2 at the bottom
        * tube 1 is empty

        Internally the order is flipped (index 0 = bottom), so the top of a tube is always at the end.
        """
        capacity = len(rows[0]) if len(rows) > 0 else 0
        tubes: list[Tube] = []
        for tube_idx, row in enumerate(rows):
            if len(row) != capacity:
                raise ShapeMismatchError(
                    f"All tubes must have the same height {capacity}. Tube {tube_idx} has {len(row)} cells."
                )
            tubes.append(tuple(reversed(row)))
        return cls(tuple(tubes))

    def to_top_matrix(self) -> list[list[Cell]]:
        """reverse operation: rows top-down again"""
        return [list(reversed(tube)) for tube in self.tubes]

    @classmethod
    def from_model(cls, model: BoardModel) -> Self:
        return cls.from_top_matrix(model.top_matrix)

    def to_model(self) -> BoardModel:
        return BoardModel(top_matrix=self.to_top_matrix())

    @property
    def capacity(self) -> int:
        """Height V shared by all tubes. A board without tubes has zero capacity."""
        return len(self.tubes[0]) if self.tubes else 0

    def tube(self, index: int) -> Tube:
        self._assert_valid_index(index)
        return self.tubes[index]

    def can_pour(self, move: Move) -> bool:
        """Same as `can_pour` on the tubes, but a tube can never be poured into itself"""
        self._assert_valid_index(move.from_tube)
        self._assert_valid_index(move.to_tube)
        if move.from_tube == move.to_tube:
            return False
        return can_pour(self.tubes[move.from_tube], self.tubes[move.to_tube])

    def legal_moves(self) -> list[Move]:
        """Every (from, to) pair that is allowed, ordered by `from` first and `to` second"""
        return [
            Move(from_idx, to_idx)
            for from_idx, source in enumerate(self.tubes)
            for to_idx, target in enumerate(self.tubes)
            if from_idx != to_idx and can_pour(source, target)
        ]

    def apply_move(self, move: Move) -> Self:
        """
        Pour and return the new board.
        ----

        ----
        1. Indices that don't exist raise an InvalidIndexError.
        2. An illegal move is NOT an error: the board comes back unchanged.
            (Use `can_pour` first, or `pour`, if you need to know.)
        3. Pour min(length of top run, free space in target) cells. Whatever does not fit stays behind.

        This board is never modified.
        """
        if not self.can_pour(move):
            logger.debug("Move %s is not legal, board unchanged.", move.to_notation())
            return self
        return self._pour(move)

    def pour(self, move: Move) -> Self:
        """Strict version of `apply_move`: an illegal move raises an IllegalMoveError"""
        if not self.can_pour(move):
            raise IllegalMoveError(f"Move not allowed: {move.to_notation()}")
        return self._pour(move)

    def is_solved(self) -> bool:
        """Every tube is either empty or holds a single color, without any gaps"""
        return all(is_sorted(tube) for tube in self.tubes)

    def color_counts(self) -> dict[Color, int]:
        """Tally how many cells of each color are on the board"""
        return dict(
            Counter(cell for tube in self.tubes for cell in tube if cell is not EMPTY)
        )

    def total_filled(self) -> int:
        return sum(filled(tube) for tube in self.tubes)

    # -- Internal helpers --
    def _assert_valid_index(self, index: int) -> None:
        # NOTE: negative indices would silently wrap around in python, so they are rejected as well
        if not 0 <= index < len(self.tubes):
            raise InvalidIndexError(
                f"No tube at index {index}. Board has {len(self.tubes)} tubes."
            )

    def _pour(self, move: Move) -> Self:
        """Do the actual pour. Legality has been checked already."""
        source = list(self.tubes[move.from_tube])
        target = list(compact(self.tubes[move.to_tube]))

        run = top_run(self.tubes[move.from_tube])
        assert run is not None
        amount = min(run.length, free_space(self.tubes[move.to_tube]))

        # take `amount` cells off the top of the source. The run is contiguous, so simply walk down from the top.
        top = top_index(self.tubes[move.from_tube])
        for idx in range(top, top - amount, -1):
            source[idx] = EMPTY

        # after compacting, the first empty cell sits right above the filled ones
        first_free = filled(self.tubes[move.to_tube])
        for idx in range(first_free, first_free + amount):
            target[idx] = run.color

        tubes = list(self.tubes)
        tubes[move.from_tube] = tuple(source)
        tubes[move.to_tube] = tuple(target)
        logger.debug(
            "Poured %d x %r along %s.", amount, run.color, move.to_notation()
        )
        return type(self)(tuple(tubes))
