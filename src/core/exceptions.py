"""Custom exceptions shared across layers. Catch `PuzzleError` to handle anything raised by this package."""


class PuzzleError(Exception):
    """Top-level exception for the liquid sort puzzle"""


class BoardError(PuzzleError):
    """Raised by the domain layer when a board cannot be built or changed"""


class ShapeMismatchError(BoardError):
    """Tubes of one board must all have the same capacity"""


class InvalidIndexError(BoardError):
    """A move (or lookup) refers to a tube that does not exist"""


class IllegalMoveError(BoardError):
    """Only raised by the strict pour. The lenient version just returns the board unchanged."""


class InvalidRequestError(PuzzleError):
    """
    Request data does not make sense.

    NOTE: not a ValueError on purpose, pydantic re-raises this as-is instead of wrapping it in a ValidationError.
    """
