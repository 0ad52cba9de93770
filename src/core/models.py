"""
Boundary layer data model(s).

The service layer talks to the domain layer using the model(s) defined here,
so neither the API models nor the Board internals leak across the boundary.
"""

from dataclasses import dataclass

# Type aliases to make BoardModel easier to read
Cell = int | str | None
TopDownRow = list[Cell]


@dataclass
class BoardModel:
    """Transport-safe representation of a board: one row per tube, each row read top to bottom."""

    top_matrix: list[TopDownRow]
