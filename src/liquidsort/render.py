"""Draw a board as a fixed-width text grid. Purely for display, the rules never look at this."""

from typing import Optional

from src.core.config import DisplaySettings, get_settings
from src.liquidsort.board import Board
from src.liquidsort.tube import EMPTY, Cell


def glyph(cell: Cell, empty_glyph: str) -> str:
    """A single visible character per cell: the first character of the color's name"""
    if cell is EMPTY:
        return empty_glyph
    return str(cell)[:1]


def draw(board: Board, settings: Optional[DisplaySettings] = None) -> str:
    """
    One line per level, top level first, one column per tube. The last line labels the tubes.

    ex) two tubes of height 2, only tube 0 holds something:
    | 1 | · |
    | 2 | · |
      0   1
    """
    settings = settings or get_settings()
    sep = settings.separator

    lines: list[str] = []
    for level in range(board.capacity - 1, -1, -1):
        row = sep.join(
            f" {glyph(tube[level], settings.empty_glyph)} " for tube in board.tubes
        )
        lines.append(f"{sep}{row}{sep}")

    labels = "  ".join(
        str(idx).rjust(settings.index_width) for idx in range(len(board.tubes))
    )
    lines.append(f" {labels}")
    return "\n".join(lines)
