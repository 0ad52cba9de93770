"""
A tube and the facts we can read off a single tube.

(placed in its own module as both the move rules and the board need these helpers)

Index 0 is the bottom of the tube, index V-1 the top. Everything here is a pure function of the tube.
"""

from dataclasses import dataclass
from typing import Optional

Color = int | str
Cell = Optional[Color]  # None = empty cell
Tube = tuple[Cell, ...]

EMPTY: Cell = None
NO_TOP = -1


@dataclass(frozen=True)
class TopRun:
    """The block of identically colored cells sitting on top of a tube"""

    color: Color
    length: int


def top_index(tube: Tube) -> int:
    """Highest index holding a color, or NO_TOP if the tube is empty."""
    for idx in range(len(tube) - 1, -1, -1):
        if tube[idx] is not EMPTY:
            return idx
    return NO_TOP


def top_run(tube: Tube) -> Optional[TopRun]:
    """
    Color on top, and how many cells of that color are stacked right underneath each other.

    Reading downward stops at a different color, an empty cell or the bottom of the tube.
    """
    top = top_index(tube)
    if top == NO_TOP:
        return None

    color = tube[top]
    length = 1
    for idx in range(top - 1, -1, -1):
        if tube[idx] != color:
            break
        length += 1
    return TopRun(color, length)


def free_space(tube: Tube) -> int:
    """Number of empty cells. In a well-formed tube these are all on top."""
    return sum(1 for cell in tube if cell is EMPTY)


def filled(tube: Tube) -> int:
    return len(tube) - free_space(tube)


def has_gap(tube: Tube) -> bool:
    """An empty cell below a colored one. Can only come from malformed input."""
    seen_empty = False
    for cell in tube:
        if cell is EMPTY:
            seen_empty = True
        elif seen_empty:
            return True
    return False


def compact(tube: Tube) -> Tube:
    """Let all colors sink to the bottom (keeping their order), empty cells end up on top."""
    colors = [cell for cell in tube if cell is not EMPTY]
    return tuple(colors) + (EMPTY,) * (len(tube) - len(colors))


def is_sorted(tube: Tube) -> bool:
    """
    Empty, or a single color without gaps.

    A partly filled tube counts as sorted too: only an empty cell BELOW a color is a gap.
    """
    if has_gap(tube):
        return False
    return len({cell for cell in tube if cell is not EMPTY}) <= 1
