"""
Pouring rules

A move pours the top run of one tube into another. Whether that is allowed only depends on the two tubes
involved, so legality is decided here without needing the rest of the board.
"""

import re
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidRequestError
from src.liquidsort.tube import NO_TOP, Tube, free_space, top_index, top_run

MOVE_NOTATION = re.compile(r"^\s*(\d+)\s*->\s*(\d+)\s*$")


@dataclass(frozen=True)
class Move:
    """Pour from the tube at index `from_tube` into the tube at index `to_tube`"""

    from_tube: int
    to_tube: int

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Move notation: "<from>-><to>", same as the driver prints legal moves.

        examples:
        * "0->2": pour tube 0 into tube 2
        * "3 -> 1": whitespace around the arrow is fine
        """
        match = MOVE_NOTATION.match(notation)
        if match is None:
            raise InvalidRequestError(
                f"Cannot interpret {notation!r} as a move. Expected '<from>-><to>'."
            )
        return cls(int(match.group(1)), int(match.group(2)))

    def to_notation(self) -> str:
        return f"{self.from_tube}->{self.to_tube}"


def can_pour(source: Tube, target: Tube) -> bool:
    """
    Pouring `source` into `target` is allowed if:
    1. there is something to pour (source has a top run)
    2. target has room for at least one cell
    3. target is empty, or its top color matches the color we are pouring

    NOTE: Pouring a tube into itself is not excluded here, as we only see the two tubes. The Board takes care of that.
    """
    run = top_run(source)
    if run is None:
        return False

    if free_space(target) == 0:
        return False

    target_top = top_index(target)
    if target_top == NO_TOP:
        return True
    return target[target_top] == run.color
