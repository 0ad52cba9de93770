"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import Cell

TopMatrix = list[list[Cell]]
MoveNotation = str


def _assert_rectangular(matrix: TopMatrix) -> None:
    if len(matrix) == 0:
        return
    capacity = len(matrix[0])
    for idx, row in enumerate(matrix):
        if len(row) != capacity:
            raise InvalidRequestError(
                f"Every tube needs {capacity} cells (taken from tube 0), tube {idx} has {len(row)}."
            )


# --- REQUEST MODELS ---
class BoardRequest(BaseModel):
    top_matrix: TopMatrix

    @field_validator("top_matrix")
    @classmethod
    def validate_top_matrix(cls, value: TopMatrix) -> TopMatrix:
        _assert_rectangular(value)
        return value


class MoveRequest(BaseModel):
    top_matrix: TopMatrix
    from_tube: int
    to_tube: int
    strict: bool = False

    @field_validator("top_matrix")
    @classmethod
    def validate_top_matrix(cls, value: TopMatrix) -> TopMatrix:
        _assert_rectangular(value)
        return value

    @field_validator(*["from_tube", "to_tube"])
    @classmethod
    def validate_tube_index(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(
                f"Tube index cannot be negative, got {value!r}."
            )
        return value


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    top_matrix: TopMatrix
    capacity: int
    solved: bool
    legal_moves: list[MoveNotation]


class LegalMovesResponse(BaseModel):
    legal_moves: list[MoveNotation]


class MoveResponse(BaseModel):
    move: MoveNotation
    applied: bool
    board: BoardResponse
