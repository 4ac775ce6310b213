"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Difficulty, Outcome, Status

PieceColor = str
DiscCount = int


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    if not first_character.isalpha():
        return False
    if not (second_character.isascii() and second_character.isdigit()):
        return False
    return True


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_layout: Optional[str] = None

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        rows = value.strip().split("/")
        if len(rows) != 8:
            raise InvalidRequestError("Board layout must contain 8 slash-separated rows.")
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    color: Color


class MoveRequest(BaseModel):
    game_id: UUID
    color: Color
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value.lower()


class ComputerMoveRequest(BaseModel):
    game_id: UUID
    difficulty: Difficulty = Difficulty.MEDIUM


class RestartGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    layout: str
    color_to_move: Color
    scores: dict[PieceColor, DiscCount]
    status: Status
    winner: Optional[Outcome] = None
    passed_player: Optional[Color] = None
    move_history: list[str]
    move_log: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[str]
