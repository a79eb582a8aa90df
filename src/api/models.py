"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.checkers.square import Square
from src.core.shared_types import Color, Difficulty, GameMode, PickKind

PieceId = str
SquareNotation = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    mode: Optional[GameMode] = None
    difficulty: Optional[Difficulty] = None


class GetGameRequest(BaseModel):
    game_id: UUID


class PickPayload(BaseModel):
    """
    A click, as resolved by the presentation layer:
    * kind 'piece' needs a piece_id
    * kind 'square' needs a square in compact notation, e.g. 'l23'
    * kind 'empty' needs neither
    """

    kind: PickKind
    piece_id: Optional[PieceId] = None
    square: Optional[SquareNotation] = None

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        # raises InvalidRequestError if it cannot be interpreted
        Square.from_notation(value)
        return value


class PickRequest(PickPayload):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class SettingsPayload(BaseModel):
    mode: Optional[GameMode] = None
    difficulty: Optional[Difficulty] = None


class SettingsRequest(SettingsPayload):
    game_id: UUID


class CandidateMovesRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    id: PieceId
    color: Color
    position: SquareNotation
    is_king: bool


class GameResponse(BaseModel):
    game_id: UUID
    current_player: Color
    selected_piece_id: Optional[PieceId]
    pieces: list[PieceResponse]
    candidate_moves: list[SquareNotation]
    move_history: list[str]
    mode: GameMode
    difficulty: Difficulty
    game_started: bool


class CandidateMovesResponse(BaseModel):
    game_id: UUID
    selected_piece_id: Optional[PieceId]
    candidate_moves: list[SquareNotation]


class GameSummaryResponse(BaseModel):
    game_id: UUID
    current_player: Color
    mode: GameMode
    moves_played: int
    game_started: bool
