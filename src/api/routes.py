"""HTTP routes. Each one builds the request model, and hands it to the service."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.models import (
    CandidateMovesRequest,
    CandidateMovesResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GameSummaryResponse,
    GetGameRequest,
    PickPayload,
    PickRequest,
    ResetGameRequest,
    SettingsPayload,
    SettingsRequest,
)
from src.core.config import Settings, get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.checkers_service import CheckersService

router = APIRouter(prefix="/games", tags=["games"])


def get_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CheckersService:
    return CheckersService(
        SQLGameRepository(db),
        default_mode=settings.default_mode,
        default_difficulty=settings.default_difficulty,
    )


ServiceDep = Annotated[CheckersService, Depends(get_service)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_game(request: CreateGameRequest, service: ServiceDep) -> GameResponse:
    return service.create_new_game(request)


@router.get("")
def list_games(service: ServiceDep) -> list[GameSummaryResponse]:
    return service.list_games()


@router.get("/{game_id}")
def get_game(game_id: UUID, service: ServiceDep) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/{game_id}/pick")
def pick(game_id: UUID, payload: PickPayload, service: ServiceDep) -> GameResponse:
    request = PickRequest(game_id=game_id, **payload.model_dump())
    return service.pick(request)


@router.post("/{game_id}/reset")
def reset_game(game_id: UUID, service: ServiceDep) -> GameResponse:
    return service.reset_game(ResetGameRequest(game_id=game_id))


@router.patch("/{game_id}/settings")
def change_settings(
    game_id: UUID, payload: SettingsPayload, service: ServiceDep
) -> GameResponse:
    request = SettingsRequest(game_id=game_id, **payload.model_dump())
    return service.change_settings(request)


@router.get("/{game_id}/candidate-moves")
def candidate_moves(game_id: UUID, service: ServiceDep) -> CandidateMovesResponse:
    return service.candidate_moves(CandidateMovesRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: ServiceDep) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))
