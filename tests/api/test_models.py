from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, PickRequest, SettingsRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Difficulty, GameMode, PickKind


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_settings_are_optional() -> None:
    request = CreateGameRequest()
    assert request.mode is None
    assert request.difficulty is None


def test_settings_from_strings() -> None:
    request = CreateGameRequest(mode="pvc", difficulty="easy")
    assert request.mode == GameMode.PVC
    assert request.difficulty == Difficulty.EASY


def test_unknown_difficulty(mock_id: UUID) -> None:
    with pytest.raises(ValidationError):
        SettingsRequest(game_id=mock_id, difficulty="impossible")


# -- Validation - PickRequest --
@pytest.mark.parametrize("square", ["l23", "u70", "l01"])
def test_valid_square_names(mock_id: UUID, square: str) -> None:
    request = PickRequest(game_id=mock_id, kind=PickKind.SQUARE, square=square)
    assert request.square == square


@pytest.mark.parametrize("square", ["e4", "l2", "x23", "l99", "upper"])
def test_invalid_square_names(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        PickRequest(game_id=mock_id, kind=PickKind.SQUARE, square=square)


def test_empty_pick_needs_nothing(mock_id: UUID) -> None:
    request = PickRequest(game_id=mock_id, kind="empty")
    assert request.kind == PickKind.EMPTY
    assert request.piece_id is None
    assert request.square is None


def test_unknown_pick_kind(mock_id: UUID) -> None:
    with pytest.raises(ValidationError):
        PickRequest(game_id=mock_id, kind="hover")
