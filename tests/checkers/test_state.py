"""Unit tests for /src/checkers/state.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.checkers.state import GameState, apply_move
from src.core.shared_types import Color
from tests.helpers import lone_piece_state, make_piece, sq


# --- INITIAL STATE ---
def test_initial_state(initial_state: GameState) -> None:
    assert initial_state.current_player == Color.RED
    assert initial_state.selected_piece_id is None
    assert initial_state.candidate_moves == frozenset()
    assert initial_state.is_idle
    assert len(initial_state.pieces) == 24


def test_state_is_read_only(initial_state: GameState) -> None:
    with pytest.raises(FrozenInstanceError):
        initial_state.current_player = Color.BLACK  # type: ignore[misc]
    with pytest.raises(TypeError):
        initial_state.pieces["red_2_3"] = initial_state.pieces["red_2_1"]  # type: ignore[index]


# --- SELECTION ---
def test_select_own_piece(initial_state: GameState) -> None:
    state = initial_state.select("red_2_3")
    assert state.selected_piece_id == "red_2_3"
    assert state.selected_piece == initial_state.pieces["red_2_3"]
    assert state.candidate_moves == {sq("l32"), sq("l34")}


def test_select_opponent_piece_is_ignored(initial_state: GameState) -> None:
    assert initial_state.select("black_5_2") is initial_state


def test_select_unknown_piece_is_ignored(initial_state: GameState) -> None:
    assert initial_state.select("green_1_1") is initial_state


def test_clear_selection(initial_state: GameState) -> None:
    state = initial_state.select("red_2_3").clear_selection()
    assert state.is_idle
    assert state.candidate_moves == frozenset()
    assert state.current_player == Color.RED
    # nothing to clear
    assert initial_state.clear_selection() is initial_state


# --- APPLY MOVE ---
def test_apply_move(initial_state: GameState) -> None:
    state = initial_state.select("red_2_3")
    after = apply_move(state, "red_2_3", sq("l34"))

    assert after.pieces["red_2_3"].position == sq("l34")
    assert not after.pieces["red_2_3"].is_king
    assert after.current_player == Color.BLACK
    assert after.selected_piece_id is None
    assert after.candidate_moves == frozenset()
    # the old state is untouched
    assert state.pieces["red_2_3"].position == sq("l23")
    assert state.current_player == Color.RED


def test_apply_move_only_moves_one_piece(initial_state: GameState) -> None:
    after = apply_move(initial_state.select("red_2_3"), "red_2_3", sq("l32"))
    for piece_id, piece in after.pieces.items():
        if piece_id != "red_2_3":
            assert piece == initial_state.pieces[piece_id]


def test_apply_move_to_non_candidate_is_noop(initial_state: GameState) -> None:
    state = initial_state.select("red_2_3")
    for target in ["l43", "l12", "u01", "l33"]:
        assert apply_move(state, "red_2_3", sq(target)) is state


def test_apply_move_without_selection_is_noop(initial_state: GameState) -> None:
    assert apply_move(initial_state, "red_2_3", sq("l34")) is initial_state


def test_apply_move_for_other_piece_than_selected_is_noop(
    initial_state: GameState,
) -> None:
    state = initial_state.select("red_2_3")
    assert apply_move(state, "red_2_1", sq("l32")) is state


def test_apply_move_out_of_turn_is_noop() -> None:
    """Even if a state somehow has the opponent's piece selected, the move is refused."""
    piece = make_piece("u52", Color.BLACK, piece_id="black_5_2")
    state = GameState(
        current_player=Color.RED,
        pieces={piece.id: piece},
        selected_piece_id=piece.id,
    )
    after = apply_move(state, piece.id, sq("u41"))
    assert after is state
    assert after.current_player == Color.RED


def test_apply_crossing_move() -> None:
    piece = make_piece("l61", Color.RED, piece_id="red")
    state = lone_piece_state(piece).select("red")
    after = apply_move(state, "red", sq("u01"))
    assert after.pieces["red"].position == sq("u01")
    assert after.current_player == Color.BLACK


def test_apply_move_promotes() -> None:
    piece = make_piece("u65", Color.RED, piece_id="red")
    state = lone_piece_state(piece).select("red")
    after = apply_move(state, "red", sq("u76"))
    assert after.pieces["red"].is_king


def test_black_promotes_on_lower_board() -> None:
    piece = make_piece("l12", Color.BLACK, piece_id="black")
    state = lone_piece_state(piece).select("black")
    after = apply_move(state, "black", sq("l03"))
    assert after.pieces["black"].is_king
    assert after.current_player == Color.RED


def test_players_alternate(initial_state: GameState) -> None:
    state = apply_move(initial_state.select("red_2_3"), "red_2_3", sq("l34"))
    assert state.current_player == Color.BLACK
    state = apply_move(state.select("black_5_2"), "black_5_2", sq("u41"))
    assert state.current_player == Color.RED
    state = apply_move(state.select("red_2_1"), "red_2_1", sq("l32"))
    assert state.current_player == Color.BLACK
