"""
Selection state machine: turns the picks coming from the presentation layer into
selections and moves.

States: Idle (nothing selected) or Selected(piece, candidate moves). Both live in GameState.
Illegal picks are ignored: the same state comes back.
"""

from dataclasses import dataclass

from src.checkers.square import Square
from src.checkers.state import GameState, apply_move


@dataclass(frozen=True)
class PiecePick:
    piece_id: str


@dataclass(frozen=True)
class SquarePick:
    square: Square


@dataclass(frozen=True)
class EmptyPick:
    """Clicked on nothing at all"""


PickEvent = PiecePick | SquarePick | EmptyPick


def handle_pick(state: GameState, event: PickEvent) -> GameState:
    """
    | state    | event                     | result                          |
    |----------|---------------------------|---------------------------------|
    | any      | own piece                 | Selected(piece) (reselect ok)   |
    | any      | opponent / unknown piece  | unchanged                       |
    | Idle     | square / empty            | unchanged                       |
    | Selected | square in candidate moves | move applied, turn flips, Idle  |
    | Selected | square elsewhere          | unchanged                       |
    | Selected | empty                     | Idle, same player to move       |
    """
    if isinstance(event, PiecePick):
        return state.select(event.piece_id)

    if isinstance(event, SquarePick):
        if state.selected_piece_id is None:
            return state
        if event.square not in state.candidate_moves:
            return state
        return apply_move(state, state.selected_piece_id, event.square)

    # EmptyPick: drop the selection, the turn stays with the same player
    return state.clear_selection()
