"""Shortcuts for building pieces / states in tests"""

from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.checkers.state import GameState
from src.core.shared_types import Color


def sq(notation: str) -> Square:
    return Square.from_notation(notation)


def make_piece(
    notation: str, color: Color = Color.RED, is_king: bool = False, piece_id: str = "p"
) -> Piece:
    """A single piece on a square given in compact notation"""
    return Piece(piece_id, color, sq(notation), is_king)


def lone_piece_state(piece: Piece, current_player: Color | None = None) -> GameState:
    """A board with just this one piece on it, with its owner to move (unless told otherwise)"""
    return GameState(
        current_player=current_player or piece.color, pieces={piece.id: piece}
    )
