"""
The state of a game in progress, and the rule that applies a move to it.

GameState is immutable: every transition returns a new instance (or the very same
instance when nothing changed), so callers can hand out snapshots freely.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Self

from src.checkers.moves import generate_moves, promote
from src.checkers.pieces import Piece, initial_pieces, opponent
from src.checkers.square import Square
from src.core.shared_types import Color


@dataclass(frozen=True)
class GameState:
    current_player: Color
    pieces: Mapping[str, Piece]
    selected_piece_id: Optional[str] = None
    # Highlight set for the presentation layer: only non-empty while a piece is selected
    candidate_moves: frozenset[Square] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # read-only view, so a snapshot cannot be changed behind the engine's back
        if not isinstance(self.pieces, MappingProxyType):
            object.__setattr__(self, "pieces", MappingProxyType(dict(self.pieces)))

    @classmethod
    def initial(cls) -> Self:
        """Fixed starting layout. Red to move, nothing selected."""
        return cls(current_player=Color.RED, pieces=initial_pieces())

    @property
    def selected_piece(self) -> Optional[Piece]:
        if self.selected_piece_id is None:
            return None
        return self.pieces.get(self.selected_piece_id)

    @property
    def is_idle(self) -> bool:
        return self.selected_piece_id is None

    def select(self, piece_id: str) -> Self:
        """Select one of the current player's pieces and compute where it can go."""
        piece = self.pieces.get(piece_id)
        if piece is None or piece.color != self.current_player:
            return self
        return replace(
            self, selected_piece_id=piece_id, candidate_moves=generate_moves(piece)
        )

    def clear_selection(self) -> Self:
        if self.is_idle:
            return self
        return replace(self, selected_piece_id=None, candidate_moves=frozenset())


def apply_move(state: GameState, piece_id: str, target: Square) -> GameState:
    """
    Move the selected piece to target
    ----

    ----
    Preconditions (the state is returned untouched if any of them fails):
    1. the piece is the one currently selected
    2. it belongs to the player whose turn it is
    3. target is one of its candidate moves

    Effects: update position, crown if needed, hand the turn to the opponent, clear the selection.
    """
    piece = state.pieces.get(piece_id)
    if piece is None or state.selected_piece_id != piece_id:
        return state
    if piece.color != state.current_player:
        return state
    if target not in generate_moves(piece):
        return state

    moved_piece = replace(piece, position=target, is_king=promote(piece, target))
    pieces = dict(state.pieces)
    pieces[piece_id] = moved_piece
    return GameState(
        current_player=opponent(state.current_player),
        pieces=pieces,
        selected_piece_id=None,
        candidate_moves=frozenset(),
    )
