"""
Movement rules: which squares a piece may step to, and when it gets crowned.

Key idea: a plain lookup of diagonal step vectors per color, plus one extra
'crossing' move that takes a piece from the edge of one board to the facing
edge of the other.

There are no captures/jumps, and destinations are NOT checked for occupancy.
"""

from dataclasses import dataclass
from typing import Self

from src.checkers.pieces import Piece
from src.checkers.square import BOARD_SIZE, Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BoardLevel, Color

Vector = tuple[int, int]  # (d_row, d_col)


@dataclass(frozen=True)
class Move:
    """A move that was applied: which piece went where"""

    piece_id: str
    from_square: Square
    to_square: Square

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Example: "red_2_3:l23-l34"
        * red_2_3: the id of the piece that moved
        * l23: where it came from
        * l34: where it ended up
        """
        piece_id, _, squares = notation.partition(":")
        from_sq, _, to_sq = squares.partition("-")
        if not (piece_id and from_sq and to_sq):
            raise InvalidRequestError(f"Cannot interpret {notation!r} as a move.")
        return cls(piece_id, Square.from_notation(from_sq), Square.from_notation(to_sq))

    def to_notation(self) -> str:
        return f"{self.piece_id}:{self.from_square.to_notation()}-{self.to_square.to_notation()}"


# --- MOVEMENT RULES ---
# Red starts on the lower board and moves up the rows, Black starts on the upper board and moves down.
FORWARD_DIRECTIONS: dict[Color, list[Vector]] = {
    Color.RED: [(1, 1), (1, -1)],
    Color.BLACK: [(-1, 1), (-1, -1)],
}
KING_DIRECTIONS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

# A non-king may cross once it is within this many rows of the far edge of its board.
CROSSING_ZONE_DEPTH = 2

# Where a piece of each color is crowned
PROMOTION_SQUARES: dict[Color, tuple[BoardLevel, int]] = {
    Color.RED: (BoardLevel.UPPER, BOARD_SIZE - 1),
    Color.BLACK: (BoardLevel.LOWER, 0),
}


def step_directions(piece: Piece) -> list[Vector]:
    return KING_DIRECTIONS if piece.is_king else FORWARD_DIRECTIONS[piece.color]


def diagonal_steps(piece: Piece, board_size: int = BOARD_SIZE) -> set[Square]:
    """Single diagonal steps on the board the piece is on"""
    square = piece.position
    moves: set[Square] = set()
    for d_row, d_col in step_directions(piece):
        target_square = Square(square.row + d_row, square.col + d_col, square.board)
        if not target_square.is_within_bounds(board_size):
            continue
        if target_square.is_playable():
            moves.add(target_square)
    return moves


def crossing_zone(board: BoardLevel, board_size: int = BOARD_SIZE) -> range:
    """Lower board: the top rows. Upper board: the bottom rows."""
    if board == BoardLevel.LOWER:
        return range(board_size - CROSSING_ZONE_DEPTH, board_size)
    return range(0, CROSSING_ZONE_DEPTH)


def crossing_target_row(board: BoardLevel, board_size: int = BOARD_SIZE) -> int:
    """The row a crossing piece lands on, given the board it comes FROM."""
    return 0 if board == BoardLevel.LOWER else board_size - 1


def can_cross(piece: Piece, board_size: int = BOARD_SIZE) -> bool:
    """Kings may always cross. Other pieces need to be in the crossing zone of their board."""
    square = piece.position
    return piece.is_king or square.row in crossing_zone(square.board, board_size)


def crossing_move(piece: Piece, board_size: int = BOARD_SIZE) -> Square | None:
    """Same column on the other board, at the row facing the edge just left. Only if that lands on a dark square."""
    if not can_cross(piece, board_size):
        return None
    square = piece.position
    target_square = Square(
        crossing_target_row(square.board, board_size),
        square.col,
        square.opposite_board(),
    )
    if not target_square.is_within_bounds(board_size):
        return None
    return target_square if target_square.is_playable() else None


def generate_moves(piece: Piece, board_size: int = BOARD_SIZE) -> frozenset[Square]:
    """
    All candidate destinations for a piece
    ----
    1. diagonal steps (forward only, unless king)
    2. the crossing move to the other board (if allowed)
    """
    moves = diagonal_steps(piece, board_size)
    crossing = crossing_move(piece, board_size)
    if crossing is not None:
        moves.add(crossing)
    return frozenset(moves)


# --- PROMOTION ---
def promote(piece: Piece, destination: Square) -> bool:
    """King status after landing on destination. Once a king, always a king."""
    if piece.is_king:
        return True
    board, row = PROMOTION_SQUARES[piece.color]
    return destination.board == board and destination.row == row
