"""Defines the checkers pieces and the starting layout"""

from dataclasses import dataclass
from typing import Self

from src.checkers.square import BOARD_SIZE, Square
from src.core.exceptions import GameStateError, InvalidRequestError
from src.core.models import PieceRecord
from src.core.shared_types import BoardLevel, Color

AVAILABLE_COLOR_NAMES = [color.value for color in Color]
REQUIRED_RECORD_KEYS = ("id", "color", "position")

# Rows each color fills at the start, and on which board
STARTING_ROWS: dict[Color, tuple[BoardLevel, range]] = {
    Color.RED: (BoardLevel.LOWER, range(0, 3)),
    Color.BLACK: (BoardLevel.UPPER, range(5, 8)),
}


@dataclass(frozen=True)
class Piece:
    id: str
    color: Color
    position: Square
    is_king: bool = False

    @classmethod
    def from_record(cls, record: PieceRecord) -> Self:
        """Rebuild a piece from its transport form. Anything off a dark square is rejected."""
        missing = [key for key in REQUIRED_RECORD_KEYS if key not in record]
        if missing:
            raise GameStateError(
                f"Piece record {record!r} is missing {','.join(missing)}"
            )
        color_name = str(record["color"])
        if color_name not in AVAILABLE_COLOR_NAMES:
            raise GameStateError(
                f"Invalid piece color: {color_name!r}. Pick one from {','.join(AVAILABLE_COLOR_NAMES)}"
            )
        try:
            position = Square.from_notation(str(record["position"]))
        except InvalidRequestError as err:
            raise GameStateError(f"Piece {record['id']}: {err}") from err
        if not position.is_playable():
            raise GameStateError(
                f"Piece {record['id']} sits on a light square: {position.to_notation()}"
            )
        return cls(
            id=str(record["id"]),
            color=Color(color_name),
            position=position,
            is_king=bool(record.get("is_king", False)),
        )

    def to_record(self) -> PieceRecord:
        return {
            "id": self.id,
            "color": self.color.value,
            "position": self.position.to_notation(),
            "is_king": self.is_king,
        }


def opponent(color: Color) -> Color:
    return Color.BLACK if color == Color.RED else Color.RED


def initial_pieces() -> dict[str, Piece]:
    """Red fills the dark squares of rows 0-2 on the lower board, Black rows 5-7 on the upper board."""
    pieces: dict[str, Piece] = {}
    for color, (board, rows) in STARTING_ROWS.items():
        for row in rows:
            for col in range(BOARD_SIZE):
                square = Square(row, col, board)
                if square.is_playable():
                    piece_id = f"{color.value}_{row}_{col}"
                    pieces[piece_id] = Piece(piece_id, color, square)
    return pieces
