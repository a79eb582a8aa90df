"""
A square on one of the two boards

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BoardLevel

# Both boards are 8x8. Kept as a constant so the move generator can be handed a different size.
BOARD_SIZE = 8

BOARD_TO_NOTATION: dict[BoardLevel, str] = {
    BoardLevel.LOWER: "l",
    BoardLevel.UPPER: "u",
}
NOTATION_TO_BOARD: dict[str, BoardLevel] = {
    value: key for key, value in BOARD_TO_NOTATION.items()
}


@dataclass(frozen=True)
class Square:
    row: int
    col: int
    board: BoardLevel

    @classmethod
    def from_notation(cls, sq: str) -> Square:
        """Compact notation: board initial, then row and column digit. 'l23' is row 2, column 3 on the lower board."""
        if len(sq) != 3 or sq[0] not in NOTATION_TO_BOARD or not sq[1:].isdigit():
            raise InvalidRequestError(
                f"Cannot interpret {sq!r} as a square. Expected e.g. 'l23' or 'u70'."
            )
        square = lookup_square(int(sq[1]), int(sq[2]), NOTATION_TO_BOARD[sq[0]])
        if square is None:
            raise InvalidRequestError(f"Square {sq!r} is off the board.")
        return square

    def to_notation(self) -> str:
        return f"{BOARD_TO_NOTATION[self.board]}{self.row}{self.col}"

    def is_within_bounds(self, board_size: int = BOARD_SIZE) -> bool:
        return (0 <= self.row < board_size) and (0 <= self.col < board_size)

    def is_playable(self) -> bool:
        """Only the dark squares hold pieces"""
        return (self.row + self.col) % 2 == 1

    def opposite_board(self) -> BoardLevel:
        return BoardLevel.UPPER if self.board == BoardLevel.LOWER else BoardLevel.LOWER


@cache
def all_squares() -> dict[tuple[int, int, BoardLevel], Square]:
    """Lookup table of every cell on both boards, keyed by (row, col, board)"""
    return {
        (row, col, board): Square(row, col, board)
        for board in BoardLevel
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    }


def lookup_square(row: int, col: int, board: BoardLevel) -> Square | None:
    return all_squares().get((row, col, board))
