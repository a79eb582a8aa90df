"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceId = str
PieceRecord = dict[str, str | bool]  # {"id", "color", "position" (square notation), "is_king"}


@dataclass
class GameModel:
    """Transport-safe representation of a two-board checkers game used between API, Service, DB, and Game layers."""

    current_player: str
    pieces: list[PieceRecord]
    selected_piece_id: Optional[PieceId] = None
    moves: list[str] = field(default_factory=list)
    mode: str = "pvp"
    difficulty: str = "medium"
    game_started: bool = False
