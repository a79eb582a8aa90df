"""Protocol repository: the service only talks to this. SQLAlchemy version lives in sql_repository.py"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence of GameModels, keyed by game ID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def list_games(self) -> list[tuple[UUID, GameModel]]:
        """All stored games, oldest first."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the record with the new state. None if there is no such game."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record, returning what was removed."""
        ...
