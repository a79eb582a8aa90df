"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def list_games(self) -> list[tuple[UUID, GameModel]]:
        """All stored games, oldest first."""
        query = select(DBGame).order_by(DBGame.created_at)
        return [(game_db.id, self._to_model(game_db)) for game_db in self.db.scalars(query)]

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(id=new_id)
        self._copy_into(game_db, game)
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        self._copy_into(game_db, game)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _copy_into(self, game_db: DBGame, game: GameModel) -> None:
        # NOTE: JSON columns only notice re-assignment, so always hand over fresh lists
        game_db.current_player = game.current_player
        game_db.selected_piece_id = game.selected_piece_id
        game_db.pieces = [dict(record) for record in game.pieces]
        game_db.moves = list(game.moves)
        game_db.mode = game.mode
        game_db.difficulty = game.difficulty
        game_db.game_started = game.game_started

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            current_player=game_db.current_player,
            pieces=[dict(record) for record in game_db.pieces],
            selected_piece_id=game_db.selected_piece_id,
            moves=list(game_db.moves),
            mode=game_db.mode,
            difficulty=game_db.difficulty,
            game_started=game_db.game_started,
        )
