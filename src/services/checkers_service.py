"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CandidateMovesRequest,
    CandidateMovesResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GameSummaryResponse,
    GetGameRequest,
    PickRequest,
    PieceResponse,
    ResetGameRequest,
    SettingsRequest,
)
from src.checkers.game import Game
from src.checkers.selection import EmptyPick, PickEvent, PiecePick, SquarePick
from src.checkers.square import Square
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Difficulty, GameMode, PickKind
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for a two-board checkers game."""

    def __init__(
        self,
        repository: GameRepository,
        default_mode: GameMode = GameMode.PVP,
        default_difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> None:
        self.repo = repository
        self.default_mode = default_mode
        self.default_difficulty = default_difficulty

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a session with the fixed starting layout."""

        new_game = Game.new_game(
            mode=request.mode or self.default_mode,
            difficulty=request.difficulty or self.default_difficulty,
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info(
            "Created game %s (mode=%s, difficulty=%s)",
            game_id,
            new_game.mode,
            new_game.difficulty,
        )
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the frontend to redraw after every click.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def pick(self, request: PickRequest) -> GameResponse:
        """Feed a click into the state machine. Ignored picks still return the (unchanged) state."""

        game = Game.from_model(self._fetch_game(request.game_id))
        event = self._to_pick_event(request)
        player_before = game.current_player

        move = game.pick(event)
        if move is not None:
            logger.info(
                "Game %s: %s moved %s (turn passes to %s)",
                request.game_id,
                player_before,
                move.to_notation(),
                game.current_player,
            )
        else:
            logger.debug(
                "Game %s: %s pick, selected=%s",
                request.game_id,
                request.kind,
                game.state.selected_piece_id,
            )

        after_pick = game.to_model()
        self.repo.update_game(request.game_id, after_pick)
        return self._create_game_response(request.game_id, game)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        game.reset()
        self.repo.update_game(request.game_id, game.to_model())
        logger.info("Game %s reset", request.game_id)
        return self._create_game_response(request.game_id, game)

    def change_settings(self, request: SettingsRequest) -> GameResponse:
        """Mode / difficulty are only stored (there is no computer opponent to hand them to)."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.change_settings(mode=request.mode, difficulty=request.difficulty)
        self.repo.update_game(request.game_id, game.to_model())
        logger.info(
            "Game %s settings: mode=%s, difficulty=%s",
            request.game_id,
            game.mode,
            game.difficulty,
        )
        return self._create_game_response(request.game_id, game)

    def candidate_moves(self, request: CandidateMovesRequest) -> CandidateMovesResponse:
        """Squares to highlight for the currently selected piece (empty when nothing is selected)."""
        game = Game.from_model(self._fetch_game(request.game_id))
        snapshot = game.snapshot()
        return CandidateMovesResponse(
            game_id=request.game_id,
            selected_piece_id=snapshot["selected_piece_id"],
            candidate_moves=snapshot["candidate_moves"],
        )

    def list_games(self) -> list[GameSummaryResponse]:
        """Show all recorded games (without their pieces)."""
        return [
            GameSummaryResponse(
                game_id=game_id,
                current_player=model.current_player,
                mode=model.mode,
                moves_played=len(model.moves),
                game_started=model.game_started,
            )
            for game_id, model in self.repo.list_games()
        ]

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Game %s deleted", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game snapshot to a GameResponse (for game with given ID.)"""
        snapshot = game.snapshot()
        return GameResponse(
            game_id=game_id,
            current_player=snapshot["current_player"],
            selected_piece_id=snapshot["selected_piece_id"],
            pieces=[PieceResponse(**record) for record in snapshot["pieces"]],
            candidate_moves=snapshot["candidate_moves"],
            move_history=[move.to_notation() for move in game.moves],
            mode=game.mode,
            difficulty=game.difficulty,
            game_started=game.game_started,
        )

    def _to_pick_event(self, request: PickRequest) -> PickEvent:
        """Check the pick carries what its kind needs, and build the domain event."""
        if request.kind == PickKind.PIECE:
            if request.piece_id is None:
                raise InvalidRequestError("A piece pick needs a piece_id.")
            return PiecePick(request.piece_id)
        if request.kind == PickKind.SQUARE:
            if request.square is None:
                raise InvalidRequestError("A square pick needs a square.")
            return SquarePick(Square.from_notation(request.square))
        return EmptyPick()

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
