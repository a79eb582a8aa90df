"""
The Game class will be the entrypoint into the domain layer for the service layer.
It wraps the rules (GameState + selection state machine) together with the session data the UI cares about:
move history, the 'game started' flag, and the (inert) mode / difficulty settings.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Self

from src.checkers.moves import Move
from src.checkers.pieces import Piece
from src.checkers.selection import PickEvent, handle_pick
from src.checkers.state import GameState
from src.core.exceptions import GameStateError, InvalidRequestError
from src.core.models import GameModel
from src.core.shared_types import Color, Difficulty, GameMode


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    state: GameState
    mode: GameMode = GameMode.PVP
    difficulty: Difficulty = Difficulty.MEDIUM
    moves: list[Move] = field(default_factory=list)
    game_started: bool = False

    @classmethod
    def new_game(
        cls,
        mode: GameMode | str = GameMode.PVP,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
    ) -> Self:
        """Fixed starting layout, Red to move."""
        return cls(
            state=GameState.initial(),
            mode=_parse_mode(mode),
            difficulty=_parse_difficulty(difficulty),
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.current_player not in [color.value for color in Color]:
            raise GameStateError(
                f"Invalid current player: {model.current_player!r}. \nPick one from {','.join([color.value for color in Color])}"
            )
        pieces = [Piece.from_record(record) for record in model.pieces]
        pieces_by_id = {piece.id: piece for piece in pieces}
        if len(pieces_by_id) != len(pieces):
            raise GameStateError("Piece ids must be unique.")

        # create the Game. The candidate moves are not stored: selecting again recomputes them.
        state = GameState(current_player=Color(model.current_player), pieces=pieces_by_id)
        if model.selected_piece_id is not None:
            state = state.select(model.selected_piece_id)
            if state.selected_piece_id != model.selected_piece_id:
                raise GameStateError(
                    f"Selected piece {model.selected_piece_id!r} does not exist or does not belong to {model.current_player}."
                )

        try:
            moves = [Move.from_notation(notation) for notation in model.moves]
        except InvalidRequestError as err:
            raise GameStateError(f"Corrupt move history: {err}") from err

        return cls(
            state=state,
            mode=_parse_mode(model.mode),
            difficulty=_parse_difficulty(model.difficulty),
            moves=moves,
            game_started=model.game_started,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_player=self.state.current_player.value,
            pieces=[piece.to_record() for piece in self.state.pieces.values()],
            selected_piece_id=self.state.selected_piece_id,
            moves=[move.to_notation() for move in self.moves],
            mode=self.mode.value,
            difficulty=self.difficulty.value,
            game_started=self.game_started,
        )

    @property
    def current_player(self) -> Color:
        return self.state.current_player

    def pick(self, event: PickEvent) -> Optional[Move]:
        """
        Feed a pick from the presentation layer to the state machine.
        ----

        ----
        Returns the move if the pick resulted in one, None otherwise (selection changes and ignored picks).
        """
        before = self.state
        after = handle_pick(before, event)
        self.state = after

        # A move is the only transition that hands the turn to the other player
        if after.current_player == before.current_player:
            return None

        moved = before.selected_piece
        assert moved is not None
        move = Move(moved.id, moved.position, after.pieces[moved.id].position)
        self._record_move(move)
        return move

    def reset(self) -> None:
        """Back to the starting layout. Mode and difficulty survive a reset."""
        self.state = GameState.initial()
        self.moves = []
        self.game_started = False

    def change_settings(
        self,
        mode: Optional[GameMode | str] = None,
        difficulty: Optional[Difficulty | str] = None,
    ) -> None:
        """NOTE: stored for the UI only. No rule looks at these."""
        if mode is not None:
            self.mode = _parse_mode(mode)
        if difficulty is not None:
            self.difficulty = _parse_difficulty(difficulty)

    def snapshot(self) -> dict[str, Any]:
        """What the presentation layer needs to redraw: the pieces, whose turn it is, and the squares to highlight."""
        return {
            "current_player": self.state.current_player.value,
            "selected_piece_id": self.state.selected_piece_id,
            "pieces": [piece.to_record() for piece in self.state.pieces.values()],
            "candidate_moves": sorted(
                square.to_notation() for square in self.state.candidate_moves
            ),
        }

    # -- PRIVATE HELPERS ---
    def _record_move(self, move: Move) -> None:
        self.moves.append(move)
        self.game_started = True


def _parse_mode(mode: GameMode | str) -> GameMode:
    if mode not in [m.value for m in GameMode]:
        raise GameStateError(
            f"Invalid game mode: {mode!r}. Pick one from {','.join([m.value for m in GameMode])}"
        )
    return GameMode(mode)


def _parse_difficulty(difficulty: Difficulty | str) -> Difficulty:
    if difficulty not in [d.value for d in Difficulty]:
        raise GameStateError(
            f"Invalid difficulty: {difficulty!r}. Pick one from {','.join([d.value for d in Difficulty])}"
        )
    return Difficulty(difficulty)
