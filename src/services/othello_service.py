"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    ComputerMoveRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    RestartGameRequest,
)
from src.core.exceptions import GameStateError, NotYourTurnError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Outcome, Status
from src.db.repository import GameRepository
from src.othello.discs import Color as DiscColor
from src.othello.game import Game
from src.othello.game import Status as GameStatus
from src.othello.opponent import Difficulty, select_move
from src.othello.square import Square

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(
        self, repository: GameRepository, rng: Optional[random.Random] = None
    ) -> None:
        self.repo = repository
        # None: the opponent module falls back to its own generator
        self.rng = rng

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game (black to move)."""

        new_game = Game.new_game(starting_layout=request.starting_layout)
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to redraw the board, scores and move log.
        """
        game = self._load_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Cells to highlight: where this color could place a disc. Nothing once the game is over."""

        game = self._load_game(request.game_id)
        legal_moves: list[str] = []
        if game.active:
            color = DiscColor[request.color.name]
            legal_moves = [square.to_algebraic() for square in game.legal_moves(color)]

        return LegalMovesResponse(
            game_id=request.game_id,
            color=request.color,
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """A (human) player places a disc."""

        game = self._load_game(request.game_id)
        self._assert_game_active(game)

        color = DiscColor[request.color.name]
        if color != game.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {game.current_player.name.lower()} to make a move first."
            )

        square = Square.from_algebraic(request.square)
        return self._play(request.game_id, game, square)

    def computer_move(self, request: ComputerMoveRequest) -> GameResponse:
        """Let the computer opponent play for whichever color is to move."""

        game = self._load_game(request.game_id)
        self._assert_game_active(game)

        difficulty = Difficulty[request.difficulty.name]
        chosen = select_move(game, game.current_player, difficulty, self.rng)
        if chosen is None:
            # new games and advance_turn() never hand an active game to a player without a legal move
            raise GameStateError(
                f"{game.current_player.name.lower()} has no legal move in an active game."
            )

        return self._play(request.game_id, game, chosen)

    def restart_game(self, request: RestartGameRequest) -> GameResponse:
        """Back to the starting position, history cleared."""

        game = self._load_game(request.game_id)
        game.reset()
        self._store_game(request.game_id, game)
        logger.info("Restarted game %s", request.game_id)
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _play(self, game_id: UUID, game: Game, square: Square) -> GameResponse:
        """Apply the move, resolve whose turn it is, store."""
        game.apply_move(square.row, square.col, game.current_player)
        result = game.advance_turn()
        self._store_game(game_id, game)

        if result.status == GameStatus.OVER:
            logger.info("Game %s finished", game_id)
        return self._create_game_response(game_id, game)

    def _assert_game_active(self, game: Game) -> None:
        if not game.active:
            raise GameStateError(f"Game is over. status: {game.status.name.lower()}")

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the info of the Game to a GameResponse (for game with given ID.)"""

        model = game.to_model()
        passed_player = game.passed_player
        return GameResponse(
            game_id=game_id,
            layout=model.current_layout,
            color_to_move=Color(model.color_to_move),
            scores={color.name.lower(): count for color, count in game.scores.items()},
            status=Status(model.status),
            winner=Outcome(model.winner) if model.winner else None,
            passed_player=Color[passed_player.name] if passed_player else None,
            move_history=model.moves,
            move_log=game.move_log(),
        )

    def _store_game(self, game_id: UUID, game: Game) -> None:
        if self.repo.update_game(game_id, game.to_model()) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")

    def _load_game(self, game_id: UUID) -> Game:
        return Game.from_model(self._fetch_game(game_id))

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
