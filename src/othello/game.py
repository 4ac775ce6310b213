"""
The Game class is the rules engine and the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is, the scores and the move history,
and is the only place where any of those get changed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    InvalidCoordinateError,
    InvalidLayoutError,
    InvalidMoveError,
)
from src.core.models import GameModel
from src.othello.board import STARTING_LAYOUT, Board
from src.othello.discs import AVAILABLE_COLOR_NAMES, Color
from src.othello.moves import MoveRecord
from src.othello.rules import count_flips, flips_for_move, legal_placements
from src.othello.square import Square

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    PASSED = auto()
    OVER = auto()


class Outcome(Enum):
    BLACK = auto()
    WHITE = auto()
    TIE = auto()


@dataclass(frozen=True)
class TurnResult:
    """What the driver needs to know after a move got resolved."""

    status: Status
    current_player: Color
    passed_player: Optional[Color] = None
    winner: Optional[Outcome] = None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color
    scores: dict[Color, int]
    active: bool
    history: list[MoveRecord]
    status: Status
    starting_layout: str = STARTING_LAYOUT
    winner: Optional[Outcome] = field(default=None)

    @classmethod
    def new_game(cls, starting_layout: Optional[str] = None) -> Self:
        """
        Black always moves first. Without a layout: the four discs in the center.

        A custom layout can leave black without a move: then black passes right away,
        or the game is over before it started when white cannot move either.
        """
        game = cls._from_layout(starting_layout or STARTING_LAYOUT)
        game._resolve_opening()
        return game

    @classmethod
    def _from_layout(cls, layout: str) -> Self:
        board = Board.from_layout(layout)
        return cls(
            board=board,
            current_player=Color.BLACK,
            scores=board.count_discs(),
            active=True,
            history=[],
            status=Status.IN_PROGRESS,
            starting_layout=board.to_layout(),
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Define how to construct a Game from the information the Service layer actually has
        ----

        The history only stores where discs were placed, so replay those moves from the starting layout.
        The replay must end up in the stored current layout.
        """

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        if model.color_to_move.upper() not in AVAILABLE_COLOR_NAMES:
            raise GameStateError(f"Invalid color to move: {model.color_to_move!r}")
        if model.winner is not None and model.winner.upper() not in Outcome.__members__:
            raise GameStateError(f"Invalid winner: {model.winner!r}")

        # create the Game
        game = cls._from_layout(model.starting_layout)
        for notation in model.moves:
            try:
                record = MoveRecord.from_notation(notation)
            except InvalidLayoutError as error:
                raise GameStateError(
                    f"Stored move {notation!r} cannot be read: {error}"
                ) from error
            try:
                game.apply_move(record.square.row, record.square.col, record.player)
            except InvalidMoveError as error:
                raise GameStateError(
                    f"Stored move {notation!r} cannot be replayed: {error}"
                ) from error

        if game.board.to_layout() != model.current_layout:
            raise GameStateError(
                f"Replaying the moves gives {game.board.to_layout()!r}, but the stored layout is {model.current_layout!r}."
            )

        game.current_player = Color[model.color_to_move.upper()]
        game.status = Status[status_name]
        game.active = game.status != Status.OVER
        game.winner = Outcome[model.winner.upper()] if model.winner else None
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            starting_layout=self.starting_layout,
            current_layout=self.board.to_layout(),
            moves=[record.to_notation() for record in self.history],
            color_to_move=self.current_player.name.lower(),
            status=self.status.name.lower(),
            winner=self.winner.name.lower() if self.winner else None,
        )

    def reset(self) -> None:
        """Restart: canonical starting layout, black to move, history cleared."""
        self.board = Board.from_layout(STARTING_LAYOUT)
        self.starting_layout = STARTING_LAYOUT
        self.current_player = Color.BLACK
        self.history = []
        self.active = True
        self.winner = None
        self._change_status(Status.IN_PROGRESS)
        self._update_scores()

    @property
    def passed_player(self) -> Optional[Color]:
        """After a pass, the player to move is the one who just moved: the other one had to pass."""
        if self.status != Status.PASSED:
            return None
        return self.current_player.opponent

    @property
    def empty_count(self) -> int:
        return len(self.board.empty_squares())

    def is_legal_move(self, row: int, col: int, player: Color) -> bool:
        square = self._to_square(row, col)
        return bool(flips_for_move(square, player, self.board))

    def count_flips(self, row: int, col: int, player: Color) -> int:
        """Simulate the move: how many discs would turn over. Board is not touched (0 for an illegal move)."""
        square = self._to_square(row, col)
        return count_flips(square, player, self.board)

    def legal_moves(self, player: Color) -> list[Square]:
        """Row-major order. These can be used to highlight cells to the user."""
        return legal_placements(player, self.board)

    def has_any_legal_move(self, player: Color) -> bool:
        return len(self.legal_moves(player)) > 0

    def apply_move(self, row: int, col: int, player: Color) -> list[Square]:
        """
        Place a disc and flip everything it sandwiches
        -----

        1. place the disc
        2. flip the opponent's discs in every direction where the sandwich rule holds
        3. update the move history
        4. recount the scores

        Does NOT change whose turn it is: the driver calls `advance_turn()` next.
        """
        square = self._to_square(row, col)
        flipped = flips_for_move(square, player, self.board)
        if not flipped:
            raise InvalidMoveError(
                f"Move not allowed: {player.name.lower()} at {square.to_label()}"
            )

        self.board.place_disc(player, square)
        self.board.flip_discs(flipped)
        self._update_history(MoveRecord(player, square, tuple(flipped)))
        self._update_scores()

        logger.debug(
            "%s played %s, flipped %d disc(s)",
            player.name.lower(),
            square.to_label(),
            len(flipped),
        )
        return flipped

    def advance_turn(self) -> TurnResult:
        """
        Performs checks to see whose turn it is next, or if the game has ended, and changes status accordingly.

        NOTE the move has already been applied. At this point the current player is still the player who just moved.
        Everything is decided on the board as it is now, for the player who would move next.

        1. board full --> game over
        2. next player cannot move, and the mover cannot either --> game over
        3. next player cannot move --> they pass, the mover plays again
        4. otherwise --> next player's turn
        """
        if self.status == Status.OVER:
            return self._turn_result()

        mover = self.current_player
        next_player = mover.opponent

        if self.board.is_full():
            self._finish()
        elif not self.has_any_legal_move(next_player):
            if not self.has_any_legal_move(mover):
                self._finish()
            else:
                logger.info("%s has no legal move and passes", next_player.name.lower())
                self._change_status(Status.PASSED)
        else:
            self.current_player = next_player
            self._change_status(Status.IN_PROGRESS)

        return self._turn_result()

    def move_log(self) -> list[str]:
        """Numbered lines, starting at 'Move 1: ...'"""
        return [
            record.describe(number) for number, record in enumerate(self.history, start=1)
        ]

    # -- PRIVATE HELPERS ---
    def _to_square(self, row: int, col: int) -> Square:
        square = Square(row, col)
        if not square.is_within_bounds():
            raise InvalidCoordinateError(f"({row}, {col}) is not on the board.")
        return square

    def _resolve_opening(self) -> None:
        """Black is to move on a fresh board, but may not have a legal move."""
        if self.has_any_legal_move(Color.BLACK):
            return
        if self.has_any_legal_move(Color.WHITE):
            logger.info("black has no legal move and passes")
            self.current_player = Color.WHITE
            self._change_status(Status.PASSED)
        else:
            self._finish()

    def _update_history(self, record: MoveRecord) -> None:
        self.history.append(record)

    def _update_scores(self) -> None:
        self.scores = self.board.count_discs()

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _finish(self) -> None:
        self.active = False
        self.winner = self._decide_winner()
        self._change_status(Status.OVER)
        logger.info(
            "Game over: %s (black %d - white %d)",
            self.winner.name.lower(),
            self.scores[Color.BLACK],
            self.scores[Color.WHITE],
        )

    def _decide_winner(self) -> Outcome:
        black = self.scores[Color.BLACK]
        white = self.scores[Color.WHITE]
        if black > white:
            return Outcome.BLACK
        if white > black:
            return Outcome.WHITE
        return Outcome.TIE

    def _turn_result(self) -> TurnResult:
        return TurnResult(
            status=self.status,
            current_player=self.current_player,
            passed_player=self.passed_player,
            winner=self.winner,
        )
