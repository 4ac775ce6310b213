"""
Computer opponent: pick one move for the player to move

Key idea: use strategy pattern to define how each difficulty selects among the legal moves.

The selector holds no state of its own. It only asks the rules engine questions (is this legal? how many discs would flip?)
and never changes the board: the driver applies the returned move.

NOTE: HARD selects exactly like MEDIUM (single-ply greedy). There is no look-ahead search.
"""

import logging
import random
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from src.core.config import OPPONENT_SEED
from src.othello.discs import Color
from src.othello.square import Square, all_squares

logger = logging.getLogger(__name__)


class RulesEngine(Protocol):
    """Just the read-only queries the opponent needs"""

    def is_legal_move(self, row: int, col: int, player: Color) -> bool: ...
    def count_flips(self, row: int, col: int, player: Color) -> int: ...


class Difficulty(Enum):
    EASY = auto()
    MEDIUM = auto()
    HARD = auto()


# Shared default generator. Tests (or a driver) can pass their own seeded `random.Random` instead.
_default_rng = random.Random(OPPONENT_SEED)


def enumerate_legal_moves(engine: RulesEngine, player: Color) -> list[Square]:
    """All 64 cells in row-major order"""
    return [
        square
        for square in all_squares()
        if engine.is_legal_move(square.row, square.col, player)
    ]


# --- SELECTION STRATEGIES ---
def random_move(
    legal_moves: list[Square], engine: RulesEngine, player: Color, rng: random.Random
) -> Square:
    """Any legal move, uniformly"""
    return rng.choice(legal_moves)


def greedy_move(
    legal_moves: list[Square], engine: RulesEngine, player: Color, rng: random.Random
) -> Square:
    """
    The move that flips the most discs right now.
    ----

    Strictly greater only: on a tie the first maximum in row-major order stays selected.
    """
    best_move = legal_moves[0]
    max_flips = -1
    for square in legal_moves:
        flips = engine.count_flips(square.row, square.col, player)
        if flips > max_flips:
            max_flips = flips
            best_move = square
    return best_move


# -- STRATEGY PATTERN: DIFFICULTY LEVELS ---
SelectionFn = Callable[[list[Square], RulesEngine, Color, random.Random], Square]
SELECTION_STRATEGIES: dict[Difficulty, SelectionFn] = {
    Difficulty.EASY: random_move,
    Difficulty.MEDIUM: greedy_move,
    Difficulty.HARD: greedy_move,
}


def select_move(
    engine: RulesEngine,
    player: Color,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Optional[Square]:
    """
    Choose the computer's move
    ----

    1. Enumerate the legal moves for `player`
    2. None? --> return None: the player has to pass
    3. Let the strategy for the difficulty level pick one
    """
    legal_moves = enumerate_legal_moves(engine, player)
    if not legal_moves:
        logger.debug("No legal move for %s: pass", player.name.lower())
        return None

    strategy = SELECTION_STRATEGIES[difficulty]
    chosen = strategy(legal_moves, engine, player, rng or _default_rng)
    logger.debug(
        "%s (%s) chose %s out of %d legal move(s)",
        player.name.lower(),
        difficulty.name.lower(),
        chosen.to_label(),
        len(legal_moves),
    )
    return chosen
