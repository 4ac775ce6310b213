"""Unit tests for /src/othello/opponent.py"""

import random
from collections import Counter
from unittest.mock import Mock, patch

import pytest

from src.othello.discs import Color
from src.othello.game import Game
from src.othello.opponent import (
    SELECTION_STRATEGIES,
    Difficulty,
    enumerate_legal_moves,
    greedy_move,
    random_move,
    select_move,
)
from src.othello.square import Square

# Black on (0,2) flips a single disc, black on (7,4) flips three.
ONE_OR_THREE_FLIPS_LAYOUT = "BW6/8/8/8/8/8/8/BWWW4"
# Black on (0,2) and on (7,2) both flip a single disc.
TIED_FLIPS_LAYOUT = "BW6/8/8/8/8/8/8/BW6"
OPENING_MOVES = [Square(2, 3), Square(3, 2), Square(4, 5), Square(5, 4)]


def test_enumerate_legal_moves_row_major() -> None:
    assert enumerate_legal_moves(Game.new_game(), Color.BLACK) == OPENING_MOVES


def test_hard_is_the_same_strategy_as_medium() -> None:
    assert SELECTION_STRATEGIES[Difficulty.MEDIUM] is greedy_move
    assert SELECTION_STRATEGIES[Difficulty.HARD] is greedy_move
    assert SELECTION_STRATEGIES[Difficulty.EASY] is random_move


# -- PASS --
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_no_legal_move_means_pass(difficulty: Difficulty) -> None:
    game = Game.new_game("B7/8/8/8/8/8/8/7W")
    assert select_move(game, Color.BLACK, difficulty, random.Random(0)) is None


# -- GREEDY --
@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_greedy_picks_most_flips(difficulty: Difficulty) -> None:
    game = Game.new_game(ONE_OR_THREE_FLIPS_LAYOUT)
    assert game.legal_moves(Color.BLACK) == [Square(0, 2), Square(7, 4)]

    assert select_move(game, Color.BLACK, difficulty) == Square(7, 4)


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_greedy_tie_goes_to_first_in_row_major_order(difficulty: Difficulty) -> None:
    game = Game.new_game(TIED_FLIPS_LAYOUT)
    assert game.legal_moves(Color.BLACK) == [Square(0, 2), Square(7, 2)]

    assert select_move(game, Color.BLACK, difficulty) == Square(0, 2)


def test_greedy_in_opening_takes_first_move() -> None:
    """All four opening moves flip a single disc."""
    assert select_move(Game.new_game(), Color.BLACK, Difficulty.MEDIUM) == Square(2, 3)


def test_selection_does_not_mutate_the_game() -> None:
    game = Game.new_game(ONE_OR_THREE_FLIPS_LAYOUT)
    before = game.to_model()
    for difficulty in Difficulty:
        select_move(game, Color.BLACK, difficulty, random.Random(1))
    assert game.to_model() == before
    assert game.history == []


# -- RANDOM --
def test_easy_is_reproducible_with_a_seed() -> None:
    game = Game.new_game()
    first = select_move(game, Color.BLACK, Difficulty.EASY, random.Random(42))
    second = select_move(game, Color.BLACK, Difficulty.EASY, random.Random(42))
    assert first == second
    assert first in OPENING_MOVES


def test_easy_draws_uniformly_from_legal_moves() -> None:
    """2000 seeds, 4 opening moves: each should come up about 500 times."""
    game = Game.new_game()
    counts = Counter(
        select_move(game, Color.BLACK, Difficulty.EASY, random.Random(seed))
        for seed in range(2000)
    )
    assert set(counts) == set(OPENING_MOVES)
    for move in OPENING_MOVES:
        assert 400 <= counts[move] <= 600


def test_easy_without_rng_uses_default_generator() -> None:
    assert select_move(Game.new_game(), Color.BLACK, Difficulty.EASY) in OPENING_MOVES


# -- STRATEGY LOOKUP --
def test_strategy_receives_legal_moves() -> None:
    game = Game.new_game()
    rng = random.Random(0)
    mock_strategy = Mock(return_value=Square(5, 4))
    with patch.dict(
        "src.othello.opponent.SELECTION_STRATEGIES", {Difficulty.HARD: mock_strategy}
    ):
        chosen = select_move(game, Color.BLACK, Difficulty.HARD, rng)

    assert chosen == Square(5, 4)
    mock_strategy.assert_called_once_with(OPENING_MOVES, game, Color.BLACK, rng)


def test_selector_only_uses_the_query_interface() -> None:
    """Anything answering the two queries will do, no Game required."""
    engine = Mock()
    engine.is_legal_move.side_effect = lambda row, col, player: (row, col) in {
        (1, 1),
        (6, 6),
    }
    engine.count_flips.side_effect = lambda row, col, player: 2 if row == 6 else 1

    assert select_move(engine, Color.WHITE, Difficulty.MEDIUM) == Square(6, 6)
    assert engine.is_legal_move.call_count == 64
