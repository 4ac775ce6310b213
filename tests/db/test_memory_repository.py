"""Unit tests for src/db/memory_repository.py"""

from uuid import uuid4

import pytest

from src.core.models import GameModel
from src.db.memory_repository import InMemoryGameRepository

STARTING_LAYOUT = "8/8/8/3WB3/3BW3/8/8/8"
AFTER_D3 = "8/8/3B4/3BB3/3BW3/8/8/8"


@pytest.fixture
def new_game() -> GameModel:
    return GameModel(
        starting_layout=STARTING_LAYOUT,
        current_layout=STARTING_LAYOUT,
        moves=[],
        color_to_move="black",
        status="in_progress",
    )


def test_create_and_get_game(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    stored, game_id = memory_repository.create_game(new_game)
    assert stored == new_game
    assert memory_repository.get_game(game_id) == new_game


def test_every_game_gets_its_own_id(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    _, first_id = memory_repository.create_game(new_game)
    _, second_id = memory_repository.create_game(new_game)
    assert first_id != second_id


def test_get_unknown_game(memory_repository: InMemoryGameRepository) -> None:
    assert memory_repository.get_game(uuid4()) is None


def test_update_game(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    _, game_id = memory_repository.create_game(new_game)
    new_game.current_layout = AFTER_D3
    new_game.moves = ["Bd3"]
    new_game.color_to_move = "white"

    updated = memory_repository.update_game(game_id, new_game)

    assert updated == new_game
    stored = memory_repository.get_game(game_id)
    assert stored is not None
    assert stored.current_layout == AFTER_D3
    assert stored.moves == ["Bd3"]


def test_update_unknown_game(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    assert memory_repository.update_game(uuid4(), new_game) is None


def test_stored_record_is_not_shared(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    """Mutating what went in or came out must not change the stored game."""
    _, game_id = memory_repository.create_game(new_game)
    new_game.moves.append("Bd3")

    fetched = memory_repository.get_game(game_id)
    assert fetched is not None
    assert fetched.moves == []

    fetched.moves.append("Bd3")
    again = memory_repository.get_game(game_id)
    assert again is not None
    assert again.moves == []


def test_delete_game(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    _, game_id = memory_repository.create_game(new_game)
    deleted = memory_repository.delete_game(game_id)

    assert deleted == new_game
    assert memory_repository.get_game(game_id) is None
    assert memory_repository.delete_game(game_id) is None


def test_deleted_record_is_a_copy(
    memory_repository: InMemoryGameRepository, new_game: GameModel
) -> None:
    _, game_id = memory_repository.create_game(new_game)
    stored = memory_repository._games[game_id]

    deleted = memory_repository.delete_game(game_id)

    assert deleted == stored
    assert deleted is not stored
