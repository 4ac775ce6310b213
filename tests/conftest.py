"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest

from src.db.memory_repository import InMemoryGameRepository


@pytest.fixture
def memory_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh store per test. Cleared at teardown so games never leak between tests."""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
