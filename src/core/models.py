"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
BoardLayout = str
MoveNotation = str


@dataclass
class GameModel:
    """Transport-safe representation of an Othello game used between API, Service, DB, and Game layers."""

    starting_layout: BoardLayout
    current_layout: BoardLayout
    moves: list[MoveNotation]
    color_to_move: str
    status: str
    winner: Optional[str] = None
