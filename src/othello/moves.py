"""Record of a move that has been played. Kept in the game's move history."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidLayoutError
from src.othello.discs import Color
from src.othello.square import Square


@dataclass(frozen=True)
class MoveRecord:
    """Immutable once created: who played where, and which discs got flipped (direction-then-distance order)."""

    player: Color
    square: Square
    flipped: tuple[Square, ...] = ()

    def to_notation(self) -> str:
        """
        Compact notation used to store the history: the player's layout letter followed by the square.

        examples:
        * "Bd3": black placed a disc on column d, row 3
        * "Wc5": white placed a disc on column c, row 5

        NOTE: flipped discs are not part of the notation. Replaying the moves recomputes them.
        """
        return f"{self.player.to_layout()}{self.square.to_algebraic()}"

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        if len(notation) != 3:
            raise InvalidLayoutError(f"Cannot interpret {notation!r} as a move.")
        player = Color.from_layout(notation[0])
        return cls(player, Square.from_algebraic(notation[1:]))

    def describe(self, number: int) -> str:
        """One line of the move log, ex. 'Move 1: Black at D3'"""
        return f"Move {number}: {self.player.name.capitalize()} at {self.square.to_label()}"
