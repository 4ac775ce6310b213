"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidLayoutError

# Othello is always played on 8x8 (rows, columns).
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """Zero-indexed: row 0 is the top row, col 0 the leftmost column."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). Column letter first, then the row number."""
        if len(sq) != 2 or not sq[0].isalpha() or sq[1] not in "0123456789":
            raise InvalidLayoutError(f"Cannot interpret {sq!r} as a square.")
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1]) - 1
        square = cls(row, col)
        if not square.is_within_bounds():
            raise InvalidLayoutError(f"Square {sq!r} is not on the board.")
        return square

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{self.row + 1}"

    def to_label(self) -> str:
        """How the move log names a cell: upper case column letter, e.g. 'D3'"""
        return self.to_algebraic().upper()

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )


def all_squares() -> list[Square]:
    """Row-major scan order. Move enumeration relies on this order."""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
