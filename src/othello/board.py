"""The Game board holds the `grid` (in Othello: which cells carry a disc of which color)"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidLayoutError
from src.othello.discs import PLAYER_COLORS, Color
from src.othello.square import BOARD_DIMENSIONS, Square, all_squares

STARTING_LAYOUT = "8/8/8/3WB3/3BW3/8/8/8"


@dataclass
class Board:
    grid: dict[Square, Color]

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board using a given layout string.

        Borrowed from the position part of a FEN string in chess:
        ex. standard starting position:
        8/8/8/3WB3/3BW3/8/8/8
        means:
        * rows are separated by slashes, the first one is row 0 (top of the board)
        * a letter is a disc: B for black, W for white
        * a number denotes the amount of empty cells after each other
        * so row 3 reads: 3 empty cells, white disc on (3,3), black disc on (3,4), 3 empty cells.
        """
        layout_by_rows = layout.strip().split("/")
        if len(layout_by_rows) != BOARD_DIMENSIONS[0]:
            raise InvalidLayoutError(
                f"Layout must describe {BOARD_DIMENSIONS[0]} rows, got {len(layout_by_rows)}: {layout!r}"
            )

        grid: dict[Square, Color] = {}
        for row, layout_one_row in enumerate(layout_by_rows):
            col = 0
            for character in layout_one_row:
                if character.isascii() and character.isdigit():
                    for _ in range(int(character)):
                        grid[Square(row, col)] = Color.NONE
                        col += 1
                else:
                    grid[Square(row, col)] = Color.from_layout(character)
                    col += 1
            if col != BOARD_DIMENSIONS[1]:
                raise InvalidLayoutError(
                    f"Row {row} of layout {layout!r} describes {col} cells instead of {BOARD_DIMENSIONS[1]}."
                )
        return cls(grid)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_layout(STARTING_LAYOUT)

    def to_layout(self) -> str:
        """Rows are separated by slashes in the layout string."""
        return "/".join(self._row_to_layout(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_layout(self, row: int) -> str:
        """Layout string of a single row"""
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            color = self.disc(Square(row, col))

            if color != Color.NONE:
                if empty_count > 0:
                    characters.append(str(empty_count))
                    empty_count = 0
                characters.append(color.to_layout())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def disc(self, square: Square) -> Color:
        return self.grid[square]

    def is_empty(self, square: Square) -> bool:
        return self.grid[square] == Color.NONE

    def place_disc(self, color: Color, square: Square) -> None:
        self.grid[square] = color

    def flip_discs(self, squares: list[Square]) -> None:
        """Turn every disc on the given squares over to the other color"""
        for square in squares:
            self.grid[square] = self.grid[square].opponent

    def locate_color(self, color: Color) -> list[Square]:
        """Row-major order"""
        return [square for square in all_squares() if self.grid[square] == color]

    def empty_squares(self) -> list[Square]:
        return self.locate_color(Color.NONE)

    def is_full(self) -> bool:
        return Color.NONE not in self.grid.values()

    def count_discs(self) -> dict[Color, int]:
        """Tally the discs each player has on the board (full scan)"""
        counts = {color: 0 for color in PLAYER_COLORS}
        for color in self.grid.values():
            if color != Color.NONE:
                counts[color] += 1
        return counts
