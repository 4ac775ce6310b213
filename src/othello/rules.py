"""
Sandwich rule: which discs a placement would flip

Key idea: same raycasting as sliding pieces in chess. Walk away from the target cell along each of the 8 directions
and look at what we run into.

These are pure functions: they only read the board. The Game applies the result.
"""

from typing import Protocol

from src.othello.discs import Color
from src.othello.square import Square, all_squares


class Board(Protocol):
    """Just the parts the rules need"""

    def disc(self, square: Square) -> Color: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]

# (delta row, delta col). Row 0 is the top of the board, so "north" decreases the row.
# NOTE The order is fixed: it determines the order of the flipped discs in the move history.
DIRECTIONS: list[Vector] = [
    (-1, 0),  # N
    (-1, 1),  # NE
    (0, 1),  # E
    (1, 1),  # SE
    (1, 0),  # S
    (1, -1),  # SW
    (0, -1),  # W
    (-1, -1),  # NW
]


def sandwiched_discs(
    square: Square, color: Color, board: Board, direction: Vector
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    Starting next to `square`, move along `direction` while we see the opponent's discs.
    The run only counts if it is closed off by a disc of `color`.
    Running off the board or into an empty cell first means nothing gets sandwiched.

    ---
    Returns the opponent's discs in order of distance (empty list if the rule does not hold).
    """
    opponent_color = color.opponent
    dr, dc = direction
    row = square.row
    col = square.col

    run: list[Square] = []
    while True:
        row += dr
        col += dc
        target_square = Square(row, col)
        if not target_square.is_within_bounds():
            return []

        found = board.disc(target_square)
        if found == opponent_color:
            run.append(target_square)
            continue

        # own disc closes the run (but a run of zero opponent discs does not count), empty cell breaks it
        return run if found == color else []


def flips_for_move(square: Square, color: Color, board: Board) -> list[Square]:
    """All discs flipped by placing `color` on `square`: direction-then-distance order. Empty list if the move is illegal."""
    if not square.is_within_bounds() or not board.is_empty(square):
        return []

    flipped: list[Square] = []
    for direction in DIRECTIONS:
        flipped.extend(sandwiched_discs(square, color, board, direction))
    return flipped


def is_legal_placement(square: Square, color: Color, board: Board) -> bool:
    """Empty cell and at least one direction sandwiches the opponent. Off-board squares are simply not legal."""
    if not square.is_within_bounds() or not board.is_empty(square):
        return False
    return any(
        sandwiched_discs(square, color, board, direction) for direction in DIRECTIONS
    )


def count_flips(square: Square, color: Color, board: Board) -> int:
    return len(flips_for_move(square, color, board))


def legal_placements(color: Color, board: Board) -> list[Square]:
    """Scan all cells in row-major order"""
    return [
        square for square in all_squares() if is_legal_placement(square, color, board)
    ]
