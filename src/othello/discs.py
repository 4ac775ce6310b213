"""Defines the state a cell can be in"""

from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidLayoutError


class Color(Enum):
    NONE = auto()
    BLACK = auto()
    WHITE = auto()

    @property
    def opponent(self) -> Self:
        if self == Color.NONE:
            raise ValueError("An empty cell has no opponent.")
        return Color.WHITE if self == Color.BLACK else Color.BLACK

    @classmethod
    def from_layout(cls, character: str) -> Self:
        try:
            return LAYOUT_TO_COLOR[character.upper()]
        except KeyError:
            raise InvalidLayoutError(
                f"Unknown disc character {character!r} in layout."
            ) from None

    def to_layout(self) -> str:
        return COLOR_TO_LAYOUT[self]


PLAYER_COLORS: tuple[Color, Color] = (Color.BLACK, Color.WHITE)
AVAILABLE_COLOR_NAMES = [color.name for color in PLAYER_COLORS]

LAYOUT_TO_COLOR: dict[str, Color] = {
    "B": Color.BLACK,
    "W": Color.WHITE,
}

COLOR_TO_LAYOUT: dict[Color, str] = {value: key for key, value in LAYOUT_TO_COLOR.items()}
