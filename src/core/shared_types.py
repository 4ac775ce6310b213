"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in_progress"
    PASSED = "passed"
    OVER = "over"


# --- Color DOES NOT contain an option for empty cells. That lives in src/othello/discs.py
# --- NOTE Same names are used on both sides, let the imports show which version is used where


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Outcome(StrEnum):
    BLACK = "black"
    WHITE = "white"
    TIE = "tie"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
