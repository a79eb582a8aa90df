"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    RED = "red"
    BLACK = "black"


class BoardLevel(StrEnum):
    """The two stacked 8x8 grids"""

    LOWER = "lower"
    UPPER = "upper"


# --- NOTE: mode and difficulty are accepted from the UI and stored, but no rule reads them (there is no computer opponent).
class GameMode(StrEnum):
    PVP = "pvp"
    PVC = "pvc"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PickKind(StrEnum):
    """What the presentation layer resolved a click to"""

    PIECE = "piece"
    SQUARE = "square"
    EMPTY = "empty"
