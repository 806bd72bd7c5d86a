"""
Cell values for the TicTacToe grid.
"""

from enum import IntEnum

from .config import GameConfig


class Cell(IntEnum):
    """What a slot on the grid can hold."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        """Single character used when printing the grid."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Cell.EMPTY: GameConfig.EMPTY_SYMBOL,
    Cell.X: GameConfig.X_SYMBOL,
    Cell.O: GameConfig.O_SYMBOL,
}
