"""
Board for console TicTacToe.
Holds the 3x3 grid and translates cell numbers (1-9) into grid indexes.
"""

from typing import Callable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import GameConfig
from .move_validator import ValidationResult
from .win_checker import GameResult, WinChecker


def grid_mapping_to_indexes(position: int) -> Tuple[int, int]:
    """
    Convert a cell number to a (row, col) index.

    Cells are numbered row by row from the top-left:

        1 2 3
        4 5 6
        7 8 9

    Args:
        position: Cell number (1-9).

    Returns:
        (row, col) tuple, e.g. 1 -> (0, 0), 6 -> (1, 2).

    Raises:
        IndexError: if position is not on the grid. Callers are expected
            to have checked it with Board.valid_plot() first.
    """
    if not 1 <= position <= GameConfig.NUM_CELLS:
        raise IndexError(f"cell number {position} is off the grid")

    m = position - 1
    return m // GameConfig.BOARD_SIZE, m % GameConfig.BOARD_SIZE


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored as Cell values in a small numpy array. A board can
    also carry display labels (the tutorial board shows 1-9); labels only
    change how empty cells are printed, never what the cells hold.
    """

    def __init__(
        self,
        label_fn: Optional[Callable[[int], str]] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Create an empty board.

        Args:
            label_fn: Optional function giving the label for each cell,
                called with the 0-based index in row-major order.
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.win_checker = WinChecker(self.config)

        size = self.config.BOARD_SIZE
        self.grid = np.full((size, size), int(Cell.EMPTY), dtype=np.int8)

        self.labels: Optional[List[str]] = None
        if label_fn is not None:
            self.labels = [label_fn(i) for i in range(size * size)]

    def at_indexes(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return Cell(int(self.grid[row, col]))

    def at(self, position: int) -> Cell:
        """Get the cell at a cell number (1-9)."""
        row, col = grid_mapping_to_indexes(position)
        return self.at_indexes(row, col)

    def plot_at_indexes(self, row: int, col: int, mark: Cell) -> Cell:
        """Set the cell at (row, col). Returns what was there before."""
        old = self.at_indexes(row, col)
        self.grid[row, col] = int(mark)
        return old

    def plot(self, position: int, mark: Cell) -> Cell:
        """
        Place a mark at a cell number (1-9).

        Does not validate anything; run valid_plot() first.

        Returns:
            The previous contents of the cell.
        """
        row, col = grid_mapping_to_indexes(position)
        return self.plot_at_indexes(row, col, mark)

    def valid_plot(self, position: int) -> ValidationResult:
        """
        Check whether a mark can go at this cell number.

        A plot is valid if the number is in the range 1-9 (inclusive)
        and the requested cell is empty.

        Returns:
            ValidationResult carrying the same position, or a
            PLACEMENT error.
        """
        if not 1 <= position <= self.config.NUM_CELLS:
            return ValidationResult.placement_error(self.config.OUT_OF_RANGE_MSG)

        if self.at(position) != Cell.EMPTY:
            return ValidationResult.placement_error(self.config.SLOT_FULL_MSG)

        return ValidationResult.ok(position)

    def empty_positions(self) -> List[int]:
        """Get all cell numbers that are still empty."""
        return [
            p for p in range(1, self.config.NUM_CELLS + 1)
            if self.at(p) == Cell.EMPTY
        ]

    def get_winner(self, turns_played: int) -> GameResult:
        """Work out the game result from the current grid."""
        return self.win_checker.get_winner(self.grid, turns_played)

    def _cell_text(self, row: int, col: int) -> str:
        cell = self.at_indexes(row, col)
        if cell == Cell.EMPTY and self.labels is not None:
            return self.labels[row * self.config.BOARD_SIZE + col]
        return cell.symbol

    def render(self) -> str:
        """
        Draw the grid as text.

        ---------
        | X _ O |
        | _ X _ |
        | _ _ O |
        ---------
        """
        size = self.config.BOARD_SIZE
        lines = [self.config.BORDER_LINE]

        for row in range(size):
            cells = " ".join(self._cell_text(row, col) for col in range(size))
            lines.append(f"| {cells} |")

        lines.append(self.config.BORDER_LINE)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for position, mark in [(5, Cell.X), (1, Cell.O), (9, Cell.X)]:
        result = board.valid_plot(position)
        print(f"Plot {mark.symbol} at {position}: valid={result.is_valid}")
        board.plot(position, mark)

    print(board)

    result = board.valid_plot(5)
    print(f"Plot at 5 again: valid={result.is_valid}, error={result.error_message}")

    print(Board(label_fn=lambda i: str(i + 1)))
    print("\nBoard test done!")
