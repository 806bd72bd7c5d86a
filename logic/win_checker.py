"""
Win checker for console TicTacToe.
Checks if a player has three in a row or if the game is a tie.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

import numpy as np

from .cell import Cell
from .config import GameConfig


class GameLogicError(RuntimeError):
    """Raised when the game reaches a state its own rules rule out."""


class Outcome(Enum):
    """Where the game stands after a move."""
    STILL_PLAYING = "still_playing"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class GameResult:
    """
    Current state of the game, computed fresh from the board.

    winner is only set when outcome is WIN.
    """
    outcome: Outcome
    winner: Optional[Cell] = None

    @classmethod
    def still_playing(cls) -> "GameResult":
        return cls(Outcome.STILL_PLAYING)

    @classmethod
    def win(cls, mark: Cell) -> "GameResult":
        return cls(Outcome.WIN, mark)

    @classmethod
    def tie(cls) -> "GameResult":
        return cls(Outcome.TIE)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.STILL_PLAYING

    def win_msg(self, config: Optional[GameConfig] = None) -> str:
        """
        Build the end-of-game message.

        Raises:
            GameLogicError: if the game is still being played.
        """
        config = config or GameConfig()

        if self.outcome == Outcome.STILL_PLAYING:
            raise GameLogicError("active game is not fit for a win message")
        if self.outcome == Outcome.TIE:
            return config.TIE_MSG
        return config.WIN_MSG.format(self.winner.symbol)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check_winner(self, grid: np.ndarray) -> Optional[Cell]:
        """
        Scan the grid for three in a row.

        Rows and columns are interleaved (row i, then column i).
        Diagonals come last and are skipped when the centre is empty,
        since both of them run through it.

        Args:
            grid: 3x3 array of Cell values.

        Returns:
            The winning mark, or None if no line is complete.
        """
        n = self.config.BOARD_SIZE

        for i in range(n):
            winner = self._check_line(grid[i, :])
            if winner is not None:
                return winner

            winner = self._check_line(grid[:, i])
            if winner is not None:
                return winner

        centre = n // 2
        if grid[centre, centre] != Cell.EMPTY:
            # top-left -> bottom-right, then bottom-left -> top-right
            for line in (np.diag(grid), np.diag(np.flipud(grid))):
                winner = self._check_line(line)
                if winner is not None:
                    return winner

        return None

    def _check_line(self, line: np.ndarray) -> Optional[Cell]:
        """Return the mark filling the whole line, or None."""
        first = line[0]
        if first == Cell.EMPTY:
            return None
        if np.all(line == first):
            return Cell(int(first))
        return None

    def get_winner(self, grid: np.ndarray, turns_played: int) -> GameResult:
        """
        Work out the game result.

        Args:
            grid: 3x3 array of Cell values.
            turns_played: The session's turn counter.

        Returns:
            Win, Tie (no line and turns_played reached MAX_TURNS),
            or StillPlaying.
        """
        winner = self.check_winner(grid)

        if winner is not None:
            return GameResult.win(winner)
        if turns_played >= self.config.MAX_TURNS:
            return GameResult.tie()
        return GameResult.still_playing()


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Horizontal win
    grid = np.array([
        [Cell.X, Cell.X, Cell.X],
        [Cell.O, Cell.O, Cell.EMPTY],
        [Cell.EMPTY, Cell.EMPTY, Cell.EMPTY],
    ], dtype=np.int8)

    result = checker.get_winner(grid, 4)
    print(f"Horizontal: {result.win_msg()}")
    assert result == GameResult.win(Cell.X)

    # Anti-diagonal win
    grid = np.array([
        [Cell.X, Cell.X, Cell.O],
        [Cell.EMPTY, Cell.O, Cell.EMPTY],
        [Cell.O, Cell.EMPTY, Cell.X],
    ], dtype=np.int8)

    result = checker.get_winner(grid, 5)
    print(f"Anti-diagonal: {result.win_msg()}")
    assert result == GameResult.win(Cell.O)

    print("\nWinChecker test done!")
