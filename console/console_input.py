"""
Console input for TicTacToe.
Reads cell numbers typed by the players.
"""

import sys
from typing import Optional

from logic.board import Board
from logic.config import GameConfig
from logic.move_validator import ValidationResult, parse_position, strip_line_ending


def prompt(text: Optional[str] = None) -> str:
    """
    Read one line from the keyboard, like input() but with the
    line ending stripped and a blank line printed afterwards.

    Raises:
        EOFError: if input has run out.
    """
    if text:
        print(text, end="")
    sys.stdout.flush()

    line = strip_line_ending(input())
    print()

    return line


class ConsoleInput:
    """
    Input provider that asks the players for moves in the terminal.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def read_move(self, board: Board) -> ValidationResult:
        """
        Ask for a cell number and check it against the board.

        Returns:
            ValidationResult with the position, or the reason it was
            rejected (not a number, out of range, slot full).
        """
        parsed = parse_position(prompt(self.config.MOVE_PROMPT), self.config)
        if not parsed.is_valid:
            return parsed

        return board.valid_plot(parsed.position)

    def ask_play_again(self) -> bool:
        """Ask whether to start another round."""
        answer = prompt(self.config.PLAY_AGAIN_PROMPT)
        return answer.strip().lower().startswith("y")
