"""
Console display for TicTacToe.
Prints everything the game has to say.
"""

import sys
from typing import Optional, TextIO


class ConsoleDisplay:
    """
    Output sink that writes text lines to the terminal.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the display.

        Args:
            stream: Where to write. Defaults to sys.stdout at call time.
        """
        self.stream = stream

    def show(self, text: str):
        """Print a block of text followed by a newline."""
        print(text, file=self.stream or sys.stdout)
