"""
Console module for TicTacToe.
Reads moves from the keyboard and prints the game to the terminal.
"""

from .display import ConsoleDisplay
from .console_input import ConsoleInput, prompt
