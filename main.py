"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, move validation, win checking, turn loop)
- Console (keyboard input, terminal output)

Run this script to play TicTacToe against a friend on the same keyboard!
"""

import sys

from logic.config import GameConfig
from logic.game_session import GameSession
from console.display import ConsoleDisplay
from console.console_input import ConsoleInput


def play(session: GameSession, console_input: ConsoleInput):
    """Play rounds until the players stop asking for another one."""
    while True:
        session.start()
        if not console_input.ask_play_again():
            break


def main() -> int:
    """Main entry point."""
    config = GameConfig()
    display = ConsoleDisplay()
    console_input = ConsoleInput(config)

    session = GameSession(console_input, display, config)

    try:
        play(session, console_input)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
