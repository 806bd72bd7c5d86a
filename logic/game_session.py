"""
Game session for console TicTacToe.
Runs the turn loop between two local players.
"""

from enum import Enum
from typing import Optional

from .board import Board
from .cell import Cell
from .config import GameConfig
from .win_checker import GameResult


class SessionState(Enum):
    """Lifecycle of a session."""
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


def turn(count: int) -> Cell:
    """Current player's mark: X when count is even, O when odd."""
    return Cell.X if count % 2 == 0 else Cell.O


def tutorial(display, config: Optional[GameConfig] = None):
    """Explain how cell numbers map onto the grid."""
    config = config or GameConfig()
    tutorial_board = Board(label_fn=lambda i: str(i + 1), config=config)

    display.show("Welcome to TicTacToe!\n")
    display.show("Take a look at the example grid before we get started.")
    display.show("Each number corresponds to a slot you can play on.\n")
    display.show(tutorial_board.render())
    display.show(
        "\nWhen prompted, type and enter one of these numbers to make a move!"
        "\nGood Luck :)\n\n~~~\n"
    )


class GameSession:
    """
    One round of TicTacToe at a time, reusable for as many rounds as needed.

    Game flow:
    1. Show the tutorial grid
    2. Ask the current player for a cell number
    3. Place their mark if the cell is free, otherwise ask again
    4. Repeat until someone gets three in a row or the grid fills up
    5. Reset so start() can be called again

    The session talks to the outside world through two collaborators:
    - input_provider.read_move(board) -> ValidationResult
    - display.show(text)
    """

    def __init__(self, input_provider, display, config: Optional[GameConfig] = None):
        """
        Initialize the session.

        Args:
            input_provider: Supplies moves (see ConsoleInput).
            display: Receives all text output (see ConsoleDisplay).
            config: Game configuration. Uses defaults if not provided.
        """
        self.input_provider = input_provider
        self.display = display
        self.config = config or GameConfig()

        self.board = Board(config=self.config)
        self.turn_count = 0
        self.state = SessionState.IDLE

    def start(self):
        """
        Play one round.

        Loops until a player gets three in a row or all cells fill up,
        then cleans up so the session can be started again.
        """
        self.state = SessionState.IN_PROGRESS
        tutorial(self.display, self.config)

        while not self.step():
            pass

        self.state = SessionState.FINISHED
        self.clean_up()

    def step(self) -> bool:
        """
        Play a single turn.

        Returns:
            True if the game is over, otherwise False. A rejected move
            also returns False and leaves the board and counter alone,
            so the same player is asked again.
        """
        mark = turn(self.turn_count)
        self.display.show(self.board.render())
        self.display.show(self.config.TURN_MSG.format(mark.symbol))

        result = self.input_provider.read_move(self.board)
        if not result.is_valid:
            self.display.show(f"{result.error_message}\n{self.config.RETRY_MSG}")
            return False  # void this step

        self.board.plot(result.position, mark)

        return self.check_end()

    def check_end(self) -> bool:
        """
        Returns False if the game is still underway, otherwise True.

        Increments the turn counter while the game goes on, and
        announces the result once it ends.
        """
        game_result = self.board.get_winner(self.turn_count)

        if not game_result.is_terminal:
            self.increment_count()
            return False

        self.announce(game_result)
        return True

    def announce(self, game_result: GameResult):
        """Show the final message and board."""
        self.display.show(self.config.GAME_OVER_MSG.format(game_result.win_msg(self.config)))
        self.display.show(self.board.render())
        self.display.show("\n")

    def increment_count(self):
        """Increment turn_count, never going past MAX_TURNS."""
        self.turn_count = min(self.config.MAX_TURNS, self.turn_count + 1)

    def clean_up(self):
        """Reset the board and counter for a new round."""
        self.board = Board(config=self.config)
        self.turn_count = 0
        self.state = SessionState.IDLE
