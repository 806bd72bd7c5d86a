"""
Game configuration for console TicTacToe.
All the constants for the board, symbols, and player-facing text.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game talks to the players.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 positions, numbered 1-9

    # The turn counter starts at 0, so this cap still allows
    # nine total moves for nine total slots.
    MAX_TURNS = 8

    # ==================== SYMBOLS ====================
    EMPTY_SYMBOL = "_"
    X_SYMBOL = "X"
    O_SYMBOL = "O"

    BORDER_LINE = "-" * 9

    # ==================== INPUT SETTINGS ====================
    MOVE_PROMPT = "Enter cell number: "
    PLAY_AGAIN_PROMPT = "Play again? (y/n): "

    # Strip anything that isn't a digit before parsing,
    # so " 5." or "#5" still count as 5.
    FILTER_NON_DIGITS = True

    # Anything bigger is "not a number" rather than "out of range"
    MAX_INPUT_VALUE = 2**64 - 1

    # ==================== MESSAGES ====================
    NOT_A_NUMBER_MSG = "That is not a number."
    OUT_OF_RANGE_MSG = "That number is not one of the valid cell numbers."
    SLOT_FULL_MSG = "The slot is full!"
    RETRY_MSG = "Please try again...\n"

    TURN_MSG = "It's {}'s turn!"
    WIN_MSG = "{} wins!"
    TIE_MSG = "The game is a tie!"
    GAME_OVER_MSG = "~~~\n\nGAME OVER — {}"
