"""
Move validation for console TicTacToe.
Turns raw player text into a cell number and describes why a move failed.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .config import GameConfig


ASCII_DIGITS = "0123456789"


class ErrorKind(Enum):
    """The two kinds of recoverable move errors."""
    INPUT = "input"            # Text that isn't a number
    PLACEMENT = "placement"    # Out of range or slot already taken


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    position: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, position: int) -> "ValidationResult":
        return cls(is_valid=True, position=position)

    @classmethod
    def input_error(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_kind=ErrorKind.INPUT, error_message=message)

    @classmethod
    def placement_error(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_kind=ErrorKind.PLACEMENT, error_message=message)


def strip_line_ending(text: str) -> str:
    """Drop one trailing newline, then one trailing carriage return."""
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def parse_position(text: str, config: Optional[GameConfig] = None) -> ValidationResult:
    """
    Parse a line of player input as a cell number.

    Only checks that the text is a non-negative number. Range and
    occupancy are checked later by Board.valid_plot().

    Args:
        text: Raw line typed by the player.
        config: Game configuration. Uses defaults if not provided.

    Returns:
        ValidationResult holding the parsed number, or an INPUT error.
    """
    config = config or GameConfig()
    text = strip_line_ending(text)

    if config.FILTER_NON_DIGITS:
        text = "".join(c for c in text if c.isdigit())

    # Only ASCII digits count; "٥" or "²" survive the filter but are rejected here
    if not text or any(c not in ASCII_DIGITS for c in text):
        return ValidationResult.input_error(config.NOT_A_NUMBER_MSG)

    try:
        position = int(text)
    except ValueError:
        # very long digit runs hit the interpreter's conversion limit
        return ValidationResult.input_error(config.NOT_A_NUMBER_MSG)

    if position > config.MAX_INPUT_VALUE:
        return ValidationResult.input_error(config.NOT_A_NUMBER_MSG)

    return ValidationResult.ok(position)


# Quick test
if __name__ == "__main__":
    print("Testing parse_position...")

    for raw in ["5\n", " 7 \r\n", "abc", "", "#3"]:
        result = parse_position(raw)
        print(f"{raw!r}: valid={result.is_valid}, position={result.position}, "
              f"error={result.error_message}")

    print("\nparse_position test done!")
