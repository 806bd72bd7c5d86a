"""Shared pytest fixtures: scripted players and a display that remembers."""

from typing import List

import pytest

from logic.board import Board
from logic.config import GameConfig
from logic.game_session import GameSession
from logic.move_validator import ValidationResult, parse_position


class ScriptedInput:
    """Input provider that replays a fixed list of typed lines."""

    def __init__(self, lines: List[str], config: GameConfig = None):
        self.lines = list(lines)
        self.config = config or GameConfig()
        self.reads = 0

    def read_move(self, board: Board) -> ValidationResult:
        if not self.lines:
            raise EOFError("scripted input ran out")
        self.reads += 1

        parsed = parse_position(self.lines.pop(0), self.config)
        if not parsed.is_valid:
            return parsed
        return board.valid_plot(parsed.position)


class RecordingDisplay:
    """Output sink that keeps everything it is shown."""

    def __init__(self):
        self.lines: List[str] = []

    def show(self, text: str):
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def make_session(display):
    """Build a session whose players type the given lines, in order."""
    def _make(*lines: str) -> GameSession:
        return GameSession(ScriptedInput([str(line) for line in lines]), display)
    return _make


@pytest.fixture
def board_from_rows():
    """Build a Board from rows of symbols, e.g. ["X", "_", "O"]."""
    from logic.cell import Cell

    symbols = {"X": Cell.X, "O": Cell.O, "_": Cell.EMPTY}

    def _build(rows: List[List[str]]) -> Board:
        board = Board()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                board.plot_at_indexes(r, c, symbols[symbol])
        return board
    return _build
