"""
Logic module for console TicTacToe.
Handles the board, move validation, win detection, and the turn loop.
"""

from .config import GameConfig
from .cell import Cell
from .board import Board, grid_mapping_to_indexes
from .move_validator import ErrorKind, ValidationResult, parse_position
from .win_checker import GameLogicError, GameResult, Outcome, WinChecker
from .game_session import GameSession, SessionState, turn
