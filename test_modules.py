"""
Test script for TicTacToe modules.
Run this to verify all components work before playing:

    python test_modules.py
"""

import io
import sys


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from logic.config import GameConfig

    config = GameConfig()
    print(f"  Board size: {config.BOARD_SIZE}x{config.BOARD_SIZE}")
    print(f"  Max turns: {config.MAX_TURNS}")
    print(f"  Filter non-digits: {config.FILTER_NON_DIGITS}")

    assert config.NUM_CELLS == 9
    assert config.MAX_TURNS == config.NUM_CELLS - 1


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic.board import Board
    from logic.cell import Cell
    from logic.win_checker import Outcome

    # Test board
    board = Board()
    print(f"  Empty cells: {len(board.empty_positions())}")

    # Test validator
    result = board.valid_plot(5)
    print(f"  Validate 5: valid={result.is_valid}")
    assert result.is_valid

    # Test plot
    board.plot(5, Cell.X)
    print("  Plotted X at 5")

    # Test win checker
    game_result = board.get_winner(0)
    print(f"  Winner check: {game_result.outcome.value}")
    assert game_result.outcome == Outcome.STILL_PLAYING


def test_console_display():
    """Test the console display writes to its stream."""
    print("\n=== Testing Console Display ===")
    from console.display import ConsoleDisplay
    from logic.board import Board

    stream = io.StringIO()
    ConsoleDisplay(stream).show(Board(label_fn=lambda i: str(i + 1)).render())
    print(stream.getvalue())

    assert "| 4 5 6 |" in stream.getvalue()


def test_game_session():
    """Test a full scripted round."""
    print("\n=== Testing Game Session ===")
    from console.display import ConsoleDisplay
    from logic.game_session import GameSession
    from logic.move_validator import parse_position

    class Moves:
        def __init__(self, moves):
            self.moves = list(moves)

        def read_move(self, board):
            parsed = parse_position(self.moves.pop(0))
            if not parsed.is_valid:
                return parsed
            return board.valid_plot(parsed.position)

    stream = io.StringIO()
    session = GameSession(Moves(["1", "oops", "4", "2", "5", "3"]), ConsoleDisplay(stream))
    session.start()

    print(f"  Final message found: {'X wins!' in stream.getvalue()}")
    assert "X wins!" in stream.getvalue()
    assert session.turn_count == 0


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Console Display": test_console_display,
        "Game Session": test_game_session,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
