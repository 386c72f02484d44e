"""
Smoke test for the TicTacToe modules.
Run this to verify all components work before playing:

    python test_modules.py
"""

import random
import sys


def test_config():
    """Test configuration values."""
    from logic.config import SearchConfig, GameConfig

    assert SearchConfig.WINDOW > SearchConfig.WIN_SCORE
    assert GameConfig.CROSS_KIND in GameConfig.PLAYER_KINDS
    assert GameConfig.CIRCLE_KIND in GameConfig.PLAYER_KINDS


def test_game_logic():
    """Test board, validator and win checker together."""
    from logic.game_state import BoardState, GameStatus, cell_to_move
    from logic.move_validator import MoveValidator
    from logic.win_checker import WinChecker

    board = BoardState()
    board.apply_move(cell_to_move(4))

    assert MoveValidator().validate_move(board, 0).is_valid
    assert not MoveValidator().validate_move(board, 4).is_valid
    assert WinChecker().check_winner(board) is None
    assert board.status() == GameStatus.IN_PROGRESS


def test_ai():
    """Test the AI answers a centre opening."""
    from logic.ai_player import AIPlayer
    from logic.game_state import BoardState, cell_to_move

    board = BoardState.from_cells([4], [])
    ai = AIPlayer("Bot", random.Random(0), verbose=False)

    move = ai.choose_move(board)

    assert move & board.legal_moves()
    # Only corner replies hold the draw against a centre opening
    assert move in {cell_to_move(c) for c in (0, 2, 6, 8)}


def test_ui():
    """Test the board renders."""
    from logic.game_state import BoardState
    from ui import ConsoleUI

    text = ConsoleUI(colour=False).render(BoardState())
    assert len(text.splitlines()) == 5


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Module Tests")
    print("=" * 60)

    tests = {
        "Config": test_config,
        "Game Logic": test_game_logic,
        "AI": test_ai,
        "UI": test_ui,
    }

    all_passed = True
    for name, test in tests.items():
        try:
            test()
            print(f"  {name}: ✓ PASS")
        except Exception as e:
            print(f"  {name}: ✗ FAIL ({e!r})")
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\nAll tests passed! Ready to play TicTacToe.\n")
        return 0

    print("\nSome tests failed. Check the errors above.\n")
    return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
