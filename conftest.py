"""
Shared fixtures for the TicTacToe tests.
"""

from typing import List

import pytest

from logic.game_state import BoardState, GameStatus


def walk_reachable(board: BoardState, seen: set, found: List[BoardState]):
    """Collect every position reachable by alternating legal play."""
    key = (board.cross, board.circle, board.cross_to_move)
    if key in seen:
        return
    seen.add(key)
    found.append(board.copy())

    if board.status() != GameStatus.IN_PROGRESS:
        return

    for move in board.iter_moves():
        board.apply_move(move)
        walk_reachable(board, seen, found)
        board.undo_move(move)


@pytest.fixture(scope="session")
def reachable_boards() -> List[BoardState]:
    """Every distinct position reachable from the empty board."""
    found: List[BoardState] = []
    walk_reachable(BoardState(), set(), found)
    return found
