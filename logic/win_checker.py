"""
Win checker for TicTacToe.
Reports who won, whether the game is drawn, and which line decided it.
"""

from typing import List, Optional
from .game_state import BoardState, GameStatus, Player, WINNING_LINES, iter_bits, move_to_cell


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: one player's marks cover a whole row, column or
    diagonal. Draws are detected early, as soon as no line can still
    be completed by either side.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: BoardState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The current board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        status = board.status()

        if status == GameStatus.CROSS_WON:
            return Player.CROSS
        if status == GameStatus.CIRCLE_WON:
            return Player.CIRCLE
        return None

    def check_draw(self, board: BoardState) -> bool:
        """Check if the game is a draw (no line can be completed)."""
        return board.status() == GameStatus.DRAW

    def get_winning_line(self, board: BoardState) -> Optional[int]:
        """
        Get the winning line if there is one.

        Args:
            board: The current board.

        Returns:
            The winning line as a mask, or None.
        """
        for line in self.WINNING_LINES:
            if (board.cross & line) == line or (board.circle & line) == line:
                return line
        return None

    def get_winning_cells(self, board: BoardState) -> List[int]:
        """Cell indices of the winning line, empty if nobody has won."""
        line = self.get_winning_line(board)
        if line is None:
            return []
        return [move_to_cell(move) for move in iter_bits(line)]
