"""
Move validator for TicTacToe.
Validates cells typed in by a human player.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import BoardState, NUM_CELLS, cell_to_move


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    move: Optional[int] = None  # Single-bit move when valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be a whole number
    2. Cell must be between 0 and 8
    3. Game must not be over
    4. Can only place on empty cells
    """

    def validate_cell(self, board: BoardState, text: str) -> ValidationResult:
        """
        Validate a cell typed in by a player.

        Args:
            board: Current board.
            text: Raw input, expected to be a cell index.

        Returns:
            ValidationResult with is_valid, error_message and the move.
        """
        try:
            cell = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text.strip()}' is not a number."
            )

        return self.validate_move(board, cell)

    def validate_move(self, board: BoardState, cell: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            cell: Cell index (0-8).

        Returns:
            ValidationResult with is_valid, error_message and the move.
        """
        # Check if cell is in valid range
        if not (0 <= cell < NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-{NUM_CELLS - 1}."
            )

        # Check if game is over
        if board.status().is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        move = cell_to_move(cell)
        if not (board.legal_moves() & move):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board.piece_at(cell).value}."
            )

        return ValidationResult(is_valid=True, move=move)
