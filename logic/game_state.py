"""
Game state management for TicTacToe.
Packs the 3x3 board into two 9-bit masks, one per player.
"""

from enum import Enum
from typing import Iterator, Optional, Sequence
from dataclasses import dataclass

import numpy as np


# All nine cells set
FULL_BOARD = 0b111111111

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# All possible winning lines (bit i = cell i)
WINNING_LINES = [
    # Rows
    0b000000111,
    0b000111000,
    0b111000000,
    # Columns
    0b001001001,
    0b010010010,
    0b100100100,
    # Diagonals
    0b100010001,
    0b001010100,
]


class Player(Enum):
    """The two players in the game. Cross always moves first."""
    CROSS = "cross"
    CIRCLE = "circle"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.CIRCLE if self == Player.CROSS else Player.CROSS


class GameStatus(Enum):
    """Classification of a board position."""
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    CROSS_WON = "cross_won"
    CIRCLE_WON = "circle_won"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


def iter_bits(mask: int) -> Iterator[int]:
    """
    Yield the set bits of a mask as single-bit values, lowest first.

    Args:
        mask: Bit field to walk.

    Yields:
        Values like 0b1, 0b100, ... one per set bit.
    """
    while mask:
        lowest = mask & -mask
        yield lowest
        mask ^= lowest


def cell_to_move(cell: int) -> int:
    """Convert a cell index (0-8) to a single-bit move."""
    return 1 << cell


def move_to_cell(move: int) -> int:
    """Convert a single-bit move to its cell index (0-8)."""
    return move.bit_length() - 1


@dataclass
class BoardState:
    """
    The complete state of a TicTacToe board.

    Cell index = rank * 3 + file, and bit i of a mask is cell i.

    Tracks:
    - Cells marked by cross
    - Cells marked by circle
    - Whose turn it is

    Moves are applied and undone in place. Both operations trust the
    caller: applying an occupied cell or undoing out of order corrupts
    the state without any error.
    """

    cross: int = 0
    circle: int = 0
    cross_to_move: bool = True

    @classmethod
    def from_cells(
        cls,
        cross_cells: Sequence[int] = (),
        circle_cells: Sequence[int] = (),
        cross_to_move: Optional[bool] = None
    ) -> "BoardState":
        """
        Build a board from lists of occupied cells.

        Args:
            cross_cells: Cell indices marked by cross.
            circle_cells: Cell indices marked by circle.
            cross_to_move: Whose turn it is. Derived from mark counts if None.

        Returns:
            New BoardState.
        """
        cross = 0
        for cell in cross_cells:
            cross |= cell_to_move(cell)
        circle = 0
        for cell in circle_cells:
            circle |= cell_to_move(cell)

        if cross_to_move is None:
            cross_to_move = bin(cross).count("1") == bin(circle).count("1")

        return cls(cross=cross, circle=circle, cross_to_move=cross_to_move)

    @classmethod
    def from_grid(cls, grid, cross_to_move: Optional[bool] = None) -> "BoardState":
        """
        Build a board from a 3x3 grid (rows are ranks, columns are files).

        Args:
            grid: Nested sequence or array of 1 (cross), -1 (circle), 0 (empty).
            cross_to_move: Whose turn it is. Derived from mark counts if None.

        Returns:
            New BoardState.
        """
        cells = np.asarray(grid, dtype=np.int8).reshape(NUM_CELLS)
        cross_cells = np.flatnonzero(cells == 1).tolist()
        circle_cells = np.flatnonzero(cells == -1).tolist()
        return cls.from_cells(cross_cells, circle_cells, cross_to_move)

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        return Player.CROSS if self.cross_to_move else Player.CIRCLE

    def legal_moves(self) -> int:
        """
        Get all empty cells.

        Returns:
            Mask of legal moves. Each set bit is one legal move.
        """
        return ~(self.cross | self.circle) & FULL_BOARD

    def iter_moves(self) -> Iterator[int]:
        """Iterate over legal single-bit moves in increasing cell order."""
        return iter_bits(self.legal_moves())

    def apply_move(self, move: int):
        """
        Mark a cell for the side to move and pass the turn.

        Args:
            move: Single-bit move taken from legal_moves().
        """
        if self.cross_to_move:
            self.cross ^= move
        else:
            self.circle ^= move
        self.cross_to_move = not self.cross_to_move

    def undo_move(self, move: int):
        """
        Take back the most recent move.

        Args:
            move: The move passed to the last apply_move().
        """
        self.cross_to_move = not self.cross_to_move
        if self.cross_to_move:
            self.cross ^= move
        else:
            self.circle ^= move

    def status(self) -> GameStatus:
        """
        Classify the position.

        A side has won if one of its masks covers a whole winning line.
        Otherwise the game is a draw once every line holds at least one
        mark of each side, since neither side can complete any line.

        Returns:
            GameStatus of the position.
        """
        for line in WINNING_LINES:
            if (self.cross & line) == line:
                return GameStatus.CROSS_WON
            if (self.circle & line) == line:
                return GameStatus.CIRCLE_WON

        for line in WINNING_LINES:
            # Still open for one side if the other has no mark on it
            if not (self.cross & line) or not (self.circle & line):
                return GameStatus.IN_PROGRESS

        return GameStatus.DRAW

    def move_count(self) -> int:
        """Number of marked cells."""
        return bin(self.cross | self.circle).count("1")

    def piece_at(self, cell: int) -> Optional[Player]:
        """Get the player occupying a cell, or None if empty."""
        move = cell_to_move(cell)
        if self.cross & move:
            return Player.CROSS
        if self.circle & move:
            return Player.CIRCLE
        return None

    def to_grid(self) -> np.ndarray:
        """
        Get the board as a 3x3 array.

        Returns:
            int8 array indexed [rank, file]: 1 cross, -1 circle, 0 empty.
        """
        bits = np.arange(NUM_CELLS)
        cross = (self.cross >> bits) & 1
        circle = (self.circle >> bits) & 1
        return (cross - circle).astype(np.int8).reshape(BOARD_SIZE, BOARD_SIZE)

    def copy(self) -> "BoardState":
        """Create an independent copy of the board."""
        return BoardState(
            cross=self.cross,
            circle=self.circle,
            cross_to_move=self.cross_to_move
        )
