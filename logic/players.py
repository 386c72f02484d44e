"""
Move sources for TicTacToe.
Every player answers the same question: which move to make on this board.
"""

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .game_state import BoardState, iter_bits
from .move_validator import MoveValidator


class MoveSource(ABC):
    """
    Something that picks moves: a human, a random mover or the AI.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_move(self, board: BoardState) -> int:
        """
        Choose a move for the side to move.

        Args:
            board: Current board. Must be left unchanged.

        Returns:
            Single-bit move from board.legal_moves().
        """


class HumanPlayer(MoveSource):
    """
    A player typing cell numbers at the console.
    Keeps asking until a legal cell is entered.
    """

    PROMPT = "Cell (0 - 8): "

    def __init__(
        self,
        name: str,
        input_func: Optional[Callable[[str], str]] = None,
        validator: Optional[MoveValidator] = None
    ):
        """
        Initialize the human player.

        Args:
            name: Display name.
            input_func: Reads one line given a prompt (default: input).
            validator: Checks typed cells (default: MoveValidator()).
        """
        super().__init__(name)
        self.input_func = input_func or input
        self.validator = validator or MoveValidator()

    def choose_move(self, board: BoardState) -> int:
        while True:
            result = self.validator.validate_cell(board, self.input_func(self.PROMPT))
            if result.is_valid:
                return result.move
            print(f"Invalid input: {result.error_message} Please try again.")


class RandomPlayer(MoveSource):
    """A player that picks uniformly among the legal moves."""

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, board: BoardState) -> int:
        return self.rng.choice(list(iter_bits(board.legal_moves())))
