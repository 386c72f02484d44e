"""
Adversarial search for TicTacToe.
Exhaustive negamax with alpha-beta pruning over a BoardState.
"""

import random
from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from .config import SearchConfig
from .game_state import BoardState, GameStatus, iter_bits, move_to_cell


class Outcome(Enum):
    """Forecast for the side to move under perfect play."""
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"


@dataclass
class SearchResult:
    """
    Result of searching every root move.
    """
    best_score: Optional[int] = None   # None when there are no legal moves
    best_moves: int = 0                # Mask of all moves scoring best_score
    scores: Dict[int, int] = field(default_factory=dict)  # move -> score

    @property
    def outcome(self) -> Optional[Outcome]:
        """Forecast implied by the best score."""
        if self.best_score is None:
            return None
        if self.best_score > 0:
            return Outcome.WIN
        if self.best_score == 0:
            return Outcome.DRAW
        return Outcome.LOSS

    @property
    def best_cells(self) -> List[int]:
        """Cell indices of the best moves."""
        return [move_to_cell(move) for move in iter_bits(self.best_moves)]


class Search:
    """
    Negamax search that plays every line out to a terminal position.

    Scores are always from the point of view of the side to move. There
    is no evaluation function: the board is small enough to search to
    the end, and pruning plus early draw detection keep it fast.

    The board passed in is mutated while searching and restored before
    every method returns.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config=SearchConfig,
        prune: Optional[bool] = None
    ):
        """
        Initialize the search.

        Args:
            rng: Random source for breaking ties between equal moves.
            config: Scoring and behaviour settings.
            prune: Use alpha-beta (True) or plain negamax (False).
                Defaults to config.PRUNE.
        """
        self.rng = rng if rng is not None else random.Random()
        self.config = config
        self.prune = config.PRUNE if prune is None else prune

        # Nodes visited by the last evaluate() call
        self.nodes_evaluated = 0

    def terminal_score(self, board: BoardState, status: GameStatus, depth: int) -> Optional[int]:
        """
        Score a finished position for the side to move.

        Args:
            board: Position to score.
            status: board.status(), passed in to avoid recomputing it.
            depth: Plies below the root move.

        Returns:
            The score, or None if the game is still in progress.
        """
        if status == GameStatus.IN_PROGRESS:
            return None
        if status == GameStatus.DRAW:
            return self.config.DRAW_SCORE

        mover_won = (status == GameStatus.CROSS_WON) == board.cross_to_move
        if mover_won:
            return self.config.DEGENERATE_SCORE

        # The side that just moved completed a line
        return -(self.config.WIN_SCORE - depth)

    def search(self, board: BoardState, alpha: int, beta: int, depth: int) -> int:
        """
        Alpha-beta negamax.

        Args:
            board: Position to search (restored on return).
            alpha: Lower bound of the window.
            beta: Upper bound of the window.
            depth: Plies below the root move.

        Returns:
            The score of the position, clamped to [alpha, beta].
        """
        self.nodes_evaluated += 1

        score = self.terminal_score(board, board.status(), depth)
        if score is not None:
            return score

        for move in board.iter_moves():
            board.apply_move(move)
            score = -self.search(board, -beta, -alpha, depth + 1)
            board.undo_move(move)

            if score >= beta:
                return beta  # Cut-off, opponent avoids this line
            if score > alpha:
                alpha = score

        return alpha

    def full_search(self, board: BoardState, depth: int) -> int:
        """
        Negamax without pruning. Gives the same root scores as search().

        Args:
            board: Position to search (restored on return).
            depth: Plies below the root move.

        Returns:
            The exact score of the position.
        """
        self.nodes_evaluated += 1

        score = self.terminal_score(board, board.status(), depth)
        if score is not None:
            return score

        best = None
        for move in board.iter_moves():
            board.apply_move(move)
            score = -self.full_search(board, depth + 1)
            board.undo_move(move)

            if best is None or score > best:
                best = score

        return best

    def evaluate(self, board: BoardState) -> SearchResult:
        """
        Score every legal move from the root with a full window.

        Args:
            board: Root position (restored on return).

        Returns:
            SearchResult with every move's score and the set of best moves.
        """
        self.nodes_evaluated = 0
        result = SearchResult()
        window = self.config.WINDOW

        for move in board.iter_moves():
            board.apply_move(move)
            if self.prune:
                score = -self.search(board, -window, window, 0)
            else:
                score = -self.full_search(board, 0)
            board.undo_move(move)

            result.scores[move] = score
            if result.best_score is None or score > result.best_score:
                result.best_score = score
                result.best_moves = move
            elif score == result.best_score:
                result.best_moves |= move

        return result

    def choose_best_move(self, board: BoardState) -> Optional[int]:
        """
        Pick an optimal move.

        Ties between equally scored moves are broken uniformly at random.

        Args:
            board: Current position (restored on return).

        Returns:
            Single-bit move, or None if there are no legal moves.
        """
        return self.pick_move(self.evaluate(board))

    def pick_move(self, result: SearchResult) -> Optional[int]:
        """Choose one move from the best set of a SearchResult."""
        best = list(iter_bits(result.best_moves))

        if not best:
            return None
        if len(best) == 1:
            return best[0]
        return self.rng.choice(best)
