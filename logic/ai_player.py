"""
AI player for TicTacToe.
Uses exhaustive alpha-beta search to choose the best move.
"""

import random
from typing import Optional

from .config import SearchConfig
from .game_state import BoardState, move_to_cell
from .players import MoveSource
from .search import Search, SearchResult, Outcome


class AIPlayer(MoveSource):
    """
    An AI that plays TicTacToe perfectly.

    The AI will always play optimally - it wins whenever a win can be
    forced, and never loses a position that can be held to a draw.
    Among equally good moves it picks one at random, so games vary.
    """

    FORECASTS = {
        Outcome.WIN: "Bot wins with perfect play",
        Outcome.DRAW: "Draw so far",
        Outcome.LOSS: "Bot loses against perfect play",
    }

    def __init__(
        self,
        name: str = "Bot",
        rng: Optional[random.Random] = None,
        config=SearchConfig,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            name: Display name.
            rng: Random source for breaking ties.
            config: Search settings.
            verbose: Print forecasts. Defaults to config.VERBOSE.
        """
        super().__init__(name)
        self.search = Search(rng=rng, config=config)
        self.verbose = config.VERBOSE if verbose is None else verbose

        # Result of the last search, kept for inspection
        self.last_result: Optional[SearchResult] = None

    def choose_move(self, board: BoardState) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Current board (unchanged on return).

        Returns:
            Single-bit move, or None if no moves are available.
        """
        result = self.search.evaluate(board)
        self.last_result = result

        if result.outcome is None:
            return None

        move = self.search.pick_move(result)

        if self.verbose:
            print(self.FORECASTS[result.outcome])
            print(
                f"AI evaluated {self.search.nodes_evaluated} positions. "
                f"Best cells: {result.best_cells} (score: {result.best_score}), "
                f"playing {move_to_cell(move)}"
            )

        return move
