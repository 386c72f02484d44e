"""
Logic module for TicTacToe.
Handles the bitboard game state, rules, search and players.
"""

__version__ = "1.0.0"

from .config import SearchConfig, GameConfig
from .game_state import BoardState, GameStatus, Player, iter_bits, cell_to_move, move_to_cell
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .search import Search, SearchResult, Outcome
from .players import MoveSource, HumanPlayer, RandomPlayer
from .ai_player import AIPlayer
