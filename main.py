"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (bitboard state, search, players)
- UI (console rendering)

Run this script to play TicTacToe against the bot, a random mover,
or another human.
"""

import random
from typing import Optional

from logic.config import GameConfig, SearchConfig
from logic.game_state import BoardState, GameStatus, Player
from logic.players import MoveSource, HumanPlayer, RandomPlayer
from logic.ai_player import AIPlayer

from ui import ConsoleUI


class TicTacToeGame:
    """
    Runs one game between two move sources.

    Game flow:
    1. Show the board and whose turn it is
    2. Ask the side to move for a move
    3. Apply it to the board
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        cross: MoveSource,
        circle: MoveSource,
        ui: Optional[ConsoleUI] = None,
        board: Optional[BoardState] = None
    ):
        """
        Initialize the game.

        Args:
            cross: Player moving first.
            circle: Player moving second.
            ui: Console UI (default: ConsoleUI()).
            board: Starting position (default: empty board).
        """
        self.players = {
            Player.CROSS: cross,
            Player.CIRCLE: circle,
        }
        self.ui = ui or ConsoleUI()
        self.board = board if board is not None else BoardState()

    def play(self) -> GameStatus:
        """
        Play until the game is over.

        Returns:
            The terminal status.
        """
        cross = self.players[Player.CROSS]
        circle = self.players[Player.CIRCLE]

        self.ui.show_players(cross.name, circle.name)

        while self.board.status() == GameStatus.IN_PROGRESS:
            self.ui.show_board(self.board)

            side = self.board.current_player
            self.ui.show_turn(side, self.players[side].name)

            move = self.players[side].choose_move(self.board)
            self.board.apply_move(move)

        self.ui.show_board(self.board)
        self.ui.show_result(self.board, cross.name, circle.name)

        return self.board.status()


def create_player(kind: str, name: str, rng: random.Random) -> MoveSource:
    """
    Create a move source by kind.

    Args:
        kind: One of GameConfig.PLAYER_KINDS.
        name: Display name.
        rng: Shared random source.

    Returns:
        The player.
    """
    if kind == "human":
        return HumanPlayer(name)
    if kind == "random":
        return RandomPlayer(name, rng)
    if kind == "bot":
        return AIPlayer(name, rng, verbose=SearchConfig.VERBOSE)
    raise ValueError(f"Unknown player kind: {kind}")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--cross",
        choices=GameConfig.PLAYER_KINDS,
        default=GameConfig.CROSS_KIND,
        help="Who plays cross (moves first)"
    )
    parser.add_argument(
        "--circle",
        choices=GameConfig.PLAYER_KINDS,
        default=GameConfig.CIRCLE_KIND,
        help="Who plays circle"
    )
    parser.add_argument("--cross-name", default=GameConfig.CROSS_NAME)
    parser.add_argument("--circle-name", default=GameConfig.CIRCLE_NAME)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random moves and tie-breaking"
    )
    parser.add_argument(
        "--no-colour",
        action="store_true",
        help="Plain text board without ANSI colours"
    )

    args = parser.parse_args(argv)

    # One random source for the whole process
    rng = random.Random(args.seed)

    game = TicTacToeGame(
        cross=create_player(args.cross, args.cross_name, rng),
        circle=create_player(args.circle, args.circle_name, rng),
        ui=ConsoleUI(colour=GameConfig.USE_COLOUR and not args.no_colour)
    )

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    main()
