"""
TicTacToe console UI.
Draws the board as text and announces results.

Board layout (cell numbers, rank 2 at the top):

     6 │ 7 │ 8
    ───┼───┼───
     3 │ 4 │ 5
    ───┼───┼───
     0 │ 1 │ 2
"""

from typing import List, Optional

from logic.config import GameConfig
from logic.game_state import BoardState, GameStatus, Player, BOARD_SIZE
from logic.win_checker import WinChecker


SYMBOLS = {
    Player.CROSS: "✗",
    Player.CIRCLE: "◯",
}

ROW_SEPARATOR = "───┼───┼───"


class ConsoleUI:
    """
    Text interface for the game.

    Shows:
    - The board, with empty cells labelled by their number
    - Whose turn it is
    - The final result
    """

    def __init__(self, colour: bool = GameConfig.USE_COLOUR, config=GameConfig):
        """
        Initialize the UI.

        Args:
            colour: Dim the numbers of empty cells with ANSI colours.
            config: Game settings holding the colour codes.
        """
        self.colour = colour
        self.config = config
        self.win_checker = WinChecker()

    def _cell_text(self, board: BoardState, cell: int) -> str:
        piece = board.piece_at(cell)
        if piece is not None:
            return f" {SYMBOLS[piece]} "
        if self.colour:
            return f" {self.config.EMPTY_CELL_COLOUR}{cell}{self.config.RESET_COLOUR} "
        return f" {cell} "

    def render(self, board: BoardState) -> str:
        """
        Draw the board.

        Args:
            board: Board to draw (not modified).

        Returns:
            Multi-line string, top rank first.
        """
        lines: List[str] = []

        for rank in reversed(range(BOARD_SIZE)):
            cells = [
                self._cell_text(board, rank * BOARD_SIZE + file)
                for file in range(BOARD_SIZE)
            ]
            lines.append("│".join(cells))
            if rank != 0:
                lines.append(ROW_SEPARATOR)

        return "\n".join(lines)

    def show_board(self, board: BoardState):
        """Print the board surrounded by blank lines."""
        print()
        print(self.render(board))
        print()

    def show_turn(self, player: Player, name: str):
        """Print whose turn it is."""
        print(f"{name} ({SYMBOLS[player]})")

    def show_players(self, cross_name: str, circle_name: str):
        """Print who plays which symbol."""
        print(f"{SYMBOLS[Player.CROSS]}: {cross_name}")
        print(f"{SYMBOLS[Player.CIRCLE]}: {circle_name}")
        print()

    def result_banner(self, status: GameStatus, cross_name: str, circle_name: str) -> Optional[str]:
        """
        Get the end-of-game banner.

        Returns:
            Banner text, or None if the game is still in progress.
        """
        if status == GameStatus.DRAW:
            return "======== DRAW ========"
        if status == GameStatus.CROSS_WON:
            return f"======== {cross_name} WON ========"
        if status == GameStatus.CIRCLE_WON:
            return f"======== {circle_name} WON ========"
        return None

    def show_result(self, board: BoardState, cross_name: str, circle_name: str):
        """Print the final result and the winning line, if any."""
        status = board.status()
        banner = self.result_banner(status, cross_name, circle_name)
        if banner is None:
            return

        print()
        print(banner)

        cells = self.win_checker.get_winning_cells(board)
        if cells:
            print(f"Winning line: {cells}")
        print()
