"""
Configuration for the TicTacToe engine and console game.
Change these values to tune search output and default players.
"""


class SearchConfig:
    """
    Configuration for the alpha-beta search.
    """

    # ==================== SCORING ====================
    # A win found at ply `depth` is worth WIN_SCORE - depth to the winner,
    # so faster wins score higher.
    WIN_SCORE = 10

    # Returned when the side to move already holds a full line.
    # Cannot happen with alternating play.
    DEGENERATE_SCORE = -1

    DRAW_SCORE = 0

    # Root window is (-WINDOW, WINDOW). Must exceed WIN_SCORE.
    WINDOW = 100

    # ==================== BEHAVIOUR ====================
    # False switches move choice to plain negamax (same results, slower)
    PRUNE = True

    # Print forecasts and node counts
    VERBOSE = True


class GameConfig:
    """
    Defaults for the console game.
    """

    PLAYER_KINDS = ["human", "random", "bot"]

    CROSS_KIND = "human"
    CIRCLE_KIND = "bot"

    CROSS_NAME = "Kolia"
    CIRCLE_NAME = "Silas"

    # ANSI colour for empty cell numbers
    USE_COLOUR = True
    EMPTY_CELL_COLOUR = "\033[38;2;86;95;137m"
    RESET_COLOUR = "\033[0m"
