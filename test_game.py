"""
Tests for the game loop, console UI and command line.
"""

import random

import pytest

from logic.ai_player import AIPlayer
from logic.game_state import BoardState, GameStatus
from logic.players import MoveSource, RandomPlayer
from main import TicTacToeGame, create_player, main
from ui import ConsoleUI


class ScriptedPlayer(MoveSource):
    """Plays a fixed list of cells."""

    def __init__(self, name, cells):
        super().__init__(name)
        self.cells = list(cells)

    def choose_move(self, board):
        return 1 << self.cells.pop(0)


def quiet_game(cross, circle):
    return TicTacToeGame(cross, circle, ui=ConsoleUI(colour=False))


def test_render_plain_board():
    board = BoardState.from_cells([0], [4])

    text = ConsoleUI(colour=False).render(board)

    assert text.splitlines() == [
        " 6 │ 7 │ 8 ",
        "───┼───┼───",
        " 3 │ ◯ │ 5 ",
        "───┼───┼───",
        " ✗ │ 1 │ 2 ",
    ]


def test_render_colours_empty_cells():
    text = ConsoleUI(colour=True).render(BoardState())

    assert "\033[38;2;86;95;137m4\033[0m" in text


def test_result_banners():
    ui = ConsoleUI(colour=False)

    assert ui.result_banner(GameStatus.DRAW, "A", "B") == "======== DRAW ========"
    assert ui.result_banner(GameStatus.CROSS_WON, "A", "B") == "======== A WON ========"
    assert ui.result_banner(GameStatus.CIRCLE_WON, "A", "B") == "======== B WON ========"
    assert ui.result_banner(GameStatus.IN_PROGRESS, "A", "B") is None


def test_scripted_game_ends_on_win(capsys):
    cross = ScriptedPlayer("A", [4, 0, 8])
    circle = ScriptedPlayer("B", [1, 2])

    status = quiet_game(cross, circle).play()

    assert status == GameStatus.CROSS_WON
    out = capsys.readouterr().out
    assert "======== A WON ========" in out
    assert "Winning line: [0, 4, 8]" in out


def test_bot_against_bot_is_a_draw():
    rng = random.Random(11)
    cross = AIPlayer("Bot 1", rng, verbose=False)
    circle = AIPlayer("Bot 2", rng, verbose=False)

    assert quiet_game(cross, circle).play() == GameStatus.DRAW


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_bot_never_loses_as_circle(seed):
    rng = random.Random(seed)
    cross = RandomPlayer("Random", rng)
    circle = AIPlayer("Bot", rng, verbose=False)

    assert quiet_game(cross, circle).play() != GameStatus.CROSS_WON


@pytest.mark.parametrize("seed", [4, 5])
def test_bot_never_loses_as_cross(seed):
    rng = random.Random(seed)
    cross = AIPlayer("Bot", rng, verbose=False)
    circle = RandomPlayer("Random", rng)

    assert quiet_game(cross, circle).play() != GameStatus.CIRCLE_WON


def test_create_player_kinds():
    rng = random.Random(0)

    assert isinstance(create_player("random", "R", rng), RandomPlayer)
    assert isinstance(create_player("bot", "B", rng), AIPlayer)
    assert create_player("human", "H", rng).name == "H"

    with pytest.raises(ValueError):
        create_player("robot", "X", rng)


def test_main_random_game(capsys):
    code = main([
        "--cross", "random", "--circle", "random",
        "--seed", "5", "--no-colour",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "WON ========" in out or "DRAW" in out
    assert "Goodbye!" in out


def test_main_handles_closed_input(monkeypatch, capsys):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    code = main(["--cross", "human", "--circle", "random", "--no-colour"])

    assert code == 0
    assert "Game interrupted by user." in capsys.readouterr().out
