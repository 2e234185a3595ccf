"""Tests for the text front end."""

from gobang.core.board import PieceColor
from gobang.core.controller import GameState
from gobang.scripts.play_text import parse_move, play_game_text


def run(lines, **kwargs):
    output = []
    controller = play_game_text(lines=lines, out=output.append, **kwargs)
    return controller, output


def test_parse_move():
    assert parse_move("3 4") == (3, 4)
    assert parse_move(" 10,2 ") == (10, 2)
    assert parse_move("a b") is None
    assert parse_move("1") is None
    assert parse_move("") is None


def test_moves_are_applied_in_order(capsys):
    controller, output = run(["7 7", "8 8", "q", "9 9"])
    assert controller.board.get(7, 7) is PieceColor.BLACK
    assert controller.board.get(8, 8) is PieceColor.WHITE
    assert controller.board.get(9, 9) is None
    assert "次は 黑棋" in output


def test_bad_input_is_reported(capsys):
    controller, output = run(["hello", "20 1", "7 7", "7 7"])
    assert controller.board.stone_count() == 1
    assert any("occupied" in line for line in output)
    assert any("out_of_range" in line for line in output)


def test_win_then_restart():
    moves = ["0 0", "0 5", "1 0", "1 5", "2 0", "2 5", "3 0", "3 5", "4 0"]
    controller, output = run(moves)
    assert controller.state is GameState.GAME_OVER
    assert "黑棋胜！" in output

    controller, output = run(moves + ["anything"])
    assert controller.state is GameState.IN_GAME
    assert controller.board.stone_count() == 0
    assert controller.wins[PieceColor.BLACK] == 1
    assert "決着した対局数: 1" in output


def test_summary_goes_through_out(capsys):
    """The session summary uses the same output callback as the board."""
    controller, output = run(["7 7", "q"])
    assert "決着した対局数: 0" in output
    assert "勝利判定方式: line" in output
    assert capsys.readouterr().out == ""
