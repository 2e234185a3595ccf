"""テキストのみで対局を進めるスクリプト

1 行に ``x y`` (0..14) を入力して石を置く。決着後は何か入力すると
盤面をリセットする。``q`` で終了。
"""

import sys

from ..core.controller import PLACED, REJECTED, GameController, GameState
from .result_utils import show_results

PROMPT_HINT = "x y (0-14) を入力してください。q で終了"


class TextView:
    """勝利メッセージだけを出力する ``GameView`` 実装"""

    def __init__(self, out=print) -> None:
        self.out = out

    def render_piece(self, cell, color):
        pass

    def clear_pieces(self):
        pass

    def show_message(self, text):
        self.out(text)

    def hide_message(self):
        pass


def parse_move(line: str):
    """``"x y"`` 形式の文字列を ``(x, y)`` に変換する。失敗したら ``None``"""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play_game_text(lines=None, out=print, rule="line", verbose=False) -> GameController:
    """``lines`` (既定は標準入力) から手を読み込み、盤面を逐次表示する"""
    if lines is None:
        lines = sys.stdin
    controller = GameController(view=TextView(out), rule=rule, verbose=verbose)

    out(controller.board.render_text())
    out(PROMPT_HINT)
    for raw in lines:
        line = raw.strip()
        if line.lower() in ("q", "quit", "exit"):
            break

        if controller.state is GameState.GAME_OVER:
            # 決着後の入力は内容に関係なくリスタート
            controller.restart()
            out(controller.board.render_text())
            continue

        move = parse_move(line)
        if move is None:
            out(PROMPT_HINT)
            continue
        result = controller.place(*move)

        if result.outcome == REJECTED:
            out(f"({line}) には置けません: {result.reason}")
            continue
        out(controller.board.render_text())
        if result.outcome == PLACED and result.win is None:
            out(f"次は {controller.turn.current().label}")

    show_results(controller, out)
    return controller


if __name__ == "__main__":
    play_game_text()
