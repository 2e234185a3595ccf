"""対局結果を整形して表示するヘルパー"""

from ..core.board import PieceColor


def show_results(controller, out=print) -> None:
    """セッション中の勝敗を集計して ``out`` (既定は標準出力) へ表示する"""
    black_wins = controller.wins[PieceColor.BLACK]
    white_wins = controller.wins[PieceColor.WHITE]
    num_games = controller.games_played

    out("============================================================")
    out(f"決着した対局数: {num_games}")
    out(f"{PieceColor.BLACK.label} 勝利数: {black_wins}")
    out(f"{PieceColor.WHITE.label} 勝利数: {white_wins}")
    if num_games > 0:
        out(f"{PieceColor.BLACK.label} 勝率  : {black_wins / num_games:.3f}")
    out(f"勝利判定方式: {controller.detector.rule.value}")
    out("============================================================")


__all__ = ["show_results"]
