# -*- coding: utf-8 -*-
"""対局スクリプトで使うデフォルト設定をまとめたモジュール"""

# 盤面サイズ・勝利条件・マスの大きさは ``gobang.core.constants`` の定数で、
# ここでは表示まわりなど実行時に変えてよい値だけを扱う。
# コマンドライン引数で指定された値はこの辞書を上書きする。

DEFAULT_CONFIG = {
    "window_size": (800, 600),
    "fps": 60,               # 描画フレームレート (ティック数は TICK_RATE で固定)
    "caption": "五子棋",
    "rule": "line",          # "line" か "ray"
    "verbose": False,
    "colors": {
        "background": (64, 64, 64),
        "board_line": (128, 128, 128),  # 0.5, 0.5, 0.5
        "black_stone": (0, 0, 0),
        "white_stone": (255, 255, 255),
        "message": (255, 165, 0),       # orange
    },
    "board_line_width": 10,
    # None なら中国語対応のシステムフォントを探す。無い環境では --font で ttf を渡す
    "font_path": None,
    "font_size": 50,
    # 勝利メッセージが出るまでは非表示
    "initial_message": "肮脏的黑客！",
}

__all__ = ["DEFAULT_CONFIG"]
