# -*- coding: utf-8 -*-
"""盤面サイズや描画単位など、実行時に変更しない定数をまとめたモジュール"""

# 盤面は 15x15 (座標 0..14)
BOARD_SIZE = 15
# 盤面中央を原点としたときのオフセット (-7..7 <-> 0..14)
HALF_BOARD = BOARD_SIZE // 2
# 何個並べば勝ちか
WIN_LENGTH = 5
# 1マスあたりの大きさ (ワールド座標・ウィンドウ座標共通)
CELL_SIZE = 30.0
# 固定ティック数 (1秒あたり)
TICK_RATE = 60

# 着手位置から伸ばす8方向
DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]

# 勝利判定で使う4軸 (逆方向は符号反転で得る)
AXES = [(1, 0), (0, 1), (1, 1), (1, -1)]

__all__ = [
    "BOARD_SIZE",
    "HALF_BOARD",
    "WIN_LENGTH",
    "CELL_SIZE",
    "TICK_RATE",
    "DIRECTIONS",
    "AXES",
]
