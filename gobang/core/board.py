# -*- coding: utf-8 -*-
"""五目並べの盤面管理クラスと石の色の定義"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import numpy as np

from .constants import BOARD_SIZE, CELL_SIZE, HALF_BOARD


class OutOfRangeError(IndexError):
    """盤外の座標にアクセスしたときに送出される例外"""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"cell ({x}, {y}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board")
        self.x = x
        self.y = y


class OccupiedCellError(ValueError):
    """既に石があるマスへ置こうとしたときに送出される例外"""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"cell ({x}, {y}) is already occupied")
        self.x = x
        self.y = y


class PieceColor(IntEnum):
    """石の色。値は盤面配列に格納する数値と一致させる (0 は空き)"""

    BLACK = 1
    WHITE = 2

    @classmethod
    def default(cls) -> "PieceColor":
        """先手は黒"""
        return cls.BLACK

    def opponent(self) -> "PieceColor":
        """相手の色を返す"""
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK

    @property
    def label(self) -> str:
        """勝利メッセージ等に使う表示名"""
        return "黑棋" if self is PieceColor.BLACK else "白棋"

    def __str__(self) -> str:
        return self.label


def grid_to_world(x: int, y: int) -> tuple[float, float]:
    """盤面座標をワールド座標 (中央原点・y軸上向き) へ変換する"""
    return (x - HALF_BOARD) * CELL_SIZE, (HALF_BOARD - y) * CELL_SIZE


def world_to_grid(wx: float, wy: float) -> tuple[float, float]:
    """``grid_to_world`` の逆変換。丸めは行わない"""
    return wx / CELL_SIZE + HALF_BOARD, HALF_BOARD - wy / CELL_SIZE


class Board:
    """15x15 の盤面。各マスは空き(0)か ``PieceColor`` の値を持つ"""

    def __init__(self) -> None:
        self.board_size = BOARD_SIZE
        self.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    def reset(self) -> None:
        """全てのマスを空きに戻す"""
        self.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        """座標が盤内なら ``True``"""
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def _check_range(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y)

    def get(self, x: int, y: int) -> Optional[PieceColor]:
        """(x, y) の石の色を返す。空きなら ``None``"""
        self._check_range(x, y)
        value = int(self.cells[x, y])
        if value == 0:
            return None
        return PieceColor(value)

    def is_empty(self, x: int, y: int) -> bool:
        """盤内かつ空きマスなら ``True``"""
        return self.in_bounds(x, y) and self.cells[x, y] == 0

    def place(self, x: int, y: int, color: PieceColor) -> None:
        """空きマスに ``color`` の石を置く。呼び出し側で ``is_empty`` を確認しておくこと"""
        self._check_range(x, y)
        if self.cells[x, y] != 0:
            raise OccupiedCellError(x, y)
        self.cells[x, y] = int(color)

    def stone_count(self) -> int:
        """盤上の石の数"""
        return int(np.count_nonzero(self.cells))

    def is_full(self) -> bool:
        return bool(np.all(self.cells != 0))

    def copy_array(self) -> np.ndarray:
        """盤面をコピーして返す (書き換えても本体には影響しない)"""
        return self.cells.copy()

    def render_text(self) -> str:
        """人間向けのテキスト表示を文字列で返す

        行が y、列が x。黒は ``X``、白は ``O``、空きは ``.`` で表す。
        """
        lines = ["   " + "".join(f"{x:2d} " for x in range(BOARD_SIZE))]
        for y in range(BOARD_SIZE):
            row = [f"{y:2d} "]
            for x in range(BOARD_SIZE):
                value = self.cells[x, y]
                if value == 0:
                    row.append(" . ")
                elif value == PieceColor.BLACK:
                    row.append(" X ")
                else:
                    row.append(" O ")
            lines.append("".join(row).rstrip())
        return "\n".join(lines)


__all__ = [
    "Board",
    "PieceColor",
    "OutOfRangeError",
    "OccupiedCellError",
    "grid_to_world",
    "world_to_grid",
]
