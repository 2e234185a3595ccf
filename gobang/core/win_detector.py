# -*- coding: utf-8 -*-
"""着手直後の石から勝利(五連)を判定するモジュール"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, PieceColor
from .constants import AXES, DIRECTIONS, WIN_LENGTH


class WinRule(str, Enum):
    """勝利判定の方式

    RAY  : 8方向それぞれに 4 マス伸ばし、全て同色なら勝ち
    LINE : 4軸それぞれで両側の連を合算し、5 以上なら勝ち
    """

    RAY = "ray"
    LINE = "line"


@dataclass(frozen=True)
class WinResult:
    """勝利時の情報"""

    color: PieceColor
    direction: tuple[int, int]
    cells: tuple[tuple[int, int], ...]

    @property
    def message(self) -> str:
        return win_message(self.color)


def win_message(color: PieceColor) -> str:
    """勝利メッセージ (例: ``黑棋胜！``)"""
    return f"{color.label}胜！"


def _walk(board: Board, x: int, y: int, dx: int, dy: int, color: PieceColor, limit: int):
    """(x, y) の隣から (dx, dy) 方向へ同色の石が続く限り座標を集める"""
    cells = []
    cx, cy = x + dx, y + dy
    while len(cells) < limit and board.in_bounds(cx, cy) and board.cells[cx, cy] == color:
        cells.append((cx, cy))
        cx += dx
        cy += dy
    return cells


class WinDetector:
    """着手した石を起点に五連ができたかを調べる"""

    def __init__(self, rule: WinRule = WinRule.LINE) -> None:
        self.rule = WinRule(rule)

    def check(self, board: Board, x: int, y: int, color: PieceColor) -> Optional[WinResult]:
        """勝ちなら ``WinResult``、そうでなければ ``None``"""
        if self.rule is WinRule.RAY:
            return self._check_ray(board, x, y, color)
        return self._check_line(board, x, y, color)

    def _check_ray(self, board, x, y, color):
        steps = WIN_LENGTH - 1
        for dx, dy in DIRECTIONS:
            # 盤外・空き・相手の石に当たった時点でこの方向は失敗
            arm = _walk(board, x, y, dx, dy, color, steps)
            if len(arm) == steps:
                return WinResult(color=color, direction=(dx, dy), cells=((x, y), *arm))
        return None

    def _check_line(self, board, x, y, color):
        for dx, dy in AXES:
            forward = _walk(board, x, y, dx, dy, color, board.board_size)
            backward = _walk(board, x, y, -dx, -dy, color, board.board_size)
            if 1 + len(forward) + len(backward) >= WIN_LENGTH:
                cells = (*reversed(backward), (x, y), *forward)
                return WinResult(color=color, direction=(dx, dy), cells=tuple(cells))
        return None


__all__ = ["WinDetector", "WinResult", "WinRule", "win_message"]
