# -*- coding: utf-8 -*-
"""クリック座標を盤面座標へ変換し、着手可能か判定するモジュール"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .board import Board
from .constants import CELL_SIZE, HALF_BOARD

# ``Placement.reason`` に入る値
REASON_OK = "ok"
REASON_OUT_OF_RANGE = "out_of_range"
REASON_OCCUPIED = "occupied"


class MissingWindowError(RuntimeError):
    """座標変換の時点で有効なウィンドウが存在しない"""


@dataclass(frozen=True)
class Placement:
    """クリック1回分の判定結果"""

    cell: Optional[tuple[int, int]]
    reason: str

    @property
    def accepted(self) -> bool:
        return self.reason == REASON_OK


def round_half_away(value: float) -> int:
    """0.5 ちょうどは 0 から遠い方へ丸める (2.5 -> 3, -2.5 -> -3)"""
    return int(np.copysign(np.floor(abs(value) + 0.5), value))


def _require_window(window_size: Optional[Sequence[float]]) -> tuple[float, float]:
    if window_size is None:
        raise MissingWindowError("no active window to map the click against")
    width, height = window_size
    return float(width), float(height)


def to_grid(
    position: Sequence[float],
    window_size: Optional[Sequence[float]],
) -> Optional[tuple[int, int]]:
    """ウィンドウ座標 (左上原点・y下向き) を盤面座標へ変換する

    盤外なら ``None`` を返す。``window_size`` が ``None`` の場合は
    ``MissingWindowError`` を送出する。
    """
    width, height = _require_window(window_size)

    # --- ウィンドウ中央を原点にしてマス単位へ -----------------------
    sx = round_half_away((position[0] - width / 2.0) / CELL_SIZE)
    sy = round_half_away((position[1] - height / 2.0) / CELL_SIZE)

    # --- -7..7 の範囲外は盤外 ---------------------------------------
    if not (-HALF_BOARD <= sx <= HALF_BOARD and -HALF_BOARD <= sy <= HALF_BOARD):
        return None
    return sx + HALF_BOARD, sy + HALF_BOARD


def grid_to_window(
    x: int,
    y: int,
    window_size: Optional[Sequence[float]],
) -> tuple[float, float]:
    """マス (x, y) の中心をウィンドウ座標で返す (``to_grid`` の逆変換)"""
    width, height = _require_window(window_size)
    return (
        width / 2.0 + (x - HALF_BOARD) * CELL_SIZE,
        height / 2.0 + (y - HALF_BOARD) * CELL_SIZE,
    )


class PlacementValidator:
    """クリック位置を盤面座標へスナップし、着手可能かを判定する"""

    def validate(
        self,
        position: Sequence[float],
        window_size: Optional[Sequence[float]],
        board: Board,
    ) -> Placement:
        """盤外・既に石ありなら却下、そうでなければ ``REASON_OK``"""
        cell = to_grid(position, window_size)
        return self.validate_cell(cell, board)

    def validate_cell(self, cell: Optional[tuple[int, int]], board: Board) -> Placement:
        """盤面座標が直接与えられた場合の判定"""
        if cell is None or not board.in_bounds(*cell):
            return Placement(cell=None, reason=REASON_OUT_OF_RANGE)
        if not board.is_empty(*cell):
            return Placement(cell=cell, reason=REASON_OCCUPIED)
        return Placement(cell=cell, reason=REASON_OK)


__all__ = [
    "MissingWindowError",
    "Placement",
    "PlacementValidator",
    "REASON_OK",
    "REASON_OUT_OF_RANGE",
    "REASON_OCCUPIED",
    "grid_to_window",
    "round_half_away",
    "to_grid",
]
