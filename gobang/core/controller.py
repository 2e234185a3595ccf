# -*- coding: utf-8 -*-
"""盤面・手番・勝利判定をまとめて進行させる ``GameController``

GUI やテキスト表示からは ``click`` で入力を渡し、固定ティックごとに
``tick`` を呼ぶ。描画側への通知は ``GameView`` を通じて同期的に行う。

使い方:
  controller = GameController(view=my_view)
  controller.click((x, y))
  result = controller.tick((width, height))
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

from .board import Board, PieceColor
from .placement import (
    MissingWindowError,
    Placement,
    PlacementValidator,
    REASON_OUT_OF_RANGE,
)
from .turn import TurnTracker
from .win_detector import WinDetector, WinResult, WinRule

# ``TickResult.outcome`` に入る値
IDLE = "idle"
PLACED = "placed"
REJECTED = "rejected"
RESTARTED = "restarted"
SKIPPED = "skipped"


class GameState(Enum):
    IN_GAME = "in_game"
    GAME_OVER = "game_over"


class GameView(Protocol):
    """描画側が実装するインタフェース"""

    def render_piece(self, cell: tuple[int, int], color: PieceColor) -> None: ...

    def clear_pieces(self) -> None: ...

    def show_message(self, text: str) -> None: ...

    def hide_message(self) -> None: ...


class NullView:
    """描画を行わないビュー (テストやヘッドレス実行用)"""

    def render_piece(self, cell, color):
        pass

    def clear_pieces(self):
        pass

    def show_message(self, text):
        pass

    def hide_message(self):
        pass


@dataclass(frozen=True)
class TickResult:
    """1 ティック分の処理結果"""

    outcome: str
    cell: Optional[tuple[int, int]] = None
    color: Optional[PieceColor] = None
    reason: Optional[str] = None
    win: Optional[WinResult] = None

    @property
    def message(self) -> Optional[str]:
        return self.win.message if self.win is not None else None


class GameController:
    """InGame / GameOver の2状態で対局を進めるステートマシン"""

    def __init__(
        self,
        view: Optional[GameView] = None,
        rule: WinRule = WinRule.LINE,
        verbose: bool = False,
    ) -> None:
        self.board = Board()
        self.turn = TurnTracker()
        self.validator = PlacementValidator()
        self.detector = WinDetector(rule)
        self.view = view if view is not None else NullView()
        self.verbose = verbose
        self.state = GameState.IN_GAME
        self.pending_click: Optional[tuple[float, float]] = None
        self.last_win: Optional[WinResult] = None
        # 終了時の集計用
        self.wins = {PieceColor.BLACK: 0, PieceColor.WHITE: 0}

    # ------------------------------------------------------------
    # 入力
    # ------------------------------------------------------------
    def click(self, position: Sequence[float]) -> None:
        """クリック位置を保存する。ティック前に複数回来た場合は最後のものを使う"""
        self.pending_click = (float(position[0]), float(position[1]))

    def _take_click(self) -> Optional[tuple[float, float]]:
        position, self.pending_click = self.pending_click, None
        return position

    # ------------------------------------------------------------
    # 進行
    # ------------------------------------------------------------
    def tick(self, window_size: Optional[Sequence[float]]) -> TickResult:
        """固定ティック1回分の処理を行う"""
        if self.pending_click is None:
            return TickResult(outcome=IDLE)

        if self.state is GameState.GAME_OVER:
            self._take_click()
            self.restart()
            return TickResult(outcome=RESTARTED)

        try:
            placement = self.validator.validate(self.pending_click, window_size, self.board)
        except MissingWindowError as exc:
            # クリックは消費せず、次のティックで再試行する
            warnings.warn(f"tick skipped: {exc}", RuntimeWarning, stacklevel=2)
            return TickResult(outcome=SKIPPED)

        self._take_click()
        return self._apply(placement)

    def place(self, x: int, y: int) -> TickResult:
        """盤面座標を直接指定して着手する (テキスト表示用)

        GameOver 中は ``tick`` と同じくリスタートとして扱う。
        """
        if self.state is GameState.GAME_OVER:
            self.restart()
            return TickResult(outcome=RESTARTED)
        return self._apply(self.validator.validate_cell((x, y), self.board))

    def _apply(self, placement: Placement) -> TickResult:
        if not placement.accepted:
            if self.verbose and placement.reason != REASON_OUT_OF_RANGE:
                print(f"rejected {placement.cell}: {placement.reason}")
            return TickResult(outcome=REJECTED, cell=placement.cell, reason=placement.reason)

        x, y = placement.cell
        color = self.turn.current()
        self.board.place(x, y, color)
        self.view.render_piece((x, y), color)
        if self.verbose:
            print(f"{color.label} -> ({x}, {y})")

        win = self.detector.check(self.board, x, y, color)
        self.turn.advance()
        if win is not None:
            self._game_over(win)

        return TickResult(outcome=PLACED, cell=(x, y), color=color, reason=placement.reason, win=win)

    def _game_over(self, win: WinResult) -> None:
        self.state = GameState.GAME_OVER
        self.last_win = win
        self.wins[win.color] += 1
        self.view.show_message(win.message)
        if self.verbose:
            print(win.message)

    def restart(self) -> None:
        """盤面・手番・表示を初期状態に戻して対局を再開する"""
        self.board.reset()
        self.turn.reset()
        self.last_win = None
        self.view.clear_pieces()
        self.view.hide_message()
        self.state = GameState.IN_GAME
        if self.verbose:
            print("restart")

    @property
    def games_played(self) -> int:
        return sum(self.wins.values())


__all__ = [
    "GameController",
    "GameState",
    "GameView",
    "NullView",
    "TickResult",
    "IDLE",
    "PLACED",
    "REJECTED",
    "RESTARTED",
    "SKIPPED",
]
