"""手番管理クラス ``TurnTracker``"""

from .board import PieceColor


class TurnTracker:
    """現在どちらの手番かを保持する。着手が成立するたびに ``advance`` で交代"""

    def __init__(self) -> None:
        self._current = PieceColor.default()

    def current(self) -> PieceColor:
        """現在手番の色を返す"""
        return self._current

    def advance(self) -> PieceColor:
        """手番を交代して新しい手番の色を返す"""
        self._current = self._current.opponent()
        return self._current

    def reset(self) -> None:
        """先手(黒)に戻す"""
        self._current = PieceColor.default()


__all__ = ["TurnTracker"]
