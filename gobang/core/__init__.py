"""ゲームの基本機能(ルールエンジン)を提供するサブパッケージ"""

from .board import (
    Board,
    PieceColor,
    OutOfRangeError,
    OccupiedCellError,
    grid_to_world,
    world_to_grid,
)
from .controller import GameController, GameState, GameView, NullView, TickResult
from .placement import MissingWindowError, Placement, PlacementValidator, grid_to_window, to_grid
from .turn import TurnTracker
from .win_detector import WinDetector, WinResult, WinRule, win_message

__all__ = [
    "Board",
    "PieceColor",
    "OutOfRangeError",
    "OccupiedCellError",
    "grid_to_world",
    "world_to_grid",
    "GameController",
    "GameState",
    "GameView",
    "NullView",
    "TickResult",
    "MissingWindowError",
    "Placement",
    "PlacementValidator",
    "grid_to_window",
    "to_grid",
    "TurnTracker",
    "WinDetector",
    "WinResult",
    "WinRule",
    "win_message",
]
