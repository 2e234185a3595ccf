"""PyGame 表示関連のヘルパー関数をまとめたモジュール"""

import warnings
from pathlib import Path

import pygame

from ..core.board import PieceColor
from ..core.constants import BOARD_SIZE, CELL_SIZE, HALF_BOARD
from ..core.placement import grid_to_window
from .config_defaults import DEFAULT_CONFIG

# 石の半径 (マスの半分)
STONE_RADIUS = int(CELL_SIZE // 2)
# 中国語表示に使えそうなシステムフォント (カンマ区切りで match_font に渡す)
CJK_SYSTEM_FONTS = "lxgwwenkaimono,notosanscjksc,notosanscjk,wenquanyimicrohei,microsoftyahei,simhei"


def board_line_specs(window_size, line_width=DEFAULT_CONFIG["board_line_width"]):
    """碁盤の線を ``(中心座標, (幅, 高さ))`` のリストで返す

    横線と縦線を交互に 15 本ずつ。線の長さは両端の太さ分だけはみ出す。
    """
    width, height = window_size
    cx, cy = width / 2.0, height / 2.0
    span = (BOARD_SIZE - 1) * CELL_SIZE + line_width

    specs = []
    for i in range(-HALF_BOARD, HALF_BOARD + 1):
        specs.append(((cx, cy + i * CELL_SIZE), (span, line_width)))
        specs.append(((cx + i * CELL_SIZE, cy), (line_width, span)))
    return specs


def load_font(font_path=None, size=DEFAULT_CONFIG["font_size"]) -> pygame.font.Font:
    """フォントを読み込む

    ``font_path`` が無ければ中国語対応のシステムフォントを探し、それも無ければ
    pygame 既定フォントを使う。既定フォントでは勝利メッセージが豆腐になるため
    警告を出す (``--font`` で ttf を指定すれば解消する)。
    """
    if font_path is not None and Path(font_path).is_file():
        return pygame.font.Font(str(font_path), size)

    matched = pygame.font.match_font(CJK_SYSTEM_FONTS)
    if matched:
        return pygame.font.Font(matched, size)

    warnings.warn(
        "no CJK font found; pass a .ttf with --font to render the win message",
        RuntimeWarning,
        stacklevel=2,
    )
    return pygame.font.Font(None, size)


class PygameView:
    """``GameView`` の PyGame 実装。描画すべき石とメッセージを保持する"""

    def __init__(self, font=None, colors=None) -> None:
        self.font = font
        self.colors = colors if colors is not None else DEFAULT_CONFIG["colors"]
        self.pieces: list[tuple[tuple[int, int], PieceColor]] = []
        self.message = DEFAULT_CONFIG["initial_message"]
        self.message_visible = False

    def render_piece(self, cell, color):
        self.pieces.append((cell, color))

    def clear_pieces(self):
        self.pieces.clear()

    def show_message(self, text):
        self.message = text
        self.message_visible = True

    def hide_message(self):
        self.message_visible = False

    def stone_color(self, color: PieceColor):
        if color is PieceColor.BLACK:
            return self.colors["black_stone"]
        return self.colors["white_stone"]


def draw_grid(screen: pygame.Surface, colors: dict, line_width: int) -> None:
    """碁盤の線を描画する"""
    for center, size in board_line_specs(screen.get_size(), line_width):
        rect = pygame.Rect(0, 0, round(size[0]), round(size[1]))
        rect.center = (round(center[0]), round(center[1]))
        pygame.draw.rect(screen, colors["board_line"], rect)


def draw_stones(screen: pygame.Surface, view: PygameView) -> None:
    """置かれた石をすべて描画する"""
    window_size = screen.get_size()
    for (x, y), color in view.pieces:
        cx, cy = grid_to_window(x, y, window_size)
        pygame.draw.circle(screen, view.stone_color(color), (round(cx), round(cy)), STONE_RADIUS)


def draw_message(screen: pygame.Surface, view: PygameView) -> None:
    """勝利メッセージを画面中央に描画する"""
    if not view.message_visible or view.font is None:
        return
    text = view.font.render(view.message, True, view.colors["message"])
    rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
    screen.blit(text, rect)


def draw_board(screen: pygame.Surface, view: PygameView, line_width=DEFAULT_CONFIG["board_line_width"]) -> None:
    """背景・グリッド・石・メッセージをまとめて描画する"""
    screen.fill(view.colors["background"])
    draw_grid(screen, view.colors, line_width)
    draw_stones(screen, view)
    draw_message(screen, view)


__all__ = [
    "STONE_RADIUS",
    "PygameView",
    "board_line_specs",
    "draw_board",
    "draw_grid",
    "draw_message",
    "draw_stones",
    "load_font",
]
