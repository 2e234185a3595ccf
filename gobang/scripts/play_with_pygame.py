# play_with_pygame.py

"""PyGame のウィンドウ上で二人対戦を行うスクリプト。

左クリックで石を置き、決着後はどこかをクリックすると盤面をリセットして
次の対局を始める。ESC キーかウィンドウを閉じると終了する。
"""

import os
import warnings

# "Hello from the pygame community" メッセージを抑制する
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

# pkg_resources に関する警告も非表示にする
warnings.filterwarnings(
    "ignore",
    message="pkg_resources is deprecated as an API",
    category=UserWarning,
)

import pygame

from ..core.constants import TICK_RATE
from ..core.controller import GameController
from .config_defaults import DEFAULT_CONFIG
from .pygame_utils import PygameView, draw_board, load_font
from .result_utils import show_results


class TickScheduler:
    """描画フレームの経過時間から、固定レートで回すべきティック数を求める

    描画レート (``fps``) に関係なく 1 秒あたり ``tick_rate`` 回ティックする。
    端数はミリ秒 x ``tick_rate`` の整数で持ち越すので誤差は溜まらない。
    """

    def __init__(self, tick_rate: int = TICK_RATE) -> None:
        self.tick_rate = tick_rate
        self._accumulated = 0

    def advance(self, elapsed_ms: int) -> int:
        """``elapsed_ms`` ミリ秒経過したときに実行すべきティック数を返す"""
        self._accumulated += int(elapsed_ms) * self.tick_rate
        ticks, self._accumulated = divmod(self._accumulated, 1000)
        # 長く止まっていた場合の追いつきは 1 秒分まで
        return min(ticks, self.tick_rate)


def current_window_size():
    """有効なウィンドウがあればその論理サイズ、無ければ ``None``"""
    surface = pygame.display.get_surface()
    if surface is None:
        return None
    return surface.get_size()


def handle_events(controller: GameController) -> bool:
    """イベントを処理し、終了要求があれば ``False`` を返す"""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            controller.click(event.pos)
    return True


def play_with_pygame(config=None) -> GameController:
    """ウィンドウを開いて対局ループを回す。終了時にコントローラを返す"""
    cfg = dict(DEFAULT_CONFIG)
    if config:
        cfg.update(config)

    pygame.init()
    screen = pygame.display.set_mode(cfg["window_size"], pygame.RESIZABLE)
    pygame.display.set_caption(cfg["caption"])
    clock = pygame.time.Clock()
    scheduler = TickScheduler()

    view = PygameView(font=load_font(cfg["font_path"], cfg["font_size"]), colors=cfg["colors"])
    controller = GameController(view=view, rule=cfg["rule"], verbose=cfg["verbose"])

    try:
        running = True
        elapsed_ms = 0
        while running:
            # 入力 -> 経過時間分の固定ティック -> 描画
            running = handle_events(controller)
            for _ in range(scheduler.advance(elapsed_ms)):
                controller.tick(current_window_size())

            screen = pygame.display.get_surface()
            draw_board(screen, view, cfg["board_line_width"])
            pygame.display.flip()
            elapsed_ms = clock.tick(cfg["fps"])
    finally:
        pygame.quit()

    show_results(controller)
    return controller


if __name__ == "__main__":
    play_with_pygame()
