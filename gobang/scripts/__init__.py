"""対局用の各種スクリプト(PyGame / テキスト表示)をまとめたサブパッケージ

PyGame はウィンドウを開くときだけ必要なので、ここではインポートしない。
"""

from .config_defaults import DEFAULT_CONFIG
from .play_text import play_game_text
from .result_utils import show_results

__all__ = ["DEFAULT_CONFIG", "play_game_text", "show_results"]
