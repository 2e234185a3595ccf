"""``python -m gobang`` で対局を開始するエントリポイント

例:
    $ python -m gobang              # PyGame ウィンドウで対局
    $ python -m gobang --text       # テキストのみで対局
    $ python -m gobang --rule ray   # 8方向に4マス伸ばす判定方式
"""

import argparse

from .core.win_detector import WinRule
from .scripts.config_defaults import DEFAULT_CONFIG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="15x15 五子棋 (二人対戦)")
    parser.add_argument("--text", action="store_true", help="PyGame を使わずテキストで対局する")
    parser.add_argument(
        "--rule",
        choices=[rule.value for rule in WinRule],
        default=DEFAULT_CONFIG["rule"],
        help="勝利判定方式 (line: 両側の連を合算 / ray: 1方向に4マス)",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG["window_size"][0], help="ウィンドウ幅")
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG["window_size"][1], help="ウィンドウ高さ")
    parser.add_argument("--fps", type=int, default=DEFAULT_CONFIG["fps"], help="描画フレームレート (ゲーム進行は 1 秒 60 ティック固定)")
    parser.add_argument("--font", default=None, help="勝利メッセージに使う ttf (中国語対応フォントが無い環境では必須)")
    parser.add_argument("--verbose", action="store_true", help="着手やリスタートを標準出力へ表示する")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    if args.text:
        from .scripts.play_text import play_game_text

        play_game_text(rule=args.rule, verbose=args.verbose)
        return

    # PyGame はウィンドウを開く場合のみインポートする
    from .scripts.play_with_pygame import play_with_pygame

    config = {
        "window_size": (args.width, args.height),
        "fps": args.fps,
        "rule": args.rule,
        "verbose": args.verbose,
    }
    if args.font is not None:
        config["font_path"] = args.font
    play_with_pygame(config)


if __name__ == "__main__":
    main()
