"""Tests for the command line parser."""

from gobang.__main__ import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert not args.text
    assert args.rule == "line"
    assert (args.width, args.height) == (800, 600)
    assert args.fps == 60
    assert args.font is None


def test_options():
    args = build_parser().parse_args(["--text", "--rule", "ray", "--width", "640", "--verbose"])
    assert args.text
    assert args.rule == "ray"
    assert args.width == 640
    assert args.verbose


def test_text_mode_runs(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("7 7\nq\n"))
    main(["--text"])
    out = capsys.readouterr().out
    assert "決着した対局数: 0" in out
