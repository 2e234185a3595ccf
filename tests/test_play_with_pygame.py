"""Tests for the pygame event handling and fixed tick scheduling (headless)."""

import pygame
import pytest

from gobang.core.board import PieceColor
from gobang.core.constants import TICK_RATE
from gobang.core.controller import PLACED, GameController
from gobang.core.placement import grid_to_window
from gobang.scripts.play_with_pygame import TickScheduler, current_window_size, handle_events
from gobang.__main__ import build_parser

SIZE = (800, 600)


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    screen = pygame.display.set_mode(SIZE)
    pygame.event.clear()
    yield screen
    pygame.quit()


def post(event_type, **attrs):
    pygame.event.post(pygame.event.Event(event_type, **attrs))


def test_left_click_sets_pending_click(window):
    controller = GameController()
    x, y = grid_to_window(7, 7, SIZE)
    post(pygame.MOUSEBUTTONDOWN, button=1, pos=(int(x), int(y)))
    assert handle_events(controller) is True
    assert controller.pending_click == (400.0, 300.0)

    result = controller.tick(current_window_size())
    assert result.outcome == PLACED
    assert controller.board.get(7, 7) is PieceColor.BLACK


def test_other_buttons_are_ignored(window):
    controller = GameController()
    post(pygame.MOUSEBUTTONDOWN, button=3, pos=(400, 300))
    post(pygame.MOUSEBUTTONDOWN, button=2, pos=(400, 300))
    assert handle_events(controller) is True
    assert controller.pending_click is None


def test_escape_quits(window):
    post(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert handle_events(GameController()) is False


def test_other_keys_do_not_quit(window):
    post(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert handle_events(GameController()) is True


def test_window_close_quits(window):
    post(pygame.QUIT)
    assert handle_events(GameController()) is False


def test_current_window_size(window):
    assert current_window_size() == SIZE
    pygame.display.quit()
    assert current_window_size() is None


def test_tick_rate_is_fixed():
    """Sixty ticks per second of frame time whatever the render rate."""
    for frame_ms in (200, 100, 50, 16, 1):
        scheduler = TickScheduler()
        frames = 1000 // frame_ms
        total = sum(scheduler.advance(frame_ms) for _ in range(frames))
        assert total == pytest.approx(TICK_RATE * frames * frame_ms / 1000, abs=1)


def test_tick_scheduler_carries_remainder():
    scheduler = TickScheduler()
    assert scheduler.advance(0) == 0
    assert scheduler.advance(10) == 0
    assert scheduler.advance(10) == 1
    assert scheduler.advance(200) == 12


def test_tick_scheduler_limits_catch_up():
    scheduler = TickScheduler()
    assert scheduler.advance(5000) == TICK_RATE
    assert scheduler.advance(0) == 0


def test_fps_flag_does_not_change_tick_rate():
    args = build_parser().parse_args(["--fps", "5"])
    assert args.fps == 5
    scheduler = TickScheduler()
    ticks = sum(scheduler.advance(1000 // args.fps) for _ in range(args.fps))
    assert ticks == TICK_RATE
