"""Tests for the pygame helpers that do not need an open window."""

import os

import pygame
import pytest

from gobang.core.board import PieceColor
from gobang.core.controller import GameController
from gobang.core.placement import grid_to_window
from gobang.scripts.config_defaults import DEFAULT_CONFIG
from gobang.scripts.pygame_utils import (
    STONE_RADIUS,
    PygameView,
    board_line_specs,
    draw_board,
    draw_message,
    load_font,
)

SIZE = (800, 600)
COLORS = DEFAULT_CONFIG["colors"]


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def pixel(surface, cell):
    x, y = grid_to_window(*cell, surface.get_size())
    return tuple(surface.get_at((int(x), int(y))))[:3]


def test_board_line_specs():
    """15 horizontal and 15 vertical lines centred on the window."""
    specs = board_line_specs((800, 600), line_width=10)
    assert len(specs) == 30
    horizontal = [s for s in specs if s[1] == (430.0, 10)]
    vertical = [s for s in specs if s[1] == (10, 430.0)]
    assert len(horizontal) == 15
    assert len(vertical) == 15
    assert ((400.0, 300.0), (430.0, 10)) in specs
    assert ((400.0, 300.0 - 210.0), (430.0, 10)) in specs
    assert ((400.0 + 210.0, 300.0), (10, 430.0)) in specs


def test_stone_radius():
    assert STONE_RADIUS == 15


def test_view_tracks_controller():
    view = PygameView()
    assert not view.message_visible
    assert view.message == "肮脏的黑客！"

    controller = GameController(view=view)
    for x in range(5):
        controller.place(x, 0)
        if x < 4:
            controller.place(x, 1)
    assert len(view.pieces) == 9
    assert view.message_visible
    assert view.message == "黑棋胜！"

    controller.restart()
    assert view.pieces == []
    assert not view.message_visible


def test_stone_color():
    view = PygameView()
    assert view.stone_color(PieceColor.BLACK) == (0, 0, 0)
    assert view.stone_color(PieceColor.WHITE) == (255, 255, 255)


def test_draw_board_paints_stones_and_grid():
    """Stones sit on the cell centres, bare intersections show the grid."""
    view = PygameView()
    controller = GameController(view=view)
    controller.place(7, 7)
    controller.place(8, 7)

    surface = pygame.Surface(SIZE)
    draw_board(surface, view)

    assert pixel(surface, (7, 7)) == COLORS["black_stone"]
    assert pixel(surface, (8, 7)) == COLORS["white_stone"]
    assert pixel(surface, (0, 0)) == COLORS["board_line"]
    assert pixel(surface, (14, 14)) == COLORS["board_line"]
    assert tuple(surface.get_at((5, 5)))[:3] == COLORS["background"]


def test_draw_board_after_restart_clears_stones():
    view = PygameView()
    controller = GameController(view=view)
    controller.place(7, 7)
    controller.restart()

    surface = pygame.Surface(SIZE)
    draw_board(surface, view)
    assert pixel(surface, (7, 7)) == COLORS["board_line"]


def orange_pixels(surface):
    width, height = surface.get_size()
    return [
        (x, y)
        for x in range(0, width, 2)
        for y in range(0, height, 2)
        if tuple(surface.get_at((x, y)))[:3] == COLORS["message"]
    ]


def test_draw_message_centred_only_when_visible(fonts):
    view = PygameView(font=pygame.font.Font(None, 50))
    surface = pygame.Surface(SIZE)

    draw_message(surface, view)
    assert orange_pixels(surface) == []

    view.show_message("WIN")
    draw_message(surface, view)
    found = orange_pixels(surface)
    assert found
    mean_x = sum(x for x, _ in found) / len(found)
    mean_y = sum(y for _, y in found) / len(found)
    assert abs(mean_x - SIZE[0] / 2) < 40
    assert abs(mean_y - SIZE[1] / 2) < 40


def test_load_font_from_file(fonts):
    path = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    font = load_font(path, 20)
    assert font.get_height() > 0


def test_load_font_warns_without_cjk_font(fonts, monkeypatch):
    monkeypatch.setattr(pygame.font, "match_font", lambda names: None)
    with pytest.warns(RuntimeWarning, match="--font"):
        font = load_font("does/not/exist.ttf", 20)
    assert font.get_height() > 0
