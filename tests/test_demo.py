import pygame
import pytest

from tilegui.classic import TILE_B, TILE_C, TILE_SIZE, ClassicGui, ClassicStyle
from tilegui.demo import build_argument_parser, draw_classic_demo, draw_demo, main
from tilegui.gui import Gui
from tilegui.layout import LayoutMode
from tilegui.style import BLACK, BLUE, GREEN, RED

CELL = 8


class FakeFont:
    """One cell per character; renders nothing visible."""

    def size(self, text):
        return (len(text) * CELL, CELL)

    def render(self, text, antialias, color):
        return pygame.Surface((max(len(text), 1) * CELL, CELL), pygame.SRCALPHA)


@pytest.fixture
def gui():
    surface = pygame.Surface((80 * CELL, 47 * CELL))
    return Gui(surface, CELL, CELL, FakeFont(), None)


def test_parser_defaults():
    args = build_argument_parser().parse_args([])
    assert (args.cell, args.grid_width, args.grid_height) == (8, 80, 47)
    assert args.classic is False
    assert args.frames == 0
    assert args.font is None and args.atlas is None


def test_parser_options():
    args = build_argument_parser().parse_args(["--classic", "--frames", "3", "--cell", "16"])
    assert args.classic is True
    assert args.frames == 3
    assert args.cell == 16


def test_draw_demo_without_click_returns_false(gui):
    assert draw_demo(gui, 0) is False


def test_draw_demo_reports_click_on_execute(gui):
    gui.update_mouse((5 * CELL + 4, 39 * CELL + 4), down=False, released=True)
    assert draw_demo(gui, 0) is True


def test_draw_demo_leaves_vbox_active_without_spacing(gui):
    draw_demo(gui, 0)
    assert gui.layout.mode is LayoutMode.VBOX
    assert gui.layout.spacing == 0


def test_draw_demo_paints_text_background(gui):
    draw_demo(gui, 0)
    assert tuple(gui.surface.get_at((30 * CELL + 2, 2 * CELL + 2))) == GREEN.rgba


def test_draw_demo_glyph_colours_depend_only_on_frame(gui):
    cells = [(30 * CELL + x * CELL + 1, 10 * CELL + y * CELL + 1) for x in range(16) for y in range(16)]
    draw_demo(gui, 7)
    first = [tuple(gui.surface.get_at(c)) for c in cells]
    draw_demo(gui, 7)
    second = [tuple(gui.surface.get_at(c)) for c in cells]
    assert first == second
    assert set(first) <= {BLACK.rgba, GREEN.rgba}


def test_draw_classic_demo_tiles_and_state():
    surface = pygame.Surface((80 * TILE_SIZE, 45 * TILE_SIZE))
    atlas = pygame.Surface((16 * TILE_SIZE, 16 * TILE_SIZE))
    atlas.fill(BLACK.rgba)
    for tile, colour in ((TILE_B, RED), (TILE_C, BLUE)):
        atlas.fill(
            colour.rgba,
            pygame.Rect(tile.x * TILE_SIZE, tile.y * TILE_SIZE, TILE_SIZE, TILE_SIZE),
        )
    classic = ClassicGui(surface, FakeFont(), atlas)
    draw_classic_demo(classic)
    assert tuple(surface.get_at((4, 4))) == RED.rgba
    assert tuple(surface.get_at((TILE_SIZE + 4, 4))) == BLUE.rgba
    assert tuple(surface.get_at((4, TILE_SIZE + 4))) == BLUE.rgba
    assert tuple(surface.get_at((TILE_SIZE + 4, TILE_SIZE + 4))) == RED.rgba
    assert classic.mode is LayoutMode.NONE
    assert classic.depth == 0
    assert classic.style == ClassicStyle()


@pytest.mark.parametrize("extra", [[], ["--classic"]])
def test_main_runs_a_few_frames(monkeypatch, extra):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--frames", "2", *extra]) == 0