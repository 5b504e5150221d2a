import pygame
import pytest

from tilegui.classic import (
    MAX_LAYOUT_STACK,
    TILE_B,
    TILE_SIZE,
    ClassicGui,
    ClassicStyle,
)
from tilegui.geometry import GridRect
from tilegui.layout import LayoutMode
from tilegui.style import BLACK, BLUE, RED, YELLOW, WHITE, BLANK


class FakeFont:
    """One cell per character; renders a solid block of the text colour."""

    def size(self, text):
        return (len(text) * TILE_SIZE, TILE_SIZE)

    def render(self, text, antialias, color):
        block = pygame.Surface((max(len(text), 1) * TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
        block.fill(color)
        return block


@pytest.fixture
def gui():
    surface = pygame.Surface((640, 360))
    surface.fill(BLACK.rgba)
    return ClassicGui(surface, FakeFont())


def pixel(gui, px, py):
    return tuple(gui.surface.get_at((px, py)))


def test_button_without_layout_uses_given_cell(gui):
    assert gui.button("Play", 3, 3) == GridRect(3, 3, 6, 1)


def test_button_draws_background_border_and_text(gui):
    area = gui.button("Play", 3, 3)
    style = gui.style
    assert pixel(gui, area.x * TILE_SIZE + 3, area.y * TILE_SIZE + 3) == style.background.rgba
    assert pixel(gui, area.x * TILE_SIZE, area.y * TILE_SIZE + 3) == style.border.rgba
    text_x = (area.x + 1) * TILE_SIZE + 2
    assert pixel(gui, text_x, area.y * TILE_SIZE + 2) == style.foreground.rgba


def test_vbox_stacks_buttons_and_ignores_coordinates(gui):
    gui.vbox(1, 25)
    rects = [gui.button(text, 3, 5 + i) for i, text in enumerate(["Play", "FREE DOGS", "$56 entry"])]
    assert [(r.x, r.y) for r in rects] == [(1, 25), (1, 26), (1, 27)]
    assert gui.mode is LayoutMode.VBOX


def test_hbox_advances_by_button_width(gui):
    gui.hbox(2, 4)
    first = gui.button("FILE", 0, 0)
    second = gui.button("VIEW", 0, 0)
    assert (first.x, first.y) == (2, 4)
    assert second.x == first.x + first.w
    assert second.y == first.y


def test_end_box_restores_cursor_and_free_placement(gui):
    before = gui.cursor
    gui.vbox(1, 25)
    gui.button("Play", 0, 0)
    gui.end_box()
    assert gui.cursor == before
    assert gui.mode is LayoutMode.NONE
    assert gui.depth == 0
    placed = gui.button("Play", 7, 8)
    assert (placed.x, placed.y) == (7, 8)


def test_push_is_ignored_when_stack_full(gui):
    for i in range(MAX_LAYOUT_STACK + 4):
        gui.push_layout(GridRect(i, i, 0, 0))
    assert gui.depth == MAX_LAYOUT_STACK
    assert gui.cursor == GridRect(MAX_LAYOUT_STACK - 1, MAX_LAYOUT_STACK - 1, 0, 0)


def test_pop_unwinds_to_origin_and_then_does_nothing(gui):
    origin = gui.cursor
    for i in range(3):
        gui.push_layout(GridRect(i + 5, i, 0, 0))
    for _ in range(5):
        gui.pop_layout()
    assert gui.cursor == origin
    assert gui.depth == 0


def test_set_style_changes_colours(gui):
    gui.set_style(ClassicStyle(RED, YELLOW, RED, 2))
    area = gui.button("Danger!", 3, 3)
    assert pixel(gui, area.x * TILE_SIZE + 4, area.y * TILE_SIZE + 4) == RED.rgba
    assert pixel(gui, (area.x + 2) * TILE_SIZE + 4, area.y * TILE_SIZE + 4) == YELLOW.rgba


def test_rect_without_border_is_all_background(gui):
    gui.set_style(ClassicStyle(BLUE, WHITE, RED, 0))
    gui.rect(GridRect(2, 2, 3, 3))
    assert pixel(gui, 2 * TILE_SIZE, 2 * TILE_SIZE) == BLUE.rgba
    assert pixel(gui, 5 * TILE_SIZE - 1, 5 * TILE_SIZE - 1) == BLUE.rgba
    assert pixel(gui, 5 * TILE_SIZE, 5 * TILE_SIZE) == BLACK.rgba


def test_label_in_transparent_colour_draws_nothing(gui):
    gui.label("ABCdef", 3, 10, BLANK)
    assert pixel(gui, 3 * TILE_SIZE + 1, 10 * TILE_SIZE + 1) == BLACK.rgba
    gui.label("ABCdef", 3, 10, WHITE)
    assert pixel(gui, 3 * TILE_SIZE + 1, 10 * TILE_SIZE + 1) == WHITE.rgba


def test_draw_tile_copies_atlas_region(gui):
    atlas = pygame.Surface((16 * TILE_SIZE, 16 * TILE_SIZE))
    atlas.fill(BLACK.rgba)
    atlas.fill(RED.rgba, pygame.Rect(TILE_B.x * TILE_SIZE, TILE_B.y * TILE_SIZE, TILE_SIZE, TILE_SIZE))
    gui.atlas = atlas
    gui.draw_tile(1, 3, TILE_B)
    assert pixel(gui, TILE_SIZE + 4, 3 * TILE_SIZE + 4) == RED.rgba
    assert pixel(gui, 2 * TILE_SIZE + 4, 3 * TILE_SIZE + 4) == BLACK.rgba


def test_draw_tile_without_atlas_leaves_surface(gui):
    gui.draw_tile(1, 3, TILE_B)
    assert pixel(gui, TILE_SIZE + 4, 3 * TILE_SIZE + 4) == BLACK.rgba